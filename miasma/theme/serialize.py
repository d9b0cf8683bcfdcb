"""
Theme document assembly and JSON output.

Keys are sorted at every object level so the file always comes out in the
same order, and minor refactoring doesn't cause the build output to change.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .sections import ThemeUIColors, colors
from .tokens import ColorSetting, StyleOnlySetting, TokenColor, TokenSetting, token_colors

logger = logging.getLogger(__name__)

THEME_TYPE = "dark"


def sorted_mapping(obj: Any) -> Any:
    """Recursively sort dict keys and drop None values.

    Lists keep their order; their elements are normalized.
    """
    if isinstance(obj, dict):
        return {
            key: sorted_mapping(obj[key])
            for key in sorted(obj)
            if obj[key] is not None
        }
    if isinstance(obj, (list, tuple)):
        return [sorted_mapping(item) for item in obj]
    return obj


def setting_to_dict(setting: TokenSetting) -> dict[str, str]:
    """Serialize one of the two token setting shapes.

    Raises:
        TypeError: For anything that is neither shape.
    """
    if isinstance(setting, ColorSetting):
        data = {"foreground": setting.foreground}
        if setting.font_style is not None:
            data["fontStyle"] = setting.font_style
        return data
    if isinstance(setting, StyleOnlySetting):
        return {"fontStyle": setting.font_style}
    raise TypeError(f"Unknown token setting {type(setting).__name__}")


def token_to_dict(token: TokenColor) -> dict[str, Any]:
    scope = token.scope if isinstance(token.scope, str) else list(token.scope)
    data: dict[str, Any] = {"scope": scope, "settings": setting_to_dict(token.settings)}
    if token.name is not None:
        data["name"] = token.name
    return data


def theme_document(
    ui_colors: Optional[ThemeUIColors] = None,
    tokens: Optional[list[TokenColor]] = None,
) -> dict[str, Any]:
    """Assemble the theme document with every object's keys sorted."""
    ui_colors = colors() if ui_colors is None else ui_colors
    tokens = token_colors() if tokens is None else tokens
    return sorted_mapping(
        {
            "type": THEME_TYPE,
            "colors": ui_colors,
            "tokenColors": [token_to_dict(t) for t in tokens],
        }
    )


def dumps(document: dict[str, Any]) -> str:
    return json.dumps(document, indent=2)


def write_theme(document: dict[str, Any], path: Path) -> Path:
    """Write the document as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(document), encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path
