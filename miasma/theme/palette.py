"""
Miasma palettes.

Every color the theme uses is defined here, built through the color model's
constructors. Palettes are ordered mappings; the order is the order checks
iterate them in.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from miasma.color import Color, hsl, lch

HUE: Mapping[str, int] = MappingProxyType(
    {
        "bg": 160,
        "uno": 85,
        "due": 20,
        "tre": 330,
    }
)

TRANSPARENT = "#00000000"

UI: Mapping[str, Color] = MappingProxyType(
    {
        "bg0": hsl(HUE["bg"], 50, 14),
        "bg1": hsl(HUE["bg"], 50, 17),
        "fg": hsl(HUE["bg"], 65, 85),
        "border0": hsl(HUE["bg"], 50, 25),
        "border1": hsl(HUE["bg"], 50, 45),
        "link": hsl(HUE["uno"], 90, 50),
        "accent0": hsl(HUE["tre"], 90, 80),
        "accent1": hsl(HUE["due"], 90, 80),
        "bracket1": hsl(HUE["uno"], 40, 50),
        "bracket2": hsl(HUE["due"], 40, 60),
        "bracket3": hsl(HUE["tre"], 30, 65),
        "error": Color.from_hex("#ff6666"),
    }
)

SYNTAX: Mapping[str, Color] = MappingProxyType(
    {
        "default": UI["fg"],
        "alt0": hsl(HUE["bg"], 15, 60),
        "alt1": hsl(HUE["bg"], 40, 48),
        "uno0": hsl(HUE["uno"], 80, 80),
        "uno1": hsl(HUE["uno"], 70, 60),
        "due0": hsl(HUE["due"], 100, 90),
        "due1": hsl(HUE["due"], 85, 80),
        "due2": hsl(HUE["due"], 90, 60),
        "tre0": hsl(HUE["tre"], 100, 90),
        "tre1": hsl(HUE["tre"], 85, 80),
        "tre2": hsl(HUE["tre"], 90, 70),
    }
)

TERMINAL: Mapping[str, Color] = MappingProxyType(
    {
        "black": hsl(HUE["bg"], 35, 25),
        "red": hsl(HUE["tre"], 80, 70),
        "green": hsl(HUE["uno"], 90, 70),
        "yellow": hsl(HUE["due"], 80, 70),
        "blue": hsl(220, 90, 70),
        "magenta": hsl(290, 80, 70),
        "cyan": hsl(180, 90, 70),
        "white": hsl(HUE["due"], 30, 90),
    }
)

DIFF: Mapping[str, Color] = MappingProxyType(
    {
        "red": hsl(340, 100, 30),
        "blue": hsl(220, 100, 30),
    }
)

# Translucent highlight tints only, so LCH is close enough
BG: Mapping[str, Color] = MappingProxyType(
    {
        "orange": lch(40, 65, 65),
        "yellow": lch(40, 65, 100),
        "blue": lch(40, 65, 270),
        "purple": lch(40, 65, 330),
    }
)

PALETTES: Mapping[str, Mapping[str, Color]] = MappingProxyType(
    {
        "ui": UI,
        "syntax": SYNTAX,
        "terminal": TERMINAL,
        "diff": DIFF,
        "bg": BG,
    }
)


def get_palette(name: str) -> Mapping[str, Color]:
    """Return a palette by name.

    Raises:
        KeyError: If no such palette exists.
    """
    try:
        return PALETTES[name]
    except KeyError:
        raise KeyError(
            f"Unknown palette '{name}'. Known: {', '.join(PALETTES)}"
        ) from None


def lookup(path: str) -> Color:
    """Resolve a dotted role name such as ``ui.bg0``.

    Raises:
        KeyError: If the palette or the role does not exist.
    """
    palette_name, _, role = path.partition(".")
    palette = get_palette(palette_name)
    if not role or role not in palette:
        raise KeyError(f"Unknown color '{path}'")
    return palette[role]
