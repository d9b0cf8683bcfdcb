"""
Theme document format validator.

The editor only understands final hex strings. Every UI color and every
token foreground in the serialized document must be ``#rrggbb`` or
``#rrggbbaa`` (lowercase), and the document's keys must be sorted so the
written file is stable across refactors.
"""

from __future__ import annotations

import re
from typing import Any, Iterator

from .base import BaseValidator, ValidationContext, ValidatorResult
from .registry import register_validator

HEX_COLOR_RE = re.compile(r"^#[0-9a-f]{6}([0-9a-f]{2})?$")


def iter_document_colors(document: dict[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield (location, value) for every color slot in a theme document."""
    for role, value in document.get("colors", {}).items():
        yield f"colors.{role}", value
    for index, rule in enumerate(document.get("tokenColors", [])):
        settings = rule.get("settings", {})
        if "foreground" in settings:
            yield f"tokenColors[{index}].foreground", settings["foreground"]


def _unsorted_paths(node: Any, path: str = "") -> Iterator[str]:
    if isinstance(node, dict):
        keys = list(node.keys())
        if keys != sorted(keys):
            yield path or "<root>"
        for key, value in node.items():
            yield from _unsorted_paths(value, f"{path}.{key}" if path else key)
    elif isinstance(node, list):
        for index, item in enumerate(node):
            yield from _unsorted_paths(item, f"{path}[{index}]")


@register_validator
class ThemeFormatValidator(BaseValidator):
    """Validates that the theme document is ready to serialize.

    Expected context:
        document: dict - the assembled theme document

    Recorded metrics:
        colors_checked: int
        bad_colors: int
        unsorted_objects: int
    """

    def __init__(self) -> None:
        super().__init__("theme-format", "format")

    def validate(self, context: ValidationContext) -> ValidatorResult:
        if context.document is None:
            return self._make_fail(
                findings=["No theme document in context"],
                metrics={"colors_checked": 0, "bad_colors": 0, "unsorted_objects": 0},
            )

        findings: list[str] = []
        checked = 0
        bad = 0
        for location, value in iter_document_colors(context.document):
            checked += 1
            if not isinstance(value, str) or not HEX_COLOR_RE.match(value):
                bad += 1
                findings.append(f"{location}: {value!r} is not a final hex color")

        unsorted = list(_unsorted_paths(context.document))
        for path in unsorted:
            findings.append(f"{path}: keys are not sorted")

        metrics = {
            "colors_checked": checked,
            "bad_colors": bad,
            "unsorted_objects": len(unsorted),
        }
        if findings:
            return self._make_fail(findings=findings, metrics=metrics)
        return self._make_pass(metrics=metrics)
