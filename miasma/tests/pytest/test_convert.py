"""
Tests for palette listings in LCH and OKLCH.
"""

from __future__ import annotations

import pytest

from miasma.color import Color
from miasma.convert import FORMATTERS, palette_as_lch, palette_as_oklch
from miasma.theme import UI


@pytest.mark.evergreen
class TestPaletteListings:
    """Tests for the listing formatters."""

    def test_lch(self) -> None:
        """LCH listing with integer components."""
        palette = {"red": Color(255, 0, 0), "white": Color(255, 255, 255)}
        assert palette_as_lch("sample", palette) == [
            "const sample = {",
            "  red: lch(53, 105, 40),",
            "  white: lch(100, 0, 0),",
            "};",
        ]

    def test_oklch(self) -> None:
        """OKLCH listing with two decimals and a const assertion."""
        assert palette_as_oklch("sample", {"red": Color(255, 0, 0)}) == [
            "const sample = {",
            "  red: oklch(0.63, 0.26, 29.23),",
            "} as const;",
        ]

    def test_palette_order(self) -> None:
        """Roles are listed in palette order."""
        lines = palette_as_lch("ui", UI)
        roles = [line.split(":")[0].strip() for line in lines[1:-1]]
        assert roles == list(UI)

    def test_formatters(self) -> None:
        """Both spaces are available by name."""
        assert FORMATTERS == {"lch": palette_as_lch, "oklch": palette_as_oklch}
