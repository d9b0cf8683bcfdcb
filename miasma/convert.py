"""
Palette listings in other color spaces.

Prints a palette as a block of LCH or OKLCH literals, useful when porting
hand-picked HSL colors to a perceptual space.
"""

from __future__ import annotations

from typing import Mapping

from miasma.color import Color


def palette_as_lch(name: str, palette: Mapping[str, Color]) -> list[str]:
    """CIE LCH listing, values rounded to integers."""
    lines = [f"const {name} = {{"]
    for role, color in palette.items():
        lines.append(f"  {role}: {color.format_lch()},")
    lines.append("};")
    return lines


def palette_as_oklch(name: str, palette: Mapping[str, Color]) -> list[str]:
    """OKLCH listing, values rounded to 2 decimals."""
    lines = [f"const {name} = {{"]
    for role, color in palette.items():
        lines.append(f"  {role}: {color.format_oklch()},")
    lines.append("} as const;")
    return lines


FORMATTERS = {
    "lch": palette_as_lch,
    "oklch": palette_as_oklch,
}
