"""
Miasma theme data: palettes, contrast battery, UI roles and token rules.
"""

from .palette import BG, DIFF, HUE, PALETTES, SYNTAX, TERMINAL, TRANSPARENT, UI, get_palette, lookup
from .checks import expand_checks, load_checks
from .sections import SECTIONS, colors, compose
from .tokens import ColorSetting, StyleOnlySetting, TokenColor, token_colors
from .serialize import dumps, sorted_mapping, theme_document, write_theme

__all__ = [
    # Palettes
    "HUE",
    "UI",
    "SYNTAX",
    "TERMINAL",
    "DIFF",
    "BG",
    "TRANSPARENT",
    "PALETTES",
    "get_palette",
    "lookup",
    # Battery
    "load_checks",
    "expand_checks",
    # UI roles
    "SECTIONS",
    "compose",
    "colors",
    # Tokens
    "ColorSetting",
    "StyleOnlySetting",
    "TokenColor",
    "token_colors",
    # Output
    "sorted_mapping",
    "theme_document",
    "dumps",
    "write_theme",
]
