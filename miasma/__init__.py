"""
miasma - dark editor color theme builder.

Builds the theme from hand-picked palettes and refuses to write it unless
every foreground/background pairing meets its WCAG contrast minimum.

Usage:
    python -m miasma <command> [options]

Commands:
    build       Check contrast, then write the theme JSON
    check       Check contrast only
    convert     Print a palette as LCH or OKLCH literals
"""

from .cli import __version__, main

__all__ = ["__version__", "main"]
