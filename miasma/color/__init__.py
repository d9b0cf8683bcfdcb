"""
Color model and contrast math.

Usage:
    from miasma.color import hsl, contrast_ratio

    contrast_ratio(hsl(160, 65, 85), hsl(160, 50, 14))
"""

from .contrast import contrast_ratio, relative_luminance
from .model import (
    Color,
    ColorError,
    ColorLike,
    ParseError,
    RangeError,
    alpha,
    hsl,
    lch,
    oklch,
)

__all__ = [
    # Value type
    "Color",
    "ColorLike",
    # Errors
    "ColorError",
    "ParseError",
    "RangeError",
    # Constructors
    "hsl",
    "lch",
    "oklch",
    "alpha",
    # Contrast
    "relative_luminance",
    "contrast_ratio",
]
