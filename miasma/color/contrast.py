"""Contrast utilities implementing WCAG 2.1 relative luminance and contrast ratio.

Public API:
- relative_luminance(color) -> float
- contrast_ratio(a, b) -> float

Colors are assumed to be opaque. Alpha is ignored rather than composited;
callers that need a translucent color checked must flatten it first.
"""

from __future__ import annotations

from .conversions import srgb_to_linear
from .model import Color, ColorLike

# Rec. 709 coefficients used by WCAG
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Flare term added to both luminances
CONTRAST_OFFSET = 0.05


def relative_luminance(color: ColorLike) -> float:
    r, g, b = Color.parse(color).to_unit_rgb()
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * srgb_to_linear(r) + wg * srgb_to_linear(g) + wb * srgb_to_linear(b)


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    """WCAG contrast ratio between two colors, in [1, 21] and symmetric."""
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + CONTRAST_OFFSET) / (darker + CONTRAST_OFFSET)
