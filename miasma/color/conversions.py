"""
Color space conversion math.

Pure functions on floats. RGB values here are always in [0, 1]; integer
channels and hex strings are handled by ``miasma.color.model``.

Two independent paths leave linear RGB:

- CIE: linear RGB -> XYZ (D65) -> CIELAB -> CIE LCH
- OK:  linear RGB -> LMS -> OKLab -> OKLCH

Both share the sRGB transfer function and the polar transform.
"""

from __future__ import annotations

import math

Triple = tuple[float, float, float]


# =============================================================================
# Constants
# =============================================================================

# D65 reference white, Y normalized to 1
D65_WHITE: Triple = (0.95047, 1.0, 1.08883)

# CIE constants, exact rational forms
CIE_EPSILON = 216 / 24389
CIE_KAPPA = 24389 / 27

SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

XYZ_TO_SRGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# Linear sRGB -> LMS
OKLAB_M1 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# Cube-rooted LMS -> OKLab
OKLAB_M2 = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

OKLAB_M2_INV = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

OKLAB_M1_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.5116413734, 1.7076147010),
)

# Below this chroma a color is treated as achromatic and gets hue 0.
# Smaller than the chroma of any non-gray 8-bit sRGB color in either space.
ACHROMATIC_EPSILON = 1e-4


# =============================================================================
# Helpers
# =============================================================================


def _mat_mul(m: tuple[Triple, Triple, Triple], v: Triple) -> Triple:
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1 / 3), x)


def normalize_hue(h: float) -> float:
    """Map any finite angle in degrees into [0, 360)."""
    h = h % 360.0
    # -1e-20 % 360 == 360.0 in floating point
    return 0.0 if h >= 360.0 else h


def clip_unit(v: Triple) -> Triple:
    """Clip each component into [0, 1] (sRGB gamut clipping)."""
    return (
        min(1.0, max(0.0, v[0])),
        min(1.0, max(0.0, v[1])),
        min(1.0, max(0.0, v[2])),
    )


# =============================================================================
# sRGB transfer function
# =============================================================================


def srgb_to_linear(c: float) -> float:
    """Gamma-decode one sRGB channel in [0, 1]."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Gamma-encode one linear channel in [0, 1]."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * c ** (1 / 2.4) - 0.055


def rgb_to_linear(rgb: Triple) -> Triple:
    return (srgb_to_linear(rgb[0]), srgb_to_linear(rgb[1]), srgb_to_linear(rgb[2]))


def linear_to_rgb(lin: Triple) -> Triple:
    # Negative linear light only occurs out of gamut; clip before encoding.
    lin = clip_unit(lin)
    return (linear_to_srgb(lin[0]), linear_to_srgb(lin[1]), linear_to_srgb(lin[2]))


# =============================================================================
# Polar transform (shared by CIE LCH and OKLCH)
# =============================================================================


def rect_to_polar(l: float, a: float, b: float) -> Triple:
    """Lab-like (L, a, b) to LCh-like (L, C, h) with h in degrees."""
    c = math.hypot(a, b)
    if c < ACHROMATIC_EPSILON:
        return (l, 0.0, 0.0)
    return (l, c, normalize_hue(math.degrees(math.atan2(b, a))))


def polar_to_rect(l: float, c: float, h: float) -> Triple:
    rad = math.radians(h)
    return (l, c * math.cos(rad), c * math.sin(rad))


# =============================================================================
# CIE path
# =============================================================================


def linear_to_xyz(lin: Triple) -> Triple:
    return _mat_mul(SRGB_TO_XYZ, lin)


def xyz_to_linear(xyz: Triple) -> Triple:
    return _mat_mul(XYZ_TO_SRGB, xyz)


def _lab_f(t: float) -> float:
    if t > CIE_EPSILON:
        return _cbrt(t)
    return (CIE_KAPPA * t + 16) / 116


def _lab_f_inv(f: float) -> float:
    cubed = f ** 3
    if cubed > CIE_EPSILON:
        return cubed
    return (116 * f - 16) / CIE_KAPPA


def xyz_to_lab(xyz: Triple, white: Triple = D65_WHITE) -> Triple:
    fx = _lab_f(xyz[0] / white[0])
    fy = _lab_f(xyz[1] / white[1])
    fz = _lab_f(xyz[2] / white[2])
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def lab_to_xyz(lab: Triple, white: Triple = D65_WHITE) -> Triple:
    l, a, b = lab
    fy = (l + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    if l > CIE_KAPPA * CIE_EPSILON:
        yr = fy ** 3
    else:
        yr = l / CIE_KAPPA
    return (_lab_f_inv(fx) * white[0], yr * white[1], _lab_f_inv(fz) * white[2])


def rgb_to_lch(rgb: Triple) -> Triple:
    lab = xyz_to_lab(linear_to_xyz(rgb_to_linear(rgb)))
    return rect_to_polar(*lab)


def lch_to_rgb(lch: Triple) -> Triple:
    lab = polar_to_rect(*lch)
    return linear_to_rgb(xyz_to_linear(lab_to_xyz(lab)))


# =============================================================================
# OK path
# =============================================================================


def linear_to_oklab(lin: Triple) -> Triple:
    lms = _mat_mul(OKLAB_M1, lin)
    return _mat_mul(OKLAB_M2, (_cbrt(lms[0]), _cbrt(lms[1]), _cbrt(lms[2])))


def oklab_to_linear(lab: Triple) -> Triple:
    lms_ = _mat_mul(OKLAB_M2_INV, lab)
    return _mat_mul(OKLAB_M1_INV, (lms_[0] ** 3, lms_[1] ** 3, lms_[2] ** 3))


def rgb_to_oklch(rgb: Triple) -> Triple:
    return rect_to_polar(*linear_to_oklab(rgb_to_linear(rgb)))


def oklch_to_rgb(oklch: Triple) -> Triple:
    return linear_to_rgb(oklab_to_linear(polar_to_rect(*oklch)))


# =============================================================================
# HSL
# =============================================================================


def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    """HSL with h in degrees and s, l in [0, 1] to RGB in [0, 1]."""
    chroma = (1 - abs(2 * l - 1)) * s
    sector = normalize_hue(h) / 60
    x = chroma * (1 - abs(sector % 2 - 1))
    m = l - chroma / 2
    if sector < 1:
        r, g, b = chroma, x, 0.0
    elif sector < 2:
        r, g, b = x, chroma, 0.0
    elif sector < 3:
        r, g, b = 0.0, chroma, x
    elif sector < 4:
        r, g, b = 0.0, x, chroma
    elif sector < 5:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x
    return (r + m, g + m, b + m)

