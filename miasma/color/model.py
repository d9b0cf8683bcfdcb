"""
Color value type.

A ``Color`` is stored in canonical RGBA form (integer r, g, b in [0, 255] and
real alpha in [0, 1]). It is built from hex, HSL, CIE LCH or OKLCH and
converts back to hex, CIE LCH and OKLCH. Instances are frozen; opacity
changes return new colors.

Usage:
    from miasma.color import Color, hsl, lch

    bg = hsl(160, 50, 14)
    Color.parse("#ff6666").to_lch()
    bg.with_alpha(25).to_hex()
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from typing import Any, Mapping, Union

from . import conversions as cv

# =============================================================================
# Errors
# =============================================================================


class ColorError(ValueError):
    """Base class for invalid color literals."""


class ParseError(ColorError):
    """Color literal is syntactically malformed."""


class RangeError(ColorError):
    """A channel lies outside its defined domain."""


# =============================================================================
# Parsing patterns
# =============================================================================

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_RE = re.compile(r"^(hsl|lch|oklch)\(\s*(.*?)\s*\)$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"^([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)(%|deg)?$")

# Decimal places kept by to_oklch() and shown by format_oklch()
OKLCH_PRECISION = 5
OKLCH_DISPLAY_PRECISION = 2

ColorLike = Union["Color", str, Mapping[str, Any]]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _to_byte(channel: float) -> int:
    return _round_half_up(min(1.0, max(0.0, channel)) * 255)


def _finite(value: Any, what: str, literal: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ParseError(f"{what} is not a number in color {literal!r}") from None
    if not math.isfinite(number):
        raise RangeError(f"{what} must be finite in color {literal!r}")
    return number


def _check_range(value: float, lo: float, hi: float, what: str, literal: Any) -> None:
    if not lo <= value <= hi:
        raise RangeError(f"{what} {value:g} outside [{lo:g}, {hi:g}] in color {literal!r}")


def _split_args(body: str, literal: str) -> list[float]:
    parts = [p for p in re.split(r"[\s,]+", body) if p]
    values = []
    for part in parts:
        match = _NUMBER_RE.match(part)
        if not match:
            raise ParseError(f"Bad component {part!r} in color {literal!r}")
        values.append(float(match.group(1)))
    return values


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True)
class Color:
    """An immutable sRGB color with alpha."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        literal = (self.r, self.g, self.b, self.a)
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise RangeError(f"Channel {name} must be an integer, got {value!r}")
            _check_range(value, 0, 255, f"Channel {name}", literal)
        if isinstance(self.a, bool) or not isinstance(self.a, (int, float)) or not math.isfinite(self.a):
            raise RangeError(f"Alpha must be a finite number, got {self.a!r}")
        _check_range(self.a, 0.0, 1.0, "Alpha", literal)

    def __repr__(self) -> str:
        return f"Color({self.to_hex()!r})"

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_unit_rgb(cls, rgb: cv.Triple, a: float = 1.0) -> Color:
        """Build from channels in [0, 1], clipping and rounding half-up."""
        return cls(_to_byte(rgb[0]), _to_byte(rgb[1]), _to_byte(rgb[2]), float(a))

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA``."""
        if not isinstance(value, str):
            raise ParseError(f"Hex color must be a string, got {value!r}")
        match = _HEX_RE.match(value.strip())
        if not match:
            raise ParseError(f"Malformed hex color {value!r} (expected #RRGGBB or #RRGGBBAA)")
        digits = match.group(1)
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return cls(r, g, b, a)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Color:
        """HSL with h in degrees and s, l in percent."""
        literal = f"hsl({h}, {s}, {l})"
        h = _finite(h, "Hue", literal)
        s = _finite(s, "Saturation", literal)
        l = _finite(l, "Lightness", literal)
        _check_range(s, 0, 100, "Saturation", literal)
        _check_range(l, 0, 100, "Lightness", literal)
        return cls.from_unit_rgb(cv.hsl_to_rgb(h, s / 100, l / 100))

    @classmethod
    def from_lch(cls, l: float, c: float, h: float) -> Color:
        """CIE LCH (D65) with l in [0, 100] and c >= 0. Out of gamut clips."""
        literal = f"lch({l}, {c}, {h})"
        l = _finite(l, "Lightness", literal)
        c = _finite(c, "Chroma", literal)
        h = _finite(h, "Hue", literal)
        _check_range(l, 0, 100, "Lightness", literal)
        if c < 0:
            raise RangeError(f"Chroma must be >= 0 in color {literal!r}")
        return cls.from_unit_rgb(cv.lch_to_rgb((l, c, cv.normalize_hue(h))))

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float) -> Color:
        """OKLCH with l in [0, 1] and c >= 0. Out of gamut clips."""
        literal = f"oklch({l}, {c}, {h})"
        l = _finite(l, "Lightness", literal)
        c = _finite(c, "Chroma", literal)
        h = _finite(h, "Hue", literal)
        _check_range(l, 0, 1, "Lightness", literal)
        if c < 0:
            raise RangeError(f"Chroma must be >= 0 in color {literal!r}")
        return cls.from_unit_rgb(cv.oklch_to_rgb((l, c, cv.normalize_hue(h))))

    @classmethod
    def parse(cls, value: ColorLike) -> Color:
        """Parse any supported color literal.

        Accepts a ``Color`` (returned as is), a hex string, a functional
        string such as ``hsl(160, 50%, 14%)`` or ``oklch(0.7 0.1 85)``, or a
        one-key mapping such as ``{"lch": [40, 65, 65]}``.

        Raises:
            ParseError: The literal is malformed.
            RangeError: A component lies outside its domain.
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, Mapping):
            return cls._parse_mapping(value)
        if not isinstance(value, str):
            raise ParseError(f"Unsupported color literal {value!r}")

        text = value.strip()
        if text.startswith("#"):
            return cls.from_hex(text)

        match = _FUNC_RE.match(text)
        if not match:
            raise ParseError(f"Unrecognized color literal {value!r}")
        space = match.group(1).lower()
        args = _split_args(match.group(2), value)
        return cls._from_space(space, args, value)

    @classmethod
    def _parse_mapping(cls, value: Mapping[str, Any]) -> Color:
        if len(value) != 1:
            raise ParseError(f"Color mapping must have exactly one key, got {dict(value)!r}")
        (space, args), = value.items()
        space = str(space).lower()
        if space == "hex":
            return cls.from_hex(args)
        if space not in ("hsl", "lch", "oklch"):
            raise ParseError(f"Unknown color space {space!r} in {dict(value)!r}")
        if isinstance(args, (str, bytes)) or not hasattr(args, "__iter__"):
            raise ParseError(f"{space} components must be a list in {dict(value)!r}")
        return cls._from_space(space, list(args), dict(value))

    @classmethod
    def _from_space(cls, space: str, args: list[Any], literal: Any) -> Color:
        if len(args) != 3:
            raise ParseError(f"{space} needs 3 components, got {len(args)} in {literal!r}")
        if space == "hsl":
            return cls.from_hsl(*args)
        if space == "lch":
            return cls.from_lch(*args)
        return cls.from_oklch(*args)

    # -------------------------------------------------------------------------
    # Opacity
    # -------------------------------------------------------------------------

    def with_alpha(self, percent: float) -> Color:
        """Return a copy with alpha set to ``percent / 100``.

        This assigns opacity; it does not composite against a backdrop.
        """
        percent = _finite(percent, "Opacity", self)
        _check_range(percent, 0, 100, "Opacity percent", self)
        return replace(self, a=percent / 100)

    @property
    def is_opaque(self) -> bool:
        return self.a >= 1.0

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_unit_rgb(self) -> cv.Triple:
        return (self.r / 255, self.g / 255, self.b / 255)

    def to_hex(self) -> str:
        """Lowercase ``#rrggbb``, or ``#rrggbbaa`` when not fully opaque."""
        rgb = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.is_opaque:
            return rgb
        return f"{rgb}{_round_half_up(self.a * 255):02x}"

    def to_lch(self) -> cv.Triple:
        return cv.rgb_to_lch(self.to_unit_rgb())

    def to_oklch(self) -> cv.Triple:
        l, c, h = cv.rgb_to_oklch(self.to_unit_rgb())
        return (
            round(l, OKLCH_PRECISION),
            round(c, OKLCH_PRECISION),
            round(h, OKLCH_PRECISION),
        )

    def format_lch(self) -> str:
        l, c, h = self.to_lch()
        return f"lch({_round_half_up(l)}, {_round_half_up(c)}, {_round_half_up(h) % 360})"

    def format_oklch(self) -> str:
        l, c, h = (round(v, OKLCH_DISPLAY_PRECISION) for v in self.to_oklch())
        return f"oklch({l:g}, {c:g}, {h:g})"

    def __str__(self) -> str:
        return self.to_hex()


# =============================================================================
# Theme-data helpers
# =============================================================================


def hsl(h: float, s: float, l: float) -> Color:
    """Hand-picked colors are written in HSL."""
    return Color.from_hsl(h, s, l)


def lch(l: float, c: float, h: float) -> Color:
    """Background tints that only need to be roughly right use LCH."""
    return Color.from_lch(l, c, h)


def oklch(l: float, c: float, h: float) -> Color:
    return Color.from_oklch(l, c, h)


def alpha(color: ColorLike, percent: float) -> str:
    """Hex string of ``color`` at ``percent`` opacity.

    Only for the places the editor requires translucency.
    """
    return Color.parse(color).with_alpha(percent).to_hex()
