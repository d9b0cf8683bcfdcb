"""
Tests for WCAG relative luminance and contrast ratio.
"""

from __future__ import annotations

import pytest

from miasma.color import Color, contrast_ratio, hsl, relative_luminance

from .conftest import BLACK, GRAY_FAIL, GRAY_PASS, WHITE


@pytest.mark.evergreen
class TestRelativeLuminance:
    """Tests for relative_luminance."""

    def test_black_and_white(self) -> None:
        """Black is 0 and white is 1."""
        assert relative_luminance(BLACK) == 0.0
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_channel_weights(self) -> None:
        """Pure primaries give their Rec. 709 weight."""
        assert relative_luminance("#ff0000") == pytest.approx(0.2126)
        assert relative_luminance("#00ff00") == pytest.approx(0.7152)
        assert relative_luminance("#0000ff") == pytest.approx(0.0722)

    def test_accepts_literals(self) -> None:
        """Any color literal is accepted."""
        assert relative_luminance("hsl(0, 0%, 100%)") == pytest.approx(1.0)


@pytest.mark.evergreen
class TestContrastRatio:
    """Tests for contrast_ratio."""

    def test_maximum(self) -> None:
        """Black on white is 21:1."""
        assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)

    def test_identical_colors(self) -> None:
        """A color against itself is 1:1."""
        assert contrast_ratio(GRAY_PASS, GRAY_PASS) == pytest.approx(1.0)

    def test_symmetric(self) -> None:
        """Argument order does not matter."""
        assert contrast_ratio(GRAY_PASS, WHITE) == contrast_ratio(WHITE, GRAY_PASS)

    def test_aa_threshold_grays(self) -> None:
        """#767676 just passes 4.5:1 on white and #777777 just fails."""
        assert round(contrast_ratio(GRAY_PASS, WHITE), 2) == 4.54
        assert round(contrast_ratio(GRAY_FAIL, WHITE), 2) == 4.48

    def test_alpha_is_ignored(self) -> None:
        """Translucent colors are measured as if opaque."""
        assert contrast_ratio("#00000080", WHITE) == pytest.approx(21.0)

    def test_accepts_mixed_literals(self) -> None:
        """Colors and literal strings can be mixed."""
        assert contrast_ratio("#000000", Color(255, 255, 255)) == pytest.approx(21.0)

    @pytest.mark.parametrize("args", [(160, 50, 14), (85, 90, 50), (330, 85, 80), (20, 30, 90)])
    def test_hex_round_trip(self, args: tuple[float, float, float]) -> None:
        """An HSL color and its hex form measure the same against a fixed background."""
        color = hsl(*args)
        reparsed = Color.from_hex(color.to_hex())
        assert contrast_ratio(reparsed, BLACK) == pytest.approx(contrast_ratio(color, BLACK), abs=0.01)

    def test_bounds(self) -> None:
        """Ratios always lie in [1, 21]."""
        samples = ["#12362a", "#ff6666", "#808080", "#e0f5ee", "#000000", "#ffffff"]
        for a in samples:
            for b in samples:
                assert 1.0 <= contrast_ratio(a, b) <= 21.0 + 1e-9
