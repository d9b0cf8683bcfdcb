"""
Tests for the theme document format validator.
"""

from __future__ import annotations

from typing import Any

import pytest

from miasma.theme import theme_document
from miasma.validators import ValidationContext
from miasma.validators.theme_format import ThemeFormatValidator, iter_document_colors

from .base_test import ValidatorPropertiesTestMixin


def _document(**colors: Any) -> dict[str, Any]:
    return {
        "colors": dict(sorted(colors.items())),
        "tokenColors": [
            {"scope": "comment", "settings": {"foreground": "#808080"}},
            {"scope": "strong", "settings": {"fontStyle": "bold"}},
        ],
        "type": "dark",
    }


@pytest.mark.evergreen
class TestThemeFormatValidatorProperties(ValidatorPropertiesTestMixin):
    """Property tests for ThemeFormatValidator."""

    validator_name = "theme-format"
    validator_category = "format"

    @pytest.fixture
    def validator(self) -> ThemeFormatValidator:
        return ThemeFormatValidator()


@pytest.mark.evergreen
class TestIterDocumentColors:
    """Tests for locating color slots."""

    def test_finds_ui_and_token_colors(self) -> None:
        """UI roles and token foregrounds are yielded; style-only rules are not."""
        slots = list(iter_document_colors(_document(foreground="#ffffff")))
        assert slots == [
            ("colors.foreground", "#ffffff"),
            ("tokenColors[0].foreground", "#808080"),
        ]

    def test_empty_document(self) -> None:
        """A document without colors yields nothing."""
        assert list(iter_document_colors({})) == []


@pytest.mark.evergreen
class TestThemeFormatValidator:
    """Tests for ThemeFormatValidator.validate."""

    @pytest.fixture
    def validator(self) -> ThemeFormatValidator:
        return ThemeFormatValidator()

    def test_valid_document(self, validator: ThemeFormatValidator) -> None:
        """Sorted keys and hex colors pass."""
        document = _document(foreground="#ffffff", **{"widget.shadow": "#12362a80"})
        result = validator.validate(ValidationContext(theme="test", document=document))
        assert result.passed
        assert result.metrics == {"colors_checked": 3, "bad_colors": 0, "unsorted_objects": 0}

    @pytest.mark.parametrize("value", ["#FFFFFF", "#fff", "hsl(0, 0%, 100%)", 255])
    def test_bad_color(self, validator: ThemeFormatValidator, value: Any) -> None:
        """Anything but lowercase 6/8-digit hex is flagged."""
        document = _document(foreground=value)
        result = validator.validate(ValidationContext(theme="test", document=document))
        assert not result.passed
        assert result.metrics["bad_colors"] == 1
        assert result.findings[0].startswith("colors.foreground:")

    def test_unsorted_keys(self, validator: ThemeFormatValidator) -> None:
        """Out-of-order keys at any level are flagged."""
        document = _document(foreground="#ffffff")
        document["colors"] = {"b.role": "#000000", "a.role": "#ffffff"}
        result = validator.validate(ValidationContext(theme="test", document=document))
        assert not result.passed
        assert result.metrics["unsorted_objects"] == 1
        assert "colors: keys are not sorted" in result.findings

    def test_missing_document(self, validator: ThemeFormatValidator) -> None:
        """A context without a document fails."""
        result = validator.validate(ValidationContext(theme="test"))
        assert not result.passed
        assert result.findings == ["No theme document in context"]

    def test_miasma_document_is_well_formed(self, validator: ThemeFormatValidator) -> None:
        """The assembled miasma theme passes the format checks."""
        result = validator.validate(ValidationContext(theme="miasma", document=theme_document()))
        assert result.passed, result.findings
        assert result.metrics["colors_checked"] > 100
