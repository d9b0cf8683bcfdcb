"""
Base test mixins for validator test classes.

Usage:
    class TestValidatorProperties(ValidatorPropertiesTestMixin):
        validator_name = "contrast"
        validator_category = "contrast"

        @pytest.fixture
        def validator(self):
            return ContrastValidator()
"""

from __future__ import annotations

from typing import Any

import pytest


# =============================================================================
# Validator Properties Mixin
# =============================================================================


class ValidatorPropertiesTestMixin:
    """Mixin providing standard validator property tests.

    Subclasses must define:
        validator_name: str - expected validator name (e.g., "theme-format")
        validator_category: str - expected category (default: "contrast")

    Subclasses must also provide a `validator` pytest fixture that returns
    an instance of the validator being tested.
    """

    validator_name: str
    validator_category: str = "contrast"

    @pytest.mark.evergreen
    def test_name(self, validator: Any) -> None:
        """Verify validator has correct name."""
        assert validator.name == self.validator_name

    @pytest.mark.evergreen
    def test_category(self, validator: Any) -> None:
        """Verify validator has correct category."""
        assert validator.category == self.validator_category

    @pytest.mark.evergreen
    def test_implements_protocol(self, validator: Any) -> None:
        """Verify validator satisfies the Validator protocol."""
        from miasma.validators import Validator

        assert isinstance(validator, Validator)
