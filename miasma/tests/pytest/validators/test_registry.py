"""
Tests for the validator registry and runner.

Tests cover:
- Registration rules (protocol, duplicate names, categories)
- Lookup by name and category
- Discovery of the built-in validators
- Running validators and aggregating results
"""

from __future__ import annotations

from typing import Callable

import pytest

from miasma.validators import (
    BaseValidator,
    ContrastCheck,
    ValidationContext,
    ValidatorRegistry,
    ValidatorResult,
    discover_validators,
    registry,
    run_validators,
)

from ..conftest import GRAY_FAIL, WHITE


class _AlwaysPass(BaseValidator):
    def __init__(self, name: str = "always-pass", category: str = "format") -> None:
        super().__init__(name, category)

    def validate(self, context: ValidationContext) -> ValidatorResult:
        return self._make_pass(metrics={"theme": context.theme})


class _AlwaysFail(BaseValidator):
    def __init__(self) -> None:
        super().__init__("always-fail", "contrast")

    def validate(self, context: ValidationContext) -> ValidatorResult:
        return self._make_fail(["nope"])


# =============================================================================
# Registry
# =============================================================================


@pytest.mark.evergreen
class TestValidatorRegistry:
    """Tests for ValidatorRegistry."""

    @pytest.fixture
    def fresh(self) -> ValidatorRegistry:
        return ValidatorRegistry()

    def test_register_and_get(self, fresh: ValidatorRegistry) -> None:
        """A registered validator can be fetched by name."""
        validator = _AlwaysPass()
        fresh.register(validator)
        assert fresh.get("always-pass") is validator
        assert "always-pass" in fresh
        assert len(fresh) == 1

    def test_get_missing(self, fresh: ValidatorRegistry) -> None:
        """Unknown names return None."""
        assert fresh.get("missing") is None

    def test_duplicate_name(self, fresh: ValidatorRegistry) -> None:
        """Names are unique."""
        fresh.register(_AlwaysPass())
        with pytest.raises(ValueError, match="already registered"):
            fresh.register(_AlwaysPass())

    def test_invalid_category(self, fresh: ValidatorRegistry) -> None:
        """Categories are restricted to the known set."""
        with pytest.raises(ValueError, match="Invalid category"):
            fresh.register(_AlwaysPass(category="visual"))

    def test_not_a_validator(self, fresh: ValidatorRegistry) -> None:
        """Objects without the protocol are rejected."""
        with pytest.raises(TypeError):
            fresh.register(object())  # type: ignore[arg-type]

    def test_order(self, fresh: ValidatorRegistry) -> None:
        """list_all keeps registration order; list_names is sorted."""
        fresh.register(_AlwaysPass("zeta"))
        fresh.register(_AlwaysPass("alpha"))
        assert [v.name for v in fresh.list_all()] == ["zeta", "alpha"]
        assert fresh.list_names() == ["alpha", "zeta"]


@pytest.mark.evergreen
class TestDiscovery:
    """Tests for the global registry and discovery."""

    def test_builtin_validators_registered(self) -> None:
        """Importing the package registers contrast before theme-format."""
        names = [v.name for v in registry.list_all()]
        assert names[:2] == ["contrast", "theme-format"]

    def test_discovery_is_idempotent(self) -> None:
        """Repeated discovery registers nothing new."""
        discover_validators()
        assert discover_validators() == 0


# =============================================================================
# Runner
# =============================================================================


@pytest.mark.evergreen
class TestRunValidators:
    """Tests for run_validators."""

    @pytest.fixture
    def source(self) -> ValidatorRegistry:
        fresh = ValidatorRegistry()
        fresh.register(_AlwaysPass())
        fresh.register(_AlwaysFail())
        return fresh

    def test_runs_all_in_order(self, source: ValidatorRegistry) -> None:
        """Every validator runs, in registration order."""
        result = run_validators(ValidationContext(theme="t"), source=source)
        assert list(result.results) == ["always-pass", "always-fail"]
        assert not result.overall_passed
        assert result.failed == ["always-fail"]

    def test_subset(self, source: ValidatorRegistry) -> None:
        """names selects and orders a subset."""
        result = run_validators(ValidationContext(theme="t"), names=["always-pass"], source=source)
        assert result.overall_passed
        assert result.results["always-pass"].metrics == {"theme": "t"}

    def test_unknown_name(self, source: ValidatorRegistry) -> None:
        """Unknown names raise KeyError."""
        with pytest.raises(KeyError):
            run_validators(ValidationContext(theme="t"), names=["missing"], source=source)

    def test_global_registry(self, make_check: Callable[..., ContrastCheck]) -> None:
        """With no source, the built-in validators run."""
        context = ValidationContext(
            theme="t",
            checks=[make_check(GRAY_FAIL, WHITE)],
            document={"colors": {}, "tokenColors": [], "type": "dark"},
        )
        result = run_validators(context, names=["contrast", "theme-format"])
        assert result.failed == ["contrast"]
        assert result.results["theme-format"].passed
