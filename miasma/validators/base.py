"""
Base types and protocols for the pluggable theme validator system.

Defines the contract that all validators must follow, plus data containers
for validation context and results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .contrast import ContrastCheck


# =============================================================================
# Data Containers
# =============================================================================


@dataclass
class ValidationContext:
    """Context provided to validators for execution.

    Carries the resolved theme: the contrast battery and the serializable
    theme document.
    """

    theme: str
    """Theme identifier (e.g., 'miasma')."""

    checks: list[ContrastCheck] = field(default_factory=list)
    """Ordered contrast battery."""

    document: Optional[dict[str, Any]] = None
    """Theme document as it will be serialized, if already assembled."""


@dataclass
class ValidatorResult:
    """Result returned by a validator after execution.

    Captures pass/fail status, detailed findings and optional metrics.
    """

    validator: str
    """Name of the validator that produced this result."""

    passed: bool
    """Whether the validation passed."""

    findings: list[str] = field(default_factory=list)
    """Human-readable descriptions of issues found (empty if passed)."""

    metrics: dict[str, Any] = field(default_factory=dict)
    """Optional metrics: counts, measurements, etc."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional structured data for reporting."""


# =============================================================================
# Protocols (Interfaces)
# =============================================================================


@runtime_checkable
class Validator(Protocol):
    """Protocol for validators.

    Categories:
        - "contrast": Foreground/background legibility checks
        - "format": Shape of the serialized theme document
    """

    @property
    def name(self) -> str:
        """Unique identifier for this validator."""
        ...

    @property
    def category(self) -> str:
        """Validator category: 'contrast' or 'format'."""
        ...

    def validate(self, context: ValidationContext) -> ValidatorResult:
        """Execute validation and return results."""
        ...


# =============================================================================
# Base Classes (Optional Implementations)
# =============================================================================


class BaseValidator:
    """Optional base class providing common validator functionality."""

    def __init__(self, name: str, category: str) -> None:
        self._name = name
        self._category = category

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> str:
        return self._category

    def validate(self, context: ValidationContext) -> ValidatorResult:
        """Override this method in subclasses."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement validate()"
        )

    def _make_result(
        self,
        passed: bool,
        findings: Optional[list[str]] = None,
        **kwargs: Any,
    ) -> ValidatorResult:
        """Helper to create a ValidatorResult with this validator's name."""
        return ValidatorResult(
            validator=self.name,
            passed=passed,
            findings=findings or [],
            **kwargs,
        )

    def _make_pass(self, **kwargs: Any) -> ValidatorResult:
        """Helper to create a passing result."""
        return self._make_result(passed=True, **kwargs)

    def _make_fail(self, findings: list[str], **kwargs: Any) -> ValidatorResult:
        """Helper to create a failing result."""
        return self._make_result(passed=False, findings=findings, **kwargs)
