"""
Pluggable validator system for theme checks.

Usage:
    from miasma.validators import ValidationContext, run_validators

    result = run_validators(ValidationContext(theme="miasma", checks=checks))
    if not result.overall_passed:
        ...
"""

from .base import (
    BaseValidator,
    ValidationContext,
    Validator,
    ValidatorResult,
)
from .registry import ValidatorRegistry, discover_validators, register_validator, registry
from .contrast import (
    CONTRAST,
    CheckOutcome,
    ContrastCheck,
    ContrastReport,
    ContrastValidator,
    format_outcome,
    print_contrast_report,
    required_ratio,
    run_contrast_checks,
)
from .theme_format import ThemeFormatValidator
from .runner import RunnerResult, run_validators

__all__ = [
    # Base types
    "ValidationContext",
    "ValidatorResult",
    "Validator",
    "BaseValidator",
    # Registry
    "ValidatorRegistry",
    "registry",
    "register_validator",
    "discover_validators",
    # Contrast
    "CONTRAST",
    "ContrastCheck",
    "CheckOutcome",
    "ContrastReport",
    "ContrastValidator",
    "required_ratio",
    "run_contrast_checks",
    "format_outcome",
    "print_contrast_report",
    # Format
    "ThemeFormatValidator",
    # Runner
    "RunnerResult",
    "run_validators",
]
