"""
Validator runner: runs registered validators against one theme context and
aggregates their results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .base import ValidationContext, ValidatorResult
from .registry import ValidatorRegistry, discover_validators, registry

logger = logging.getLogger(__name__)


# =============================================================================
# Result Type
# =============================================================================


@dataclass
class RunnerResult:
    """Aggregated result from running a set of validators."""

    results: dict[str, ValidatorResult] = field(default_factory=dict)
    """Validator name -> ValidatorResult, in run order."""

    @property
    def overall_passed(self) -> bool:
        """True if every validator that ran passed."""
        return all(r.passed for r in self.results.values())

    @property
    def failed(self) -> list[str]:
        return [name for name, r in self.results.items() if not r.passed]


# =============================================================================
# Running
# =============================================================================


def run_validators(
    context: ValidationContext,
    names: Optional[Sequence[str]] = None,
    source: Optional[ValidatorRegistry] = None,
) -> RunnerResult:
    """Run validators in registration order (or in ``names`` order).

    Args:
        context: Theme context passed to every validator.
        names: Optional subset of validator names to run.
        source: Registry to read from; defaults to the global registry.

    Raises:
        KeyError: If a requested validator is not registered.
    """
    if source is None:
        discover_validators()
        source = registry

    if names is None:
        validators = source.list_all()
    else:
        validators = []
        for name in names:
            validator = source.get(name)
            if validator is None:
                raise KeyError(f"Unknown validator '{name}'. Known: {', '.join(source.list_names())}")
            validators.append(validator)

    result = RunnerResult()
    for validator in validators:
        logger.debug("Running validator %s", validator.name)
        result.results[validator.name] = validator.validate(context)
    return result
