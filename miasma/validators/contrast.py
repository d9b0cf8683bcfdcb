"""
Contrast ratio validator.

Runs an ordered battery of foreground/background checks, each tagged with a
contrast level, and reports every result. A check fails when its unrounded
ratio is below the level's minimum. The report prints ratios truncated to
two decimals, so a printed value never rounds up past a threshold.

The battery always runs to completion so a single build surfaces every
violation. The report is returned to the caller; this module never exits
the process.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from miasma.color import Color, contrast_ratio
from miasma.utils import Logger, log

from .base import BaseValidator, ValidationContext, ValidatorResult
from .registry import register_validator


# =============================================================================
# Contrast Requirements
# =============================================================================

# WCAG AA minimum contrast values
# https://webaim.org/resources/contrastchecker/
CONTRAST: dict[str, float] = {
    "text": 4.5,
    "ui": 3.0,
    # Not a WCAG value
    "decoration": 1.2,
}

RATIO_DECIMALS = 2

# Absorbs float error in exact ratios, e.g. black on white computing as 20.999...
_TRUNCATE_EPSILON = 1e-9

FAIL_MARKER = "[!]"
PASS_MARKER = "   "


def required_ratio(level: str) -> float:
    """Minimum ratio for a contrast level.

    Raises:
        ValueError: If the level is unknown.
    """
    try:
        return CONTRAST[level]
    except KeyError:
        raise ValueError(
            f"Unknown contrast level '{level}'. "
            f"Must be one of: {', '.join(CONTRAST)}"
        ) from None


def truncate_ratio(ratio: float) -> float:
    """Drop digits past RATIO_DECIMALS without rounding up."""
    scale = 10 ** RATIO_DECIMALS
    return math.floor(ratio * scale + _TRUNCATE_EPSILON) / scale


# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class ContrastCheck:
    """One pairing to evaluate."""

    level: str
    foreground: Color
    background: Color
    fg_label: str
    bg_label: str


@dataclass(frozen=True)
class CheckOutcome:
    """A check with its measured ratio and verdict."""

    check: ContrastCheck
    ratio: float
    """Unrounded contrast ratio; the verdict is decided on this value."""
    required: float

    @property
    def display_ratio(self) -> float:
        return truncate_ratio(self.ratio)

    @property
    def passed(self) -> bool:
        return self.ratio >= self.required

    @property
    def failed(self) -> bool:
        return not self.passed


@dataclass
class ContrastReport:
    """Outcomes of one battery run, in input order."""

    outcomes: list[CheckOutcome] = field(default_factory=list)
    failures: list[CheckOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures

    def lines(self, logger: Optional[Logger] = None) -> list[str]:
        return [format_outcome(o, logger) for o in self.outcomes]

    def failure_lines(self, logger: Optional[Logger] = None) -> list[str]:
        return [format_outcome(o, logger) for o in self.failures]


# =============================================================================
# Running and Reporting
# =============================================================================


def evaluate(check: ContrastCheck) -> CheckOutcome:
    required = required_ratio(check.level)
    ratio = contrast_ratio(check.foreground, check.background)
    return CheckOutcome(check=check, ratio=ratio, required=required)


def run_contrast_checks(checks: Iterable[ContrastCheck]) -> ContrastReport:
    """Evaluate every check in order and collect the failures.

    Args:
        checks: Ordered battery. Order is preserved in the report.

    Returns:
        A fresh ContrastReport owned by the caller.

    Raises:
        ValueError: If a check names an unknown contrast level.
    """
    report = ContrastReport()
    for check in checks:
        outcome = evaluate(check)
        report.outcomes.append(outcome)
        if outcome.failed:
            report.failures.append(outcome)
    return report


def format_outcome(outcome: CheckOutcome, logger: Optional[Logger] = None) -> str:
    """Render one report line, e.g. ``[!]  4.49 :: ui.bg0 <- ui.fg``."""
    logger = logger or log
    check = outcome.check
    line = " ".join(
        [
            FAIL_MARKER if outcome.failed else PASS_MARKER,
            logger.style(f"{outcome.display_ratio:5.2f}", "bold", "yellow"),
            logger.style("::", "bold", "magenta"),
            check.bg_label,
            logger.style("<-", "bold", "magenta"),
            check.fg_label,
        ]
    )
    if outcome.failed:
        return logger.style(line, "bold", "red")
    return line


def print_contrast_report(report: ContrastReport, logger: Optional[Logger] = None) -> None:
    """Print every line to stdout; echo failures to stderr.

    After the full report, a CONTRAST FAILURE block repeating each failing
    line is written to stderr when anything failed.
    """
    logger = logger or log
    for outcome, line in zip(report.outcomes, report.lines(logger)):
        logger.out(line)
        if outcome.failed:
            logger.err(line)

    if report.failures:
        logger.err(logger.style("\n>>> CONTRAST FAILURE\n", "bold", "red"))
        for line in report.failure_lines(logger):
            logger.err(line)


# =============================================================================
# Validator
# =============================================================================


@register_validator
class ContrastValidator(BaseValidator):
    """Validates every pairing in the contrast battery.

    Expected context:
        checks: list[ContrastCheck] - the ordered battery

    Recorded metrics:
        checks_run: int
        checks_failed: int
        min_ratio: float | None
    """

    def __init__(self) -> None:
        super().__init__("contrast", "contrast")

    def validate(self, context: ValidationContext) -> ValidatorResult:
        report = run_contrast_checks(context.checks)
        ratios = [o.ratio for o in report.outcomes]

        return self._make_result(
            passed=report.passed,
            findings=[_describe(o) for o in report.failures],
            metrics={
                "checks_run": len(report.outcomes),
                "checks_failed": len(report.failures),
                "min_ratio": min(ratios) if ratios else None,
            },
            details={"report": report},
        )


def _describe(outcome: CheckOutcome) -> str:
    check = outcome.check
    return (
        f"{check.fg_label} on {check.bg_label}: {outcome.display_ratio:.2f} "
        f"< {outcome.required:g} ({check.level})"
    )
