"""
Theme build pipeline.

Validate, gate, then serialize. The theme file is written only after every
validator has passed; a failed gate is returned as ``ValidationFailed`` and
the caller decides how to terminate.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional, Union

from miasma.theme import load_checks, theme_document, write_theme
from miasma.utils import DEFAULT_THEME_PATH, Logger, log
from miasma.validators import (
    ContrastCheck,
    ContrastReport,
    RunnerResult,
    ValidationContext,
    print_contrast_report,
    run_validators,
)

THEME_NAME = "miasma"


# =============================================================================
# Configuration and Results
# =============================================================================


@dataclass
class BuildConfig:
    """Configuration for a build run."""

    output: Path = field(default_factory=lambda: DEFAULT_THEME_PATH)
    write: bool = True  # False for check-only runs
    checks: Optional[list[ContrastCheck]] = None  # None loads checks.yaml
    document: Optional[dict[str, Any]] = None  # None assembles the miasma theme


@dataclass
class Ok:
    """Every validator passed; ``path`` is None for check-only runs."""

    report: ContrastReport
    results: RunnerResult
    path: Optional[Path] = None


@dataclass
class ValidationFailed:
    """At least one validator failed; nothing was written."""

    report: ContrastReport
    results: RunnerResult

    @property
    def findings(self) -> list[str]:
        return [f for r in self.results.results.values() for f in r.findings]


BuildResult = Union[Ok, ValidationFailed]


# =============================================================================
# Pipeline
# =============================================================================


def validate(config: BuildConfig, logger: Optional[Logger] = None) -> tuple[ValidationContext, RunnerResult]:
    """Run all validators and print the contrast report."""
    logger = logger or log
    checks = config.checks if config.checks is not None else load_checks()
    document = config.document if config.document is not None else theme_document()

    context = ValidationContext(theme=THEME_NAME, checks=checks, document=document)
    results = run_validators(context)

    contrast = results.results["contrast"]
    print_contrast_report(contrast.details["report"], logger)

    for name in results.failed:
        if name == "contrast":
            continue
        for finding in results.results[name].findings:
            logger.error(f"{name}: {finding}")

    return context, results


def build(config: Optional[BuildConfig] = None, logger: Optional[Logger] = None) -> BuildResult:
    """Validate the theme and, if it passes, write it.

    Returns:
        Ok with the written path, or ValidationFailed with the report.
    """
    config = config or BuildConfig()
    logger = logger or log

    context, results = validate(config, logger)
    report: ContrastReport = results.results["contrast"].details["report"]

    if not results.overall_passed:
        return ValidationFailed(report=report, results=results)

    path = None
    if config.write:
        path = write_theme(context.document, config.output)
    return Ok(report=report, results=results, path=path)


def check(config: Optional[BuildConfig] = None, logger: Optional[Logger] = None) -> BuildResult:
    """Validate without writing anything."""
    return build(replace(config or BuildConfig(), write=False), logger)
