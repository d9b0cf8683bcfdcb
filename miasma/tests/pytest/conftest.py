"""
Shared pytest fixtures for miasma tests.

Test Tier Markers:
  @pytest.mark.evergreen - Tests that always run, never skip (production tests)
  @pytest.mark.dev       - Development/WIP tests, toggle-able
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from miasma.color import Color
from miasma.utils import Logger
from miasma.validators.contrast import ContrastCheck


# =============================================================================
# Test Data Constants
# =============================================================================

BLACK = Color.from_hex("#000000")
WHITE = Color.from_hex("#ffffff")

# Well-known grays on white: 4.54 (passes AA text) and 4.47 (fails)
GRAY_PASS = Color.from_hex("#767676")
GRAY_FAIL = Color.from_hex("#777777")


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test tiers."""
    config.addinivalue_line(
        "markers",
        "evergreen: tests that always run, never skip (production tests)"
    )
    config.addinivalue_line(
        "markers",
        "dev: development/WIP tests, toggle-able for active development"
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def plain_logger() -> Logger:
    """Logger with color disabled, writing to the (captured) std streams."""
    return Logger(use_color=False)


@pytest.fixture
def make_check() -> Callable[..., ContrastCheck]:
    """Factory for checks whose labels default to the colors' hex strings."""

    def _make(
        fg: Color,
        bg: Color,
        level: str = "text",
        fg_label: str | None = None,
        bg_label: str | None = None,
    ) -> ContrastCheck:
        return ContrastCheck(
            level=level,
            foreground=fg,
            background=bg,
            fg_label=fg_label or fg.to_hex(),
            bg_label=bg_label or bg.to_hex(),
        )

    return _make


@pytest.fixture
def passing_checks(make_check: Callable[..., ContrastCheck]) -> list[ContrastCheck]:
    return [
        make_check(WHITE, BLACK, fg_label="white", bg_label="black"),
        make_check(GRAY_PASS, WHITE, fg_label="gray", bg_label="white"),
    ]


@pytest.fixture
def failing_checks(make_check: Callable[..., ContrastCheck]) -> list[ContrastCheck]:
    return [
        make_check(WHITE, BLACK, fg_label="white", bg_label="black"),
        make_check(GRAY_FAIL, WHITE, fg_label="gray", bg_label="white"),
    ]


@pytest.fixture
def temp_output_dir() -> Generator[Path, None, None]:
    """Create a temporary output directory for theme files."""
    with tempfile.TemporaryDirectory(prefix="miasma_test_") as tmpdir:
        yield Path(tmpdir)
