"""
Tests for the validate-gate-serialize build pipeline.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from miasma.build import BuildConfig, Ok, ValidationFailed, build, check
from miasma.utils import Logger
from miasma.validators import ContrastCheck


@pytest.mark.evergreen
class TestBuild:
    """Tests for build()."""

    def test_writes_when_passing(
        self,
        temp_output_dir: Path,
        passing_checks: list[ContrastCheck],
        plain_logger: Logger,
    ) -> None:
        """A passing battery writes the theme and returns its path."""
        output = temp_output_dir / "themes" / "miasma.json"
        result = build(BuildConfig(output=output, checks=passing_checks), plain_logger)

        assert isinstance(result, Ok)
        assert result.path == output
        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["type"] == "dark"
        assert result.results.overall_passed

    def test_nothing_written_on_failure(
        self,
        temp_output_dir: Path,
        failing_checks: list[ContrastCheck],
        plain_logger: Logger,
    ) -> None:
        """A failing battery leaves the output untouched."""
        output = temp_output_dir / "miasma.json"
        result = build(BuildConfig(output=output, checks=failing_checks), plain_logger)

        assert isinstance(result, ValidationFailed)
        assert not output.exists()
        assert len(result.report.failures) == 1
        assert result.findings == ["gray on white: 4.47 < 4.5 (text)"]

    def test_existing_file_kept_on_failure(
        self,
        temp_output_dir: Path,
        failing_checks: list[ContrastCheck],
        plain_logger: Logger,
    ) -> None:
        """A previous build's output is not overwritten."""
        output = temp_output_dir / "miasma.json"
        output.write_text("previous", encoding="utf-8")
        build(BuildConfig(output=output, checks=failing_checks), plain_logger)
        assert output.read_text(encoding="utf-8") == "previous"

    def test_report_printed(
        self,
        temp_output_dir: Path,
        failing_checks: list[ContrastCheck],
        plain_logger: Logger,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """The full report goes to stdout, the failure block to stderr."""
        build(BuildConfig(output=temp_output_dir / "t.json", checks=failing_checks), plain_logger)
        captured = capsys.readouterr()
        assert "    21.00 :: black <- white" in captured.out.splitlines()
        assert ">>> CONTRAST FAILURE" in captured.err

    def test_format_failure_blocks_write(
        self,
        temp_output_dir: Path,
        passing_checks: list[ContrastCheck],
        plain_logger: Logger,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A malformed document fails even when contrast passes."""
        output = temp_output_dir / "t.json"
        document = {"colors": {"foreground": "hsl(0, 0%, 100%)"}, "tokenColors": [], "type": "dark"}
        result = build(
            BuildConfig(output=output, checks=passing_checks, document=document),
            plain_logger,
        )

        assert isinstance(result, ValidationFailed)
        assert result.report.passed
        assert not output.exists()
        assert "theme-format: colors.foreground" in capsys.readouterr().err

    def test_default_battery(
        self,
        monkeypatch: pytest.MonkeyPatch,
        temp_output_dir: Path,
        passing_checks: list[ContrastCheck],
        plain_logger: Logger,
    ) -> None:
        """Without explicit checks the shipped battery is loaded."""
        monkeypatch.setattr("miasma.build.load_checks", lambda: passing_checks)
        result = build(BuildConfig(output=temp_output_dir / "t.json"), plain_logger)
        assert len(result.report.outcomes) == 2


@pytest.mark.evergreen
class TestCheck:
    """Tests for check()."""

    def test_never_writes(
        self,
        temp_output_dir: Path,
        passing_checks: list[ContrastCheck],
        plain_logger: Logger,
    ) -> None:
        """A passing check-only run returns Ok without a path."""
        output = temp_output_dir / "t.json"
        result = check(BuildConfig(output=output, checks=passing_checks), plain_logger)
        assert isinstance(result, Ok)
        assert result.path is None
        assert not output.exists()

    def test_failure(self, failing_checks: list[ContrastCheck], plain_logger: Logger) -> None:
        """A failing check-only run returns ValidationFailed."""
        result = check(BuildConfig(checks=failing_checks), plain_logger)
        assert isinstance(result, ValidationFailed)

    def test_config_left_unchanged(
        self,
        temp_output_dir: Path,
        passing_checks: list[ContrastCheck],
        plain_logger: Logger,
    ) -> None:
        """A config used for check() still writes when passed to build()."""
        output = temp_output_dir / "t.json"
        config = BuildConfig(output=output, checks=passing_checks)

        check(config, plain_logger)
        assert config.write

        result = build(config, plain_logger)
        assert isinstance(result, Ok)
        assert result.path == output
        assert output.exists()
