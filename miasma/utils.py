"""
Shared utilities for the miasma theme builder.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

# =============================================================================
# Constants
# =============================================================================

THEMES_DIR = Path("themes")
DEFAULT_THEME_PATH = THEMES_DIR / "miasma-color-theme.json"


# =============================================================================
# Logging
# =============================================================================


class Logger:
    """Simple colored logger with --no-color support."""

    COLORS = {
        "reset": "\033[0m",
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "magenta": "\033[95m",
        "cyan": "\033[96m",
        "bold": "\033[1m",
        "dim": "\033[2m",
    }

    def __init__(
        self,
        use_color: Optional[bool] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self._stdout = stdout
        self._stderr = stderr
        if use_color is None:
            self._use_color = self.stdout.isatty()
        else:
            self._use_color = use_color

    @property
    def stdout(self) -> TextIO:
        # Resolved lazily so pytest's capture swaps are honored.
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def set_color(self, use_color: bool) -> None:
        """Set whether to use color output."""
        self._use_color = use_color

    def _color(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def style(self, text: str, *styles: str) -> str:
        """Wrap text in one or more styles, e.g. style(s, "bold", "red")."""
        if not self._use_color or not styles:
            return text
        prefix = "".join(self.COLORS.get(s, "") for s in styles)
        return f"{prefix}{text}{self.COLORS['reset']}"

    def out(self, line: str) -> None:
        """Write a raw line to stdout."""
        print(line, file=self.stdout)

    def err(self, line: str) -> None:
        """Write a raw line to stderr."""
        print(line, file=self.stderr)

    def header(self, message: str) -> None:
        """Print a section header."""
        print(
            f"\n{self._color('===', 'cyan')} {self._color(message, 'bold')} {self._color('===', 'cyan')}",
            file=self.stdout,
        )

    def success(self, message: str) -> None:
        """Print a success message."""
        print(f"  {self._color('[OK]', 'green')} {message}", file=self.stdout)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        print(f"  {self._color('[WARN]', 'yellow')} {message}", file=self.stderr)

    def error(self, message: str) -> None:
        """Print an error message."""
        print(f"  {self._color('[ERROR]', 'red')} {message}", file=self.stderr)


# Global logger instance
log = Logger()
