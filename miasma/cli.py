"""
Main CLI for the miasma theme builder.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .utils import DEFAULT_THEME_PATH, log


# =============================================================================
# Version
# =============================================================================

__version__ = "0.1.0"


# =============================================================================
# Argument Parsing
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with all subcommands."""

    parser = argparse.ArgumentParser(
        prog="miasma",
        description="Build and contrast-check the miasma color theme",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  build       Check contrast, then write the theme JSON
  check       Check contrast only
  convert     Print a palette as LCH or OKLCH literals

Examples:
  miasma build                          # Writes themes/miasma-color-theme.json
  miasma build --output out/theme.json  # Custom output path
  miasma check --no-color               # Plain report, exit 1 on failure
  miasma convert oklch --palette syntax # OKLCH literals for one palette
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # --- build ---
    build_parser = subparsers.add_parser(
        "build",
        help="Check contrast, then write the theme JSON",
        description="Run the contrast battery and write the theme only if every check passes.",
    )
    build_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=DEFAULT_THEME_PATH,
        help=f"Theme file to write (default: {DEFAULT_THEME_PATH})",
    )

    # --- check ---
    subparsers.add_parser(
        "check",
        help="Check contrast only",
        description="Run the contrast battery without writing anything.",
    )

    # --- convert ---
    convert_parser = subparsers.add_parser(
        "convert",
        help="Print a palette as LCH or OKLCH literals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  miasma convert lch                    # All palettes, integer LCH
  miasma convert oklch --palette ui     # One palette, OKLCH to 2 decimals
        """,
    )
    convert_parser.add_argument(
        "space",
        choices=["lch", "oklch"],
        help="Target color space",
    )
    convert_parser.add_argument(
        "--palette",
        action="append",
        dest="palettes",
        help="Palette to print (repeatable; default: all)",
    )

    return parser


# =============================================================================
# Command Handlers
# =============================================================================


def cmd_build(args: argparse.Namespace) -> int:
    from .build import BuildConfig, Ok, build

    log.header("Contrast checks")
    result = build(BuildConfig(output=args.output))
    if isinstance(result, Ok):
        log.success(f"Wrote {result.path}")
        return 0
    log.error(f"Theme not written: {len(result.report.failures)} contrast failure(s)")
    return 1


def cmd_check(args: argparse.Namespace) -> int:
    from .build import Ok, check

    log.header("Contrast checks")
    result = check()
    if isinstance(result, Ok):
        log.success(f"All {len(result.report.outcomes)} contrast checks passed")
        return 0
    return 1


def cmd_convert(args: argparse.Namespace) -> int:
    from .convert import FORMATTERS
    from .theme import PALETTES, get_palette

    formatter = FORMATTERS[args.space]
    names = args.palettes or list(PALETTES)
    for name in names:
        palette = get_palette(name)
        log.out("")
        for line in formatter(name, palette):
            log.out(line)
    return 0


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        log.set_color(False)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "build":
            return cmd_build(args)
        elif args.command == "check":
            return cmd_check(args)
        elif args.command == "convert":
            return cmd_convert(args)
        else:
            log.error(f"Unknown command: {args.command}")
            return 1

    except KeyboardInterrupt:
        log.warning("\nInterrupted")
        return 130
    except Exception as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
