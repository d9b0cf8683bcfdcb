"""
Contrast battery loader.

Loads the battery definition from ``checks.yaml`` next to this module and
expands it into an ordered list of ``ContrastCheck`` objects. Labels are the
dotted role names used in the file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Optional

import yaml

from miasma.color import Color
from miasma.validators.contrast import ContrastCheck, required_ratio

from .palette import get_palette, lookup

CHECKS_PATH = Path(__file__).resolve().parent / "checks.yaml"

_SINGLE_KEYS = {"level", "fg", "bg"}
_EACH_KEYS = {"level", "each", "bg", "except"}


# =============================================================================
# Loading (cached)
# =============================================================================


@lru_cache(maxsize=1)
def load_battery() -> dict[str, Any]:
    """Load and return the parsed battery file.

    Result is cached for the lifetime of the process.
    """
    with open(CHECKS_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _reset_battery_cache() -> None:
    """Reset the battery cache (for testing)."""
    load_battery.cache_clear()


# =============================================================================
# Expansion
# =============================================================================


def expand_checks(
    entries: list[dict[str, Any]],
    resolve: Optional[Callable[[str], Color]] = None,
) -> list[ContrastCheck]:
    """Expand battery entries into ordered checks.

    Args:
        entries: Parsed ``checks`` list.
        resolve: Maps a dotted role name to a Color; defaults to the
            miasma palettes.

    Raises:
        ValueError: If an entry is malformed or names an unknown level.
        KeyError: If an entry names an unknown palette or role.
    """
    resolve = resolve or lookup
    checks: list[ContrastCheck] = []

    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or "level" not in entry or "bg" not in entry:
            raise ValueError(f"Battery entry {index} needs 'level' and 'bg': {entry!r}")
        level = entry["level"]
        required_ratio(level)
        bg_label = entry["bg"]
        background = resolve(bg_label)

        if "each" in entry:
            extra = set(entry) - _EACH_KEYS
            if extra:
                raise ValueError(f"Battery entry {index} has unexpected keys: {sorted(extra)}")
            palette_name = entry["each"]
            skip = set(entry.get("except") or [])
            for role in get_palette(palette_name):
                if role in skip:
                    continue
                fg_label = f"{palette_name}.{role}"
                checks.append(ContrastCheck(level, resolve(fg_label), background, fg_label, bg_label))
        else:
            extra = set(entry) - _SINGLE_KEYS
            if extra or "fg" not in entry:
                raise ValueError(f"Battery entry {index} must have exactly level, fg, bg: {entry!r}")
            fg_label = entry["fg"]
            checks.append(ContrastCheck(level, resolve(fg_label), background, fg_label, bg_label))

    return checks


def load_checks() -> list[ContrastCheck]:
    """Return the miasma contrast battery in file order."""
    battery = load_battery() or {}
    entries = battery.get("checks")
    if not isinstance(entries, list):
        raise ValueError(f"{CHECKS_PATH.name} must define a 'checks' list")
    return expand_checks(entries)
