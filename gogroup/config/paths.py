from __future__ import annotations

from pathlib import Path
from typing import Optional

# Single source of truth for configuration file names.
SETTINGS_FILE = "gogroup.yaml"
GO_MOD_FILE = "go.mod"


def _find_upwards(start: Path, name: str) -> Optional[Path]:
    """First file called `name` in `start` or any of its parents."""
    base = start.resolve()
    if base.is_file():
        base = base.parent
    for directory in (base, *base.parents):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def find_settings_file(start: Path) -> Optional[Path]:
    """Nearest gogroup.yaml at or above `start`."""
    return _find_upwards(start, SETTINGS_FILE)


def find_go_mod(start: Path) -> Optional[Path]:
    """Nearest go.mod at or above `start`."""
    return _find_upwards(start, GO_MOD_FILE)


__all__ = ["SETTINGS_FILE", "GO_MOD_FILE", "find_settings_file", "find_go_mod"]
