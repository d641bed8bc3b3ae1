"""
Settings loading: gogroup.yaml and go.mod module discovery.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from .model import Settings
from .paths import find_go_mod

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Reads a YAML file and returns a mapping."""
    if not path.is_file():
        return {}
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_settings(path: Optional[Path]) -> Settings:
    """
    Load settings from a gogroup.yaml file.

    Args:
        path: Settings file; None or a missing file yields empty settings

    Returns:
        Decoded settings

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping
    """
    if path is None:
        return Settings()
    return Settings.from_dict(_read_yaml_map(path))


def read_module_path(go_mod: Path) -> Optional[str]:
    """Module path declared by the `module` directive of a go.mod file."""
    try:
        content = go_mod.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {go_mod}: {e}")
        return None

    for line in content.splitlines():
        stripped = line.split("//", 1)[0].strip()
        if not stripped.startswith("module"):
            continue
        parts = stripped.split()
        if len(parts) >= 2 and parts[0] == "module":
            return parts[1].strip('"`')
    return None


def find_go_module(start: Path) -> Optional[str]:
    """Module path of the nearest go.mod at or above `start`, if any."""
    go_mod = find_go_mod(start)
    if go_mod is None:
        return None
    module = read_module_path(go_mod)
    logger.debug("Module discovered from %s: %s", go_mod, module)
    return module


def resolve_settings(settings: Settings, source: Path, *, auto_module: bool = True) -> Settings:
    """
    Fill an empty own-module prefix from the go.mod governing `source`.

    Explicitly configured prefixes always win.
    """
    if settings.self_module or not auto_module:
        return settings
    module = find_go_module(source)
    if not module:
        return settings
    return settings.with_overrides(self_module=module)


__all__ = ["load_settings", "read_module_path", "find_go_module", "resolve_settings"]
