"""
Settings of the import grouping check.

Settings arrive as a generic key-value blob (host metadata or gogroup.yaml).
Malformed or missing fields fall back to empty values instead of failing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

SELF_MODULE_KEY = "selfModule"
INTERNAL_DOMAINS_KEY = "internalPrivateDomains"


@dataclass(frozen=True)
class Settings:
    """Classification settings, shared read-only between checks."""
    self_module: str = ""                           # own-module path prefix
    internal_private_domains: Tuple[str, ...] = ()  # substrings marking internal-private imports

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Settings":
        """Create an instance from a dictionary (metadata or YAML)."""
        if not isinstance(data, Mapping):
            if data is not None:
                logger.warning("Settings must be a mapping, got %s; using defaults", type(data).__name__)
            return cls()

        self_module = data.get(SELF_MODULE_KEY, "")
        if self_module is None:
            self_module = ""
        elif not isinstance(self_module, str):
            logger.warning("Ignoring %s: expected string, got %s", SELF_MODULE_KEY, type(self_module).__name__)
            self_module = ""

        raw_domains = data.get(INTERNAL_DOMAINS_KEY) or []
        if isinstance(raw_domains, str) or not isinstance(raw_domains, (list, tuple)):
            logger.warning("Ignoring %s: expected list, got %s", INTERNAL_DOMAINS_KEY, type(raw_domains).__name__)
            raw_domains = []

        domains = []
        for item in raw_domains:
            if isinstance(item, str):
                domains.append(item)
            else:
                logger.warning("Ignoring non-string entry in %s: %r", INTERNAL_DOMAINS_KEY, item)

        return cls(self_module=self_module, internal_private_domains=tuple(domains))

    def to_dict(self) -> Dict[str, Any]:
        """Serialization back to the key-value form."""
        return {
            SELF_MODULE_KEY: self.self_module,
            INTERNAL_DOMAINS_KEY: list(self.internal_private_domains),
        }

    def with_overrides(
        self,
        *,
        self_module: Optional[str] = None,
        internal_private_domains: Optional[Tuple[str, ...]] = None,
    ) -> "Settings":
        """Return a copy with explicitly given fields replaced."""
        changes: Dict[str, Any] = {}
        if self_module is not None:
            changes["self_module"] = self_module
        if internal_private_domains is not None:
            changes["internal_private_domains"] = tuple(internal_private_domains)
        return replace(self, **changes) if changes else self


__all__ = ["Settings", "SELF_MODULE_KEY", "INTERNAL_DOMAINS_KEY"]
