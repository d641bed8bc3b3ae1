"""
Import classification into the four canonical import categories.

Classification is a prioritized chain of (predicate, category) rules:
the first matching rule wins, unmatched paths are third party.
"""

from __future__ import annotations

import logging
import os
import subprocess
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Tuple

from .config import Settings

logger = logging.getLogger(__name__)

GO_ENV_TIMEOUT = 10  # seconds


class Category(str, Enum):
    """Import category; declaration order is the canonical group order."""
    BUILTIN = "builtin"
    THIRD_PARTY = "third_party"
    INTERNAL_PRIVATE = "internal_private"
    OWN_MODULE = "own_module"


CANONICAL_ORDER: Tuple[Category, ...] = tuple(Category)


class StdlibLookup(Protocol):
    """Answers whether an import path names a standard library package."""

    def is_builtin(self, path: str) -> bool:
        ...


def _go_env_goroot() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["go", "env", "GOROOT"],
            text=True,
            encoding="utf-8",
            errors="ignore",
            timeout=GO_ENV_TIMEOUT,
        )
    except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
        logger.debug("`go env GOROOT` failed: %s", e)
        return None
    return out.strip() or None


class GorootStdlibLookup:
    """
    Standard library lookup backed by the Go source tree.

    A path is builtin when `<GOROOT>/src/<path>` exists. GOROOT comes
    from the explicit argument, the GOROOT environment variable, or
    `go env GOROOT`, and is resolved at most once per instance.
    """

    def __init__(self, goroot: Optional[Path] = None):
        self._goroot = goroot
        self._resolved = goroot is not None

    @property
    def goroot(self) -> Optional[Path]:
        if not self._resolved:
            self._resolved = True
            value = os.environ.get("GOROOT") or _go_env_goroot()
            self._goroot = Path(value) if value else None
            logger.debug("GOROOT resolved to %s", self._goroot)
        return self._goroot

    def is_builtin(self, path: str) -> bool:
        goroot = self.goroot
        if goroot is None:
            return False
        try:
            return goroot.joinpath("src", *path.split("/")).exists()
        except (OSError, ValueError) as e:
            logger.debug("Stdlib lookup failed for %r: %s", path, e)
            return False


@lru_cache(maxsize=None)
def default_lookup() -> GorootStdlibLookup:
    """Process-wide GOROOT lookup used when none is injected."""
    return GorootStdlibLookup()


Rule = Tuple[Callable[[str], bool], Category]


class ImportClassifier:
    """Maps Go import paths to categories using settings and a stdlib lookup."""

    def __init__(self, settings: Settings, lookup: Optional[StdlibLookup] = None):
        self.settings = settings
        self.lookup = lookup if lookup is not None else default_lookup()
        self.rules: List[Rule] = [
            (self._is_internal_private, Category.INTERNAL_PRIVATE),
            (self._is_own_module, Category.OWN_MODULE),
            (self.lookup.is_builtin, Category.BUILTIN),
        ]

    def _is_internal_private(self, path: str) -> bool:
        return any(domain in path for domain in self.settings.internal_private_domains)

    def _is_own_module(self, path: str) -> bool:
        prefix = self.settings.self_module
        return bool(prefix) and path.startswith(prefix)

    def classify(self, path: str) -> Category:
        for predicate, category in self.rules:
            if predicate(path):
                return category
        return Category.THIRD_PARTY


def classify(path: str, settings: Settings, lookup: Optional[StdlibLookup] = None) -> Category:
    """Classify a single import path."""
    return ImportClassifier(settings, lookup).classify(path)


__all__ = [
    "Category",
    "CANONICAL_ORDER",
    "StdlibLookup",
    "GorootStdlibLookup",
    "default_lookup",
    "ImportClassifier",
    "classify",
]
