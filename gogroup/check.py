"""
Single-file import grouping check.

Glue between parsing, classification, grouping and validation.
Violations are returned as values; only parse failures raise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .classifier import ImportClassifier, StdlibLookup
from .config import Settings
from .go.imports import parse_imports, read_imports, ImportRecord
from .grouping import ImportGroup, group_imports
from .validation import Violation, validate

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of checking one file."""
    path: Optional[Path]
    groups: List[ImportGroup] = field(default_factory=list)
    violation: Optional[Violation] = None

    @property
    def ok(self) -> bool:
        return self.violation is None

    @property
    def message(self) -> Optional[str]:
        return self.violation.message if self.violation else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": str(self.path) if self.path is not None else None,
            "ok": self.ok,
            "code": self.violation.code if self.violation else None,
            "line": self.violation.line if self.violation else None,
            "message": self.message,
            "groups": [
                {"start": g.start_line, "end": g.end_line, "category": g.category.value}
                for g in self.groups
            ],
        }


def check_records(
    records: List[ImportRecord],
    settings: Settings,
    lookup: Optional[StdlibLookup] = None,
    path: Optional[Path] = None,
) -> CheckResult:
    """Group already extracted records and validate them."""
    groups = group_imports(records, ImportClassifier(settings, lookup))
    logger.debug(
        "%s: groups %s",
        path or "<source>",
        ", ".join(f"{g.category.value}@{g.start_line}-{g.end_line}" for g in groups) or "none",
    )
    return CheckResult(path=path, groups=groups, violation=validate(groups))


def check_source(
    text: str,
    settings: Settings,
    lookup: Optional[StdlibLookup] = None,
    path: Optional[Path] = None,
) -> CheckResult:
    """
    Check Go source text.

    Raises:
        ParseFailure: If the source cannot be parsed
    """
    return check_records(parse_imports(text, path), settings, lookup, path)


def check_file(path: Path, settings: Settings, lookup: Optional[StdlibLookup] = None) -> CheckResult:
    """
    Check a Go file on disk.

    Raises:
        ParseFailure: If the file cannot be read or parsed
    """
    return check_records(read_imports(path), settings, lookup, path)


def run(
    filename: str,
    metadata: Optional[Mapping[str, Any]],
    lookup: Optional[StdlibLookup] = None,
) -> Optional[str]:
    """
    Host-facing entry point.

    Args:
        filename: Go file to check
        metadata: Key-value settings blob (selfModule, internalPrivateDomains)
        lookup: Optional stdlib lookup, GOROOT-backed by default

    Returns:
        Violation description, or None when the imports are well grouped

    Raises:
        ParseFailure: If the file cannot be read or parsed
    """
    result = check_file(Path(filename), Settings.from_dict(metadata), lookup)
    return result.message


__all__ = ["CheckResult", "check_records", "check_source", "check_file", "run"]
