"""
Folding of import records into contiguous same-category groups.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .classifier import Category, ImportClassifier, StdlibLookup
from .config import Settings
from .go.imports import ImportRecord


@dataclass(frozen=True)
class ImportGroup:
    """A maximal run of consecutive imports sharing one category."""
    start_line: int
    end_line: int
    category: Category


def group_imports(records: Iterable[ImportRecord], classifier: ImportClassifier) -> List[ImportGroup]:
    """
    Fold records, in file order, into groups.

    Runs of the same category separated by another category stay
    separate groups, so a split category remains visible to validation.
    """
    groups: List[ImportGroup] = []
    current: Optional[ImportGroup] = None

    for record in records:
        category = classifier.classify(record.path)
        if current is None or current.category != category:
            if current is not None:
                groups.append(current)
            current = ImportGroup(record.start_line, record.end_line, category)
        else:
            current = ImportGroup(current.start_line, record.end_line, category)

    if current is not None:
        groups.append(current)

    return groups


def group(
    records: Iterable[ImportRecord],
    settings: Settings,
    lookup: Optional[StdlibLookup] = None,
) -> List[ImportGroup]:
    """Classify and group records with a fresh classifier."""
    return group_imports(records, ImportClassifier(settings, lookup))


__all__ = ["ImportGroup", "group_imports", "group"]
