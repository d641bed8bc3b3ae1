"""
Validation of import group order and spacing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

from .classifier import CANONICAL_ORDER
from .grouping import ImportGroup

_RANK = {category: rank for rank, category in enumerate(CANONICAL_ORDER)}


@dataclass(frozen=True)
class Violation(ABC):
    """Base of the value-returned check failures."""
    line: int
    code: ClassVar[str] = ""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description."""
        pass

    def format(self, file: object) -> str:
        return f"{file}:{self.line}: [{self.code}] {self.message}"


@dataclass(frozen=True)
class UngroupedImports(Violation):
    """Group categories deviate from the canonical order (or a category is split)."""
    code: ClassVar[str] = "GOGROUP-ORDER"

    @property
    def message(self) -> str:
        return "imports not properly grouped"


@dataclass(frozen=True)
class MissingBlankLine(Violation):
    """Adjacent groups are not separated by exactly one blank line."""
    code: ClassVar[str] = "GOGROUP-SPACING"

    @property
    def before_line(self) -> int:
        return self.line

    @property
    def message(self) -> str:
        return f"missing blank line before line {self.line}"


def check_order(groups: Sequence[ImportGroup]) -> Optional[UngroupedImports]:
    """
    Categories must strictly follow the canonical order.

    Absent categories are allowed; a repeated category means it was split.
    [BUILTIN, INTERNAL_PRIVATE] passes: only relative order is checked,
    not a fixed slot per position.
    """
    for prev, group in zip(groups, groups[1:]):
        if _RANK[group.category] <= _RANK[prev.category]:
            return UngroupedImports(line=group.start_line)
    return None


def check_spacing(groups: Sequence[ImportGroup]) -> Optional[MissingBlankLine]:
    for prev, group in zip(groups, groups[1:]):
        if group.start_line != prev.end_line + 2:
            return MissingBlankLine(line=group.start_line)
    return None


def validate(groups: Sequence[ImportGroup]) -> Optional[Violation]:
    """
    Check group order first, then spacing.

    Returns:
        The first violation found, or None if the groups are valid
    """
    return check_order(groups) or check_spacing(groups)


__all__ = [
    "Violation",
    "UngroupedImports",
    "MissingBlankLine",
    "check_order",
    "check_spacing",
    "validate",
]
