"""
Go import extraction using Tree-sitter AST.

Turns a Go source file into the ordered list of import records
(unquoted path plus 1-based line span) consumed by the grouper.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..errors import ParseFailure
from ..tree_sitter_support import Node
from .document import GoTreeSitterDocument

logger = logging.getLogger(__name__)

_QUOTES = ('"', '`')


@dataclass(frozen=True)
class ImportRecord:
    """One import spec, in file order."""
    path: str        # unquoted package path
    start_line: int  # 1-based, inclusive
    end_line: int    # 1-based, inclusive


def _unquote(literal: str) -> str:
    if len(literal) >= 2 and literal[0] in _QUOTES and literal[-1] == literal[0]:
        return literal[1:-1]
    return literal


class GoImportAnalyzer:
    """Collects import records from a parsed Go document."""

    def analyze_imports(self, doc: GoTreeSitterDocument) -> List[ImportRecord]:
        records: List[ImportRecord] = []
        for node, _capture in doc.query("imports"):
            record = self._parse_import_spec(doc, node)
            if record:
                records.append(record)
        return records

    @staticmethod
    def _parse_import_spec(doc: GoTreeSitterDocument, spec_node: Node) -> Optional[ImportRecord]:
        """Parse a single import spec; the alias, if any, only widens the line span."""
        path_node = spec_node.child_by_field_name("path")
        if path_node is None:
            return None
        start_line, end_line = doc.get_line_range(spec_node)
        return ImportRecord(
            path=_unquote(doc.get_node_text(path_node)),
            start_line=start_line,
            end_line=end_line,
        )


def parse_imports(text: str, path: Optional[Path] = None) -> List[ImportRecord]:
    """
    Parse Go source and extract its import records.

    Args:
        text: Go source code
        path: File path, used for error reporting only

    Returns:
        Import records in file order

    Raises:
        ParseFailure: If the source has syntax errors
    """
    doc = GoTreeSitterDocument(text)
    if doc.has_error():
        raise ParseFailure(path, "syntax error", line=doc.first_error_line())

    records = GoImportAnalyzer().analyze_imports(doc)
    logger.debug("%s: %d import(s)", path or "<source>", len(records))
    return records


def read_imports(path: Path) -> List[ImportRecord]:
    """Read a Go file from disk and extract its import records."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseFailure(path, str(e)) from e
    return parse_imports(text, path)


__all__ = ["ImportRecord", "GoImportAnalyzer", "parse_imports", "read_imports"]
