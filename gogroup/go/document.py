from __future__ import annotations

from typing import Dict

import tree_sitter_go as tsgo
from tree_sitter import Language

from ..tree_sitter_support import TreeSitterDocument
from .queries import QUERIES

GO_LANGUAGE = Language(tsgo.language())


class GoTreeSitterDocument(TreeSitterDocument):
    """Go source parsed with the tree-sitter-go grammar."""

    def get_language(self) -> Language:
        return GO_LANGUAGE

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES
