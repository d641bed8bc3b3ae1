"""
Tree-sitter infrastructure for source documents.
Provides grammar binding, named queries, and position helpers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from tree_sitter import Tree, Node, Parser, Query, Language, QueryCursor


class TreeSitterDocument(ABC):
    """
    Wrapper for a Tree-sitter parsed document with a named query system.
    """

    def __init__(self, text: str):
        self.text = text
        self._text_bytes = text.encode('utf-8')
        self._query_cache: Dict[str, Query] = {}
        self.tree: Tree = self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """
        Get Language instance for parsing and queries.

        Returns:
            Language instance
        """
        pass

    @abstractmethod
    def get_query_definitions(self) -> Dict[str, str]:
        """
        Get named query definitions for this language.

        Returns:
            Dict mapping query names to query strings
        """
        pass

    def _parse(self) -> Tree:
        """Parse the document with Tree-sitter."""
        parser = Parser(self.get_language())
        return parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        return self.tree.root_node

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Execute a named query on the document.

        Args:
            query_name: Name of the query to execute

        Returns:
            List of (node, capture_name) tuples in document order

        Raises:
            ValueError: If query is not defined for this language
        """
        root_node = self.root_node

        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(self.get_language(), query_definitions[query_name])

        cursor = QueryCursor(self._query_cache[query_name])

        results = []
        for _pattern_index, captures in cursor.matches(root_node):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    results.append((node, capture_name))

        # Matches are not guaranteed to come back sorted
        results.sort(key=lambda item: item[0].start_byte)
        return results

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode('utf-8')

    @staticmethod
    def get_line_range(node: Node) -> Tuple[int, int]:
        """Get line range (1-based, inclusive) for a node."""
        return node.start_point[0] + 1, node.end_point[0] + 1

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        return self.root_node.has_error

    def first_error_line(self) -> Optional[int]:
        """1-based line of the first ERROR or MISSING node, if any."""
        if not self.has_error():
            return None
        cursor = self.root_node.walk()
        visited_children = False
        while True:
            node = cursor.node
            if not visited_children:
                if node.is_error or node.is_missing:
                    return node.start_point[0] + 1
                if not node.has_error or not cursor.goto_first_child():
                    visited_children = True
            elif cursor.goto_next_sibling():
                visited_children = False
            elif not cursor.goto_parent():
                break
            else:
                visited_children = True
        return None


__all__ = ["TreeSitterDocument", "Node"]
