"""
Tree-sitter query definitions for Go language.
"""

from __future__ import annotations

QUERIES = {
    # Every import spec, both `import "x"` and members of `import ( ... )`
    "imports": """
    (import_spec) @import
    """,
}
