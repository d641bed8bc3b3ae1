"""
Shared test infrastructure for gogroup.

Modules:
- file_utils: Utilities for creating files, Go sources and fake Go roots
- cli_utils: Utilities for running the CLI in a subprocess
"""

from .file_utils import write, write_go_file, make_goroot
from .cli_utils import run_cli, jload

__all__ = [
    "write",
    "write_go_file",
    "make_goroot",
    "run_cli",
    "jload",
]
