"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from GoGroupUserError.

Programming errors and bugs should NOT inherit from GoGroupUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class GoGroupUserError(Exception):
    """
    Base class for all user-facing errors in gogroup.

    These errors indicate problems that the user can fix:
    unparsable sources, broken settings files, etc.
    """
    pass


class ParseFailure(GoGroupUserError):
    """The import declarations of a file could not be extracted."""

    def __init__(self, path: Optional[Path], reason: str, line: Optional[int] = None):
        self.path = path
        self.reason = reason
        self.line = line
        where = str(path) if path is not None else "<source>"
        if line is not None:
            where = f"{where}:{line}"
        super().__init__(f"{where}: failed to parse file: {reason}")


class ConfigError(GoGroupUserError):
    """Settings file exists but cannot be used."""
    pass


__all__ = ["GoGroupUserError", "ParseFailure", "ConfigError"]
