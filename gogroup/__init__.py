"""
gogroup: checks that Go import declarations are split into
builtin, third-party, internal-private and own-module groups.
"""

from .check import CheckResult, check_file, check_source, run
from .classifier import CANONICAL_ORDER, Category, GorootStdlibLookup, ImportClassifier, classify
from .config import Settings
from .errors import ConfigError, GoGroupUserError, ParseFailure
from .grouping import ImportGroup, group, group_imports
from .validation import MissingBlankLine, UngroupedImports, Violation, validate

__all__ = [
    "CANONICAL_ORDER",
    "Category",
    "CheckResult",
    "ConfigError",
    "GoGroupUserError",
    "GorootStdlibLookup",
    "ImportClassifier",
    "ImportGroup",
    "MissingBlankLine",
    "ParseFailure",
    "Settings",
    "UngroupedImports",
    "Violation",
    "check_file",
    "check_source",
    "classify",
    "group",
    "group_imports",
    "run",
    "validate",
]
