from .document import GoTreeSitterDocument
from .imports import GoImportAnalyzer, ImportRecord, parse_imports, read_imports

__all__ = ["GoTreeSitterDocument", "GoImportAnalyzer", "ImportRecord", "parse_imports", "read_imports"]
