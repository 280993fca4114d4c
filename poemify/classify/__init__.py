"""Word classification from external tags and lexicon candidates."""

from .classifier import classify, classify_all, resolve_tag, should_ignore
from .tables import DEFAULT_TABLES, ClassificationTables, LexicalEntry

__all__ = [
    "DEFAULT_TABLES",
    "ClassificationTables",
    "LexicalEntry",
    "classify",
    "classify_all",
    "resolve_tag",
    "should_ignore",
]
