"""Lexicon lookup helpers."""

from .engine import LEXICON_BACKENDS, Lexicon, MappingLexicon, NullLexicon, WordNetLexicon, build_lexicon

__all__ = [
    "LEXICON_BACKENDS",
    "Lexicon",
    "MappingLexicon",
    "NullLexicon",
    "WordNetLexicon",
    "build_lexicon",
]
