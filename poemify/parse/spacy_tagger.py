"""spaCy loading and part-of-speech tagging over pre-split tokens."""

from __future__ import annotations

from typing import Protocol, Sequence

import spacy
from spacy.tokens import Doc

from poemify.grammar.model import TaggedToken

DEFAULT_SPACY_MODEL = "en_core_web_sm"


class Tagger(Protocol):
    def tag(self, tokens: Sequence[str]) -> list[TaggedToken]:
        ...


def load_nlp(model_name: str = DEFAULT_SPACY_MODEL):
    # Only the tagger is needed; parser and NER are dropped for speed.
    return spacy.load(model_name, exclude=["parser", "ner", "lemmatizer"])


class SpacyTagger:
    """Penn Treebank tags (``token.tag_``) for an already tokenised text."""

    def __init__(self, nlp=None, model_name: str = DEFAULT_SPACY_MODEL) -> None:
        self.model_name = model_name
        self._nlp = nlp if nlp is not None else load_nlp(model_name)

    def tag(self, tokens: Sequence[str]) -> list[TaggedToken]:
        words = [t for t in tokens if t and t.strip()]
        if not words:
            return []
        doc = self._nlp(Doc(self._nlp.vocab, words=words))
        return [TaggedToken(token.text, token.tag_) for token in doc]
