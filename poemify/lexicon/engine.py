"""English lexicon providers: candidate Penn Treebank tags per word."""

from __future__ import annotations

import json
import os
from typing import Iterable, Mapping, Protocol

LEXICON_BACKENDS = ("none", "json", "wordnet")


class Lexicon(Protocol):
    # Tags the lexicon may override; None means any tag.
    correctable_tags: frozenset[str] | None

    def lookup(self, normalized_form: str) -> list[str]:
        ...


class NullLexicon:
    """No candidates: the tagger's choice always stands."""

    correctable_tags = None

    def lookup(self, normalized_form: str) -> list[str]:
        return []


class MappingLexicon:
    """Word -> ordered tag list, first tag being the primary suggestion."""

    correctable_tags = None

    def __init__(self, entries: Mapping[str, Iterable[str]]) -> None:
        self._entries: dict[str, list[str]] = {
            str(word).strip().lower(): [str(tag) for tag in tags] for word, tags in entries.items()
        }

    @classmethod
    def from_json(cls, path: str) -> "MappingLexicon":
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Lexicon file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Lexicon file must contain a JSON object: {path}")
        return cls(data)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, normalized_form: str) -> list[str]:
        return list(self._entries.get(normalized_form, []))


class WordNetLexicon:
    """WordNet-backed candidates.

    WordNet only knows coarse parts of speech, so the inflected Penn tag is
    inferred from whether ``morphy`` had to reduce the word and from its suffix.
    Candidate order follows the order senses are listed in WordNet.
    WordNet has no modals, proper nouns or closed-class words, so only the
    tags it can produce are open to correction.
    """

    _POS_ORDER = {"n": "n", "v": "v", "a": "a", "s": "a", "r": "r"}

    correctable_tags = frozenset(
        {"NN", "NNS", "JJ", "JJR", "JJS", "RB", "VB", "VBP", "VBG", "VBZ", "VBD", "VBN"}
    )

    def __init__(self) -> None:
        try:
            from nltk.corpus import wordnet as wn  # type: ignore
        except Exception as exc:  # pragma: no cover - import error path
            raise ImportError("nltk is required for the WordNet lexicon: install with `pip install nltk`") from exc

        try:
            _ = wn.synsets("test")
        except LookupError as exc:  # pragma: no cover - runtime env dependent
            raise LookupError("WordNet data is missing. Run `python -m nltk.downloader wordnet omw-1.4`.") from exc
        self._wn = wn

    def _tags_for(self, form: str, pos: str) -> list[str]:
        base = self._wn.morphy(form, pos)
        inflected = base is not None and base != form
        if pos == "n":
            return ["NNS"] if inflected else ["NN"]
        if pos == "a":
            if inflected and form.endswith("est"):
                return ["JJS"]
            if inflected and form.endswith("er"):
                return ["JJR"]
            return ["JJ"]
        if pos == "r":
            return ["RB"]
        if not inflected:
            return ["VB", "VBP"]
        if form.endswith("ing"):
            return ["VBG"]
        if form.endswith("s"):
            return ["VBZ"]
        return ["VBD", "VBN"]

    def lookup(self, normalized_form: str) -> list[str]:
        form = (normalized_form or "").strip()
        if not form:
            return []
        out: list[str] = []
        seen_pos: set[str] = set()
        for synset in self._wn.synsets(form):
            pos = self._POS_ORDER.get(synset.pos())
            if pos is None or pos in seen_pos:
                continue
            seen_pos.add(pos)
            for tag in self._tags_for(form, pos):
                if tag not in out:
                    out.append(tag)
        return out


def build_lexicon(backend: str, path: str = "") -> Lexicon:
    name = (backend or "none").strip().lower()
    if name == "none":
        return NullLexicon()
    if name == "json":
        if not (path or "").strip():
            raise ValueError("A lexicon path is required for the json lexicon backend.")
        return MappingLexicon.from_json(path.strip())
    if name == "wordnet":
        return WordNetLexicon()
    raise ValueError(f"lexicon backend must be one of: {' | '.join(LEXICON_BACKENDS)}")
