"""Text -> tagged tokens -> classified words -> marked found poem."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

from poemify.classify.classifier import classify_all
from poemify.classify.tables import DEFAULT_TABLES, ClassificationTables
from poemify.grammar.model import Word
from poemify.lexicon.engine import Lexicon, NullLexicon
from poemify.parse.spacy_tagger import Tagger
from poemify.render.blackout import marked_text
from poemify.runtime.settings import PoemifySettings
from poemify.selection.policy import select_and_mark
from poemify.templates.catalog import DEFAULT_CATALOG, Template

logger = logging.getLogger(__name__)


@dataclass
class PoemResult:
    words: list[Word]
    marked: bool

    @property
    def poem(self) -> str:
        return marked_text(self.words)

    @property
    def marked_indices(self) -> list[int]:
        return [w.index for w in self.words if w.marked]


def split_tokens(text: str) -> list[str]:
    return [t for t in (text or "").split() if t.strip()]


def wordify(
    text: str,
    tagger: Tagger,
    lexicon: Lexicon | None = None,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> list[Word]:
    lexicon = lexicon or NullLexicon()
    tokens = split_tokens(text)
    if not tokens:
        return []
    words = classify_all(tagger.tag(tokens), lexicon.lookup, tables, lexicon.correctable_tags)
    logger.debug("%d of %d words can fill a template slot", sum(w.usable for w in words), len(words))
    return words


def poemify_text(
    text: str,
    tagger: Tagger,
    lexicon: Lexicon | None = None,
    *,
    settings: PoemifySettings | None = None,
    catalog: Sequence[Template] = DEFAULT_CATALOG,
    rng: random.Random | None = None,
) -> PoemResult:
    settings = settings or PoemifySettings()
    rng = rng or random.Random(settings.seed)
    words = wordify(text, tagger, lexicon)
    marked = select_and_mark(
        words,
        catalog,
        settings.max_attempts,
        rng=rng,
        acceptance_probability=settings.acceptance_probability,
        allow_gaps=settings.allow_gaps,
    )
    return PoemResult(words=words, marked=marked)
