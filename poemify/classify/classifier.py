"""Turn one tagged token into a classified Word."""

from __future__ import annotations

import logging
from typing import Collection, Iterable, Sequence

from poemify.classify.tables import DEFAULT_TABLES, ClassificationTables, LexicalEntry
from poemify.grammar.model import Capability, NumberClass, Word, normalize_form

logger = logging.getLogger(__name__)


def should_ignore(text: str, normalized: str, tables: ClassificationTables = DEFAULT_TABLES) -> bool:
    if not normalized.strip():
        return True
    if normalized in tables.denylist:
        return True
    return any(ch in text for ch in tables.ignored_characters)


def resolve_tag(
    external_tag: str,
    lexicon_candidates: Sequence[str],
    correctable_tags: Collection[str] | None = None,
) -> str:
    """Prefer the lexicon's primary suggestion when it disagrees with the tagger.

    ``correctable_tags`` limits overrides to tags the lexicon could itself have
    produced; a tag outside that set is kept as the tagger gave it.
    """
    if correctable_tags is not None and external_tag not in correctable_tags:
        return external_tag
    if lexicon_candidates and external_tag not in lexicon_candidates:
        return lexicon_candidates[0]
    return external_tag


def _lookup_entry(
    text: str,
    normalized: str,
    external_tag: str,
    lexicon_candidates: Sequence[str],
    tables: ClassificationTables,
    correctable_tags: Collection[str] | None = None,
) -> tuple[LexicalEntry | None, str]:
    if should_ignore(text, normalized, tables):
        return None, external_tag
    entry = tables.closed_class.get(normalized)
    if entry is not None:
        return entry, external_tag
    if external_tag in tables.enumerated_tags:
        # Conservative: an unknown member of a closed class is not guessed at.
        logger.debug("Unknown closed-class word %r tagged %s", normalized, external_tag)
        return None, external_tag
    tag = resolve_tag(external_tag, lexicon_candidates, correctable_tags)
    entry = tables.tag_map.get(tag)
    if entry is None:
        logger.debug("No capability mapping for tag %r (word %r)", tag, normalized)
    return entry, tag


def classify(
    token: tuple[str, str],
    lexicon_candidates: Iterable[str] | None = None,
    *,
    index: int = 0,
    tables: ClassificationTables = DEFAULT_TABLES,
    correctable_tags: Collection[str] | None = None,
) -> Word:
    text, external_tag = token
    text = text or ""
    external_tag = (external_tag or "").strip()
    normalized = normalize_form(text)
    candidates = tuple(lexicon_candidates or ())
    entry, tag = _lookup_entry(text, normalized, external_tag, candidates, tables, correctable_tags)

    word = Word(
        text=text,
        normalized_form=normalized,
        external_tag=external_tag,
        resolved_tag=tag,
        lexicon_candidates=candidates,
        index=index,
    )
    if entry is None:
        return word

    capabilities = entry.capabilities
    # Bare verb forms are number-agnostic and can follow a modal.
    if Capability.VERB in capabilities and entry.number_class is NumberClass.PLURAL:
        capabilities |= Capability.INFINITIVE

    word.capabilities = capabilities
    word.number_class = entry.number_class
    word.initial_sound = entry.initial_sound
    word.copula_compatible_with_first_person = entry.copula_compatible_with_first_person
    return word


def classify_all(
    tokens: Iterable[tuple[str, str]],
    candidates_for=None,
    tables: ClassificationTables = DEFAULT_TABLES,
    correctable_tags: Collection[str] | None = None,
) -> list[Word]:
    words = []
    for idx, token in enumerate(tokens):
        candidates = candidates_for(normalize_form(token[0])) if candidates_for else None
        words.append(classify(token, candidates, index=idx, tables=tables, correctable_tags=correctable_tags))
    return words
