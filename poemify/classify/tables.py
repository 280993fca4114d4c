"""Static word-classification tables: denylist, closed-class dictionary, tag map."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from poemify.grammar.model import Capability, InitialSound, NumberClass


@dataclass(frozen=True)
class LexicalEntry:
    capabilities: Capability
    number_class: NumberClass = NumberClass.ANY
    initial_sound: InitialSound = InitialSound.ANY
    copula_compatible_with_first_person: bool = False


@dataclass(frozen=True)
class ClassificationTables:
    denylist: frozenset[str]
    ignored_characters: frozenset[str]
    closed_class: Mapping[str, LexicalEntry]
    enumerated_tags: frozenset[str]
    tag_map: Mapping[str, LexicalEntry]


C = Capability
N = NumberClass

DENYLIST = frozenset(
    {
        "also",
        "always",
        "anyone",
        "be",  # never wanted as the main verb
        "been",
        "else",
        "here",
        "maybe",
        "more",
        "much",
        "never",
        "over",
        "really",
        "same",
        "so",
        "then",
        "there",
        "very",
        "which",
    }
)

# Apostrophes and dashes in the raw text: contractions, possessives, asides.
IGNORED_CHARACTERS = frozenset({"'", "’", "—", "–"})

SINGULAR_DETERMINERS = ("this", "that", "another", "each", "every", "no")
PLURAL_DETERMINERS = (
    "these",
    "those",
    "all",
    "both",
    "few",
    "many",
    "most",
    "other",
    "several",
    "some",
    "such",
)


def _build_closed_class() -> dict[str, LexicalEntry]:
    entries: dict[str, LexicalEntry] = {
        # glue words
        "and": LexicalEntry(C.AND),
        "but": LexicalEntry(C.BUT),
        "not": LexicalEntry(C.NOT),
        "yet": LexicalEntry(C.BUT),
        # articles
        "the": LexicalEntry(C.DET | C.ARTICLE),
        "a": LexicalEntry(C.DET | C.ARTICLE, N.SINGULAR, InitialSound.CONSONANT),
        "an": LexicalEntry(C.DET | C.ARTICLE, N.SINGULAR, InitialSound.VOWEL),
        # copulas
        "is": LexicalEntry(C.COPULA, N.SINGULAR),
        "was": LexicalEntry(C.COPULA, N.SINGULAR, copula_compatible_with_first_person=True),
        "are": LexicalEntry(C.COPULA, N.PLURAL),
        "were": LexicalEntry(C.COPULA, N.PLURAL),
        "am": LexicalEntry(C.COPULA, N.FIRST_PERSON_SINGULAR, copula_compatible_with_first_person=True),
        # pronouns
        "i": LexicalEntry(C.SUBJECT_PRONOUN, N.FIRST_PERSON_SINGULAR),
        "he": LexicalEntry(C.SUBJECT_PRONOUN, N.SINGULAR),
        "she": LexicalEntry(C.SUBJECT_PRONOUN, N.SINGULAR),
        "we": LexicalEntry(C.SUBJECT_PRONOUN, N.PLURAL),
        "they": LexicalEntry(C.SUBJECT_PRONOUN, N.PLURAL),
        "me": LexicalEntry(C.OBJECT_PRONOUN, N.SINGULAR),
        "him": LexicalEntry(C.OBJECT_PRONOUN, N.SINGULAR),
        "her": LexicalEntry(C.OBJECT_PRONOUN, N.SINGULAR),
        "us": LexicalEntry(C.OBJECT_PRONOUN, N.PLURAL),
        "them": LexicalEntry(C.OBJECT_PRONOUN, N.PLURAL),
        "it": LexicalEntry(C.SUBJECT_PRONOUN | C.OBJECT_PRONOUN, N.SINGULAR),
        "you": LexicalEntry(C.SUBJECT_PRONOUN | C.OBJECT_PRONOUN, N.PLURAL),
        # overrides for words the tagger tends to get wrong
        "just": LexicalEntry(C.ADJ),
        "kind": LexicalEntry(C.ADJ),
        "like": LexicalEntry(C.VERB, N.PLURAL),
        "made": LexicalEntry(C.VERB | C.PAST_TENSE),
        "own": LexicalEntry(C.VERB, N.PLURAL),
        "thing": LexicalEntry(C.NOUN, N.SINGULAR),  # not a gerund
        "way": LexicalEntry(C.NOUN, N.SINGULAR),
    }
    for word in SINGULAR_DETERMINERS:
        entries[word] = LexicalEntry(C.DET, N.SINGULAR)
    for word in PLURAL_DETERMINERS:
        entries[word] = LexicalEntry(C.DET, N.PLURAL)
    return entries


CLOSED_CLASS = MappingProxyType(_build_closed_class())

# Tags whose every legal member should already be in CLOSED_CLASS.
# PP$ is the older spelling of PRP$ used by some taggers.
ENUMERATED_TAGS = frozenset({"CC", "DT", "PDT", "PP$", "PRP", "PRP$"})

TAG_MAP = MappingProxyType(
    {
        "JJ": LexicalEntry(C.ADJ),
        "JJR": LexicalEntry(C.ADJ | C.COMPARATIVE),
        "JJS": LexicalEntry(C.ADJ | C.SUPERLATIVE),
        "MD": LexicalEntry(C.MODAL),
        "NN": LexicalEntry(C.NOUN, N.SINGULAR),
        "NNS": LexicalEntry(C.NOUN | C.PLURAL, N.PLURAL),
        "NNP": LexicalEntry(C.PERSON, N.SINGULAR),
        "VB": LexicalEntry(C.VERB, N.PLURAL),
        "VBD": LexicalEntry(C.VERB | C.PAST_TENSE),
        "VBG": LexicalEntry(C.GERUND),
        "VBN": LexicalEntry(C.PAST_PARTICIPLE),
        "VBP": LexicalEntry(C.VERB, N.PLURAL),
        "VBZ": LexicalEntry(C.VERB, N.SINGULAR),
    }
)

DEFAULT_TABLES = ClassificationTables(
    denylist=DENYLIST,
    ignored_characters=IGNORED_CHARACTERS,
    closed_class=CLOSED_CLASS,
    enumerated_tags=ENUMERATED_TAGS,
    tag_map=TAG_MAP,
)
