"""Grammatical model shared by the classifier, catalog and matcher."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import NamedTuple

VOWELS = frozenset("aeiou")

_NON_WORD_RE = re.compile(r"[^a-z0-9\s]")


class Capability(enum.Flag):
    NONE = 0
    NOUN = enum.auto()
    VERB = enum.auto()
    ADJ = enum.auto()
    DET = enum.auto()
    COPULA = enum.auto()
    MODAL = enum.auto()
    GERUND = enum.auto()
    SUBJECT_PRONOUN = enum.auto()
    OBJECT_PRONOUN = enum.auto()
    AND = enum.auto()
    BUT = enum.auto()
    NOT = enum.auto()
    ARTICLE = enum.auto()
    INFINITIVE = enum.auto()
    PLURAL = enum.auto()
    COMPARATIVE = enum.auto()
    SUPERLATIVE = enum.auto()
    PAST_TENSE = enum.auto()
    PAST_PARTICIPLE = enum.auto()
    PERSON = enum.auto()


class NumberClass(enum.Enum):
    ANY = "any"
    SINGULAR = "singular"
    PLURAL = "plural"
    # The pronoun "I": takes "am"/"was" as copula, plural forms otherwise.
    FIRST_PERSON_SINGULAR = "first_person_singular"


class InitialSound(enum.Enum):
    ANY = "any"
    CONSONANT = "consonant"
    VOWEL = "vowel"


class TaggedToken(NamedTuple):
    text: str
    tag: str


def normalize_form(text: str) -> str:
    return _NON_WORD_RE.sub("", (text or "").strip().lower())


def initial_sound_of(form: str) -> InitialSound:
    if not form:
        return InitialSound.ANY
    return InitialSound.VOWEL if form[0] in VOWELS else InitialSound.CONSONANT


def capability_names(capabilities: Capability) -> list[str]:
    return [member.name for member in Capability if member and member in capabilities]


@dataclass(eq=False)
class Word:
    """One token's grammatical profile.

    Everything except ``marked`` is fixed at classification time. ``initial_sound``
    is the constraint this word puts on the word after it ("a" wants a consonant,
    "an" a vowel); ``leading_sound`` is the sound this word itself starts with.
    """

    text: str
    normalized_form: str
    external_tag: str
    resolved_tag: str = ""
    lexicon_candidates: tuple[str, ...] = ()
    capabilities: Capability = Capability.NONE
    number_class: NumberClass = NumberClass.ANY
    initial_sound: InitialSound = InitialSound.ANY
    copula_compatible_with_first_person: bool = False
    index: int = 0
    marked: bool = False

    @property
    def leading_sound(self) -> InitialSound:
        return initial_sound_of(self.normalized_form)

    @property
    def usable(self) -> bool:
        return bool(self.capabilities)

    def has(self, capability: Capability) -> bool:
        return bool(capability) and capability in self.capabilities

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "normalized_form": self.normalized_form,
            "external_tag": self.external_tag,
            "resolved_tag": self.resolved_tag,
            "capabilities": capability_names(self.capabilities),
            "number_class": self.number_class.value,
            "initial_sound": self.initial_sound.value,
            "index": self.index,
            "marked": self.marked,
        }
