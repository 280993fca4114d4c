"""Single-pass matcher running one automaton per template over a word sequence."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field
from typing import Sequence

from poemify.grammar.model import Capability, InitialSound, NumberClass, Word
from poemify.templates.catalog import DEFAULT_CATALOG, Template

logger = logging.getLogger(__name__)

ACCEPTANCE_PROBABILITY = 0.8


class MatchPhase(enum.IntEnum):
    SUBJECT = 0
    VERB = 1
    OBJECT = 2
    COMPLETE = 3


def validate_probability(value: float) -> float:
    p = float(value)
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"acceptance_probability must be within [0, 1], got: {value!r}")
    return p


def has_required_number(word: Word, required: NumberClass, target: Capability) -> bool:
    if required is NumberClass.ANY or word.number_class is NumberClass.ANY:
        return True
    if required is NumberClass.FIRST_PERSON_SINGULAR:
        if target is Capability.COPULA:
            return word.copula_compatible_with_first_person
        return word.number_class is NumberClass.PLURAL
    return word.number_class is required


def has_required_initial(word: Word, required: InitialSound) -> bool:
    return required is InitialSound.ANY or word.leading_sound is required


@dataclass
class MatchState:
    template: Template
    phase: MatchPhase = MatchPhase.SUBJECT
    position_in_phase: int = 0
    required_number_class: NumberClass = NumberClass.ANY
    required_initial_sound: InitialSound = InitialSound.ANY
    accepted_words: list[Word] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._settle()

    @property
    def complete(self) -> bool:
        return self.phase is MatchPhase.COMPLETE

    @property
    def target(self) -> Capability | None:
        if self.complete:
            return None
        return self.template.phases[self.phase][self.position_in_phase]

    def accepts(self, word: Word, rng: random.Random, acceptance_probability: float) -> bool:
        target = self.target
        if target is None or not word.has(target):
            return False
        if not has_required_number(word, self.required_number_class, target):
            return False
        if not has_required_initial(word, self.required_initial_sound):
            return False
        return rng.random() < acceptance_probability

    def advance(self, word: Word) -> None:
        if self.complete:
            return
        self.accepted_words.append(word)
        self.position_in_phase += 1
        self.required_initial_sound = word.initial_sound
        if word.number_class is not NumberClass.ANY:
            self.required_number_class = word.number_class
        self._settle()

    def _settle(self) -> None:
        # Empty shapes are passed through immediately.
        while not self.complete and self.position_in_phase >= len(self.template.phases[self.phase]):
            self.phase = MatchPhase(self.phase + 1)
            self.position_in_phase = 0
            if self.phase is MatchPhase.OBJECT:
                # Object agreement is independent of subject/verb agreement.
                self.required_number_class = NumberClass.ANY


@dataclass(frozen=True)
class CompletedMatch:
    template: Template
    words: tuple[Word, ...]

    @property
    def text(self) -> str:
        return " ".join(w.text for w in self.words)


def match(
    words: Sequence[Word],
    catalog: Sequence[Template] = DEFAULT_CATALOG,
    *,
    rng: random.Random | None = None,
    acceptance_probability: float = ACCEPTANCE_PROBABILITY,
    allow_gaps: bool = False,
) -> list[CompletedMatch]:
    """Advance every template's automaton over ``words`` and return the completed ones.

    Without ``allow_gaps`` a state that rejects a word is dropped. With it, the
    state stays active and waits for a later word it can accept.
    """
    p = validate_probability(acceptance_probability)
    rng = rng or random.Random()

    completed: list[CompletedMatch] = []
    active = [MatchState(template) for template in catalog]

    for word in words:
        if not active:
            break
        still_active: list[MatchState] = []
        for state in active:
            if state.accepts(word, rng, p):
                state.advance(word)
                if state.complete:
                    completed.append(CompletedMatch(state.template, tuple(state.accepted_words)))
                    continue
            elif not allow_gaps:
                continue
            still_active.append(state)
        active = still_active

    logger.debug("Matched %d of %d templates over %d words", len(completed), len(catalog), len(words))
    return completed
