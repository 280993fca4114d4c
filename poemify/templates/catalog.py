"""Catalog of subject/verb/object clause templates."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from poemify.grammar.model import Capability

C = Capability

Shape = tuple[Capability, ...]

SUBJECT_SHAPES: tuple[Shape, ...] = (
    (C.DET, C.NOUN),  # the subject...
    (C.DET, C.ADJ, C.NOUN),  # the adjective subject...
    (C.PLURAL,),  # subjects...
    (C.ADJ, C.PLURAL),  # adjective subjects...
    (C.PLURAL, C.AND, C.PLURAL),  # subjects and subjects...
    (C.DET, C.PLURAL, C.AND, C.PLURAL),  # the subjects and subjects...
    (C.PERSON,),  # Max...
    (C.SUBJECT_PRONOUN,),  # I...
)

VERB_OBJECT_SHAPES: tuple[tuple[Shape, Shape], ...] = (
    ((C.COPULA,), (C.ADJ,)),  # ...is adjective
    ((C.COPULA,), (C.ADJ, C.AND, C.ADJ)),
    ((C.COPULA,), (C.NOT, C.ADJ)),
    ((C.COPULA,), (C.ADJ, C.BUT, C.ADJ)),
    ((C.COPULA,), (C.ADJ, C.BUT, C.NOT, C.ADJ)),
    ((C.COPULA,), (C.GERUND,)),  # ...is verbing
    ((C.COPULA,), (C.ARTICLE, C.NOUN)),  # ...is the object
    ((C.MODAL, C.INFINITIVE), ()),  # ...can verb
    ((C.MODAL, C.INFINITIVE), (C.ARTICLE, C.NOUN)),
    ((C.VERB,), (C.ARTICLE, C.NOUN)),  # ...verbs the object
    ((C.VERB,), (C.ARTICLE, C.ADJ, C.NOUN)),
    ((C.VERB,), (C.PLURAL,)),  # ...verbs objects
    ((C.VERB,), (C.ADJ, C.PLURAL)),
    ((C.VERB,), (C.PLURAL, C.AND, C.PLURAL)),
    ((C.VERB,), (C.DET, C.PLURAL, C.AND, C.PLURAL)),
    ((C.VERB,), (C.PERSON,)),  # ...verbs Max
    ((C.VERB,), (C.OBJECT_PRONOUN,)),  # ...verbs me
)


@dataclass(frozen=True)
class Template:
    subject_shape: Shape
    verb_shape: Shape
    object_shape: Shape = ()

    def __post_init__(self) -> None:
        if self.length == 0:
            raise ValueError("A template needs at least one capability slot.")

    @property
    def phases(self) -> tuple[Shape, Shape, Shape]:
        return (self.subject_shape, self.verb_shape, self.object_shape)

    @property
    def length(self) -> int:
        return len(self.subject_shape) + len(self.verb_shape) + len(self.object_shape)

    def describe(self) -> str:
        def names(shape: Shape) -> str:
            return ",".join(cap.name for cap in shape)

        return f"[{names(self.subject_shape)}] [{names(self.verb_shape)}] [{names(self.object_shape)}]"


@lru_cache(maxsize=None)
def build_catalog() -> tuple[Template, ...]:
    """Cross product of subject shapes and verb/object shapes, subject-major."""
    return tuple(
        Template(subject_shape=subject, verb_shape=verb, object_shape=obj)
        for subject in SUBJECT_SHAPES
        for verb, obj in VERB_OBJECT_SHAPES
    )


DEFAULT_CATALOG = build_catalog()
