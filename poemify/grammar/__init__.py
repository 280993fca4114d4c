"""Grammatical model: capabilities, agreement features and words."""

from .model import (
    Capability,
    InitialSound,
    NumberClass,
    TaggedToken,
    Word,
    capability_names,
    initial_sound_of,
    normalize_form,
)

__all__ = [
    "Capability",
    "InitialSound",
    "NumberClass",
    "TaggedToken",
    "Word",
    "capability_names",
    "initial_sound_of",
    "normalize_form",
]
