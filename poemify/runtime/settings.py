"""Runtime settings for poemify runs (environment driven)."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from poemify.lexicon.engine import LEXICON_BACKENDS
from poemify.matcher.engine import ACCEPTANCE_PROBABILITY
from poemify.parse.spacy_tagger import DEFAULT_SPACY_MODEL
from poemify.selection.policy import MAX_ATTEMPTS


@dataclass(frozen=True)
class PoemifySettings:
    acceptance_probability: float = ACCEPTANCE_PROBABILITY
    max_attempts: int = MAX_ATTEMPTS
    allow_gaps: bool = False
    seed: int | None = None
    spacy_model: str = DEFAULT_SPACY_MODEL
    lexicon_backend: str = "none"
    lexicon_path: str = ""

    def with_overrides(self, **overrides) -> "PoemifySettings":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _to_int_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got: {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got: {value}")
    return value


def _to_probability_env(name: str, default: float) -> float:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got: {raw!r}") from exc
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got: {value}")
    return value


def _to_optional_int_env(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got: {raw!r}") from exc


def _to_flag_env(name: str, default: bool) -> bool:
    raw = os.getenv(name, "1" if default else "0").strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off", ""}:
        return False
    raise ValueError(f"{name} must be 0 or 1, got: {raw!r}")


def load_settings_from_env() -> PoemifySettings:
    backend = os.getenv("POEMIFY_LEXICON_BACKEND", "none").strip().lower() or "none"
    if backend not in LEXICON_BACKENDS:
        raise ValueError(f"POEMIFY_LEXICON_BACKEND must be one of: {' | '.join(LEXICON_BACKENDS)}")
    return PoemifySettings(
        acceptance_probability=_to_probability_env("POEMIFY_ACCEPTANCE_PROBABILITY", ACCEPTANCE_PROBABILITY),
        max_attempts=_to_int_env("POEMIFY_MAX_ATTEMPTS", MAX_ATTEMPTS),
        allow_gaps=_to_flag_env("POEMIFY_ALLOW_GAPS", False),
        seed=_to_optional_int_env("POEMIFY_SEED"),
        spacy_model=os.getenv("POEMIFY_SPACY_MODEL", DEFAULT_SPACY_MODEL).strip() or DEFAULT_SPACY_MODEL,
        lexicon_backend=backend,
        lexicon_path=os.getenv("POEMIFY_LEXICON_PATH", "").strip(),
    )
