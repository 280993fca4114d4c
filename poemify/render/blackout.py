"""Blackout renderers: keep marked words, suppress the rest."""

from __future__ import annotations

import html
from typing import Sequence

from poemify.grammar.model import Word

DEFAULT_MASK_CHAR = "█"


def render_text(words: Sequence[Word], mask_char: str = DEFAULT_MASK_CHAR) -> str:
    if not any(w.marked for w in words):
        return " ".join(w.text for w in words)
    return " ".join(w.text if w.marked else mask_char * len(w.text) for w in words)


def render_html(words: Sequence[Word], color: str = "black") -> str:
    """Each run of unmarked words goes into one background-colored span."""
    if not any(w.marked for w in words):
        return " ".join(html.escape(w.text) for w in words)

    parts: list[str] = []
    run: list[str] = []
    opening = f'<span style="background:{html.escape(color, quote=True)}">'

    def flush() -> None:
        if run:
            parts.append(opening + " ".join(run) + "</span>")
            run.clear()

    for word in words:
        text = html.escape(word.text)
        if word.marked:
            flush()
            parts.append(text)
        else:
            run.append(text)
    flush()
    return " ".join(parts)


def marked_text(words: Sequence[Word]) -> str:
    return " ".join(w.text for w in words if w.marked)
