"""Pick one completed match per word sequence and mark its words."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from poemify.grammar.model import Word
from poemify.matcher.engine import ACCEPTANCE_PROBABILITY, match
from poemify.templates.catalog import DEFAULT_CATALOG, Template

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 5


def clear_marks(words: Sequence[Word]) -> None:
    for word in words:
        word.marked = False


def select_and_mark(
    words: Sequence[Word],
    catalog: Sequence[Template] = DEFAULT_CATALOG,
    max_attempts: int = MAX_ATTEMPTS,
    *,
    rng: random.Random | None = None,
    acceptance_probability: float = ACCEPTANCE_PROBABILITY,
    allow_gaps: bool = False,
) -> bool:
    """Mark the words of one randomly chosen match.

    Returns False when every attempt came back empty; nothing is marked then
    and the caller should leave the text unsuppressed.
    """
    if int(max_attempts) < 1:
        raise ValueError(f"max_attempts must be >= 1, got: {max_attempts!r}")
    rng = rng or random.Random()
    clear_marks(words)

    for attempt in range(1, int(max_attempts) + 1):
        matches = match(
            words,
            catalog,
            rng=rng,
            acceptance_probability=acceptance_probability,
            allow_gaps=allow_gaps,
        )
        if not matches:
            logger.debug("Attempt %d/%d found no match", attempt, max_attempts)
            continue
        winner = rng.choice(matches)
        for word in winner.words:
            word.marked = True
        logger.info("Selected %r (%s) on attempt %d", winner.text, winner.template.describe(), attempt)
        if logger.isEnabledFor(logging.DEBUG):
            for word in winner.words:
                logger.debug("Marked %s", word.to_dict())
        return True

    logger.info("No template matched after %d attempts; leaving text visible", max_attempts)
    return False
