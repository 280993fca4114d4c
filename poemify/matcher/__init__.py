"""Parallel template matcher."""

from .engine import ACCEPTANCE_PROBABILITY, CompletedMatch, MatchPhase, MatchState, match

__all__ = ["ACCEPTANCE_PROBABILITY", "CompletedMatch", "MatchPhase", "MatchState", "match"]
