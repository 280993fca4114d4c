"""Blackout found poems: keep one grammatical clause, suppress the rest."""
