"""Selection policy."""

from .policy import MAX_ATTEMPTS, clear_marks, select_and_mark

__all__ = ["MAX_ATTEMPTS", "clear_marks", "select_and_mark"]
