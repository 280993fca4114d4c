"""Renderers for poemified word sequences."""

from .blackout import DEFAULT_MASK_CHAR, marked_text, render_html, render_text

__all__ = ["DEFAULT_MASK_CHAR", "marked_text", "render_html", "render_text"]
