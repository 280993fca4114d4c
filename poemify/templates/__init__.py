"""Sentence template catalog."""

from .catalog import DEFAULT_CATALOG, SUBJECT_SHAPES, VERB_OBJECT_SHAPES, Template, build_catalog

__all__ = ["DEFAULT_CATALOG", "SUBJECT_SHAPES", "VERB_OBJECT_SHAPES", "Template", "build_catalog"]
