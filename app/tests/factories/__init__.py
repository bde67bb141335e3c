"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_caller_context,
    make_language_metadata,
    make_language_tree,
    write_translation_file,
)

__all__ = [
    "make_caller_context",
    "make_language_metadata",
    "make_language_tree",
    "write_translation_file",
]
