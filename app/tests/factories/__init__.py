"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    Badge,
    make_en_dictionary,
    make_locale_cache,
    make_pl_dictionary,
    write_locale_file,
)

__all__ = [
    "Badge",
    "make_en_dictionary",
    "make_locale_cache",
    "make_pl_dictionary",
    "write_locale_file",
]
