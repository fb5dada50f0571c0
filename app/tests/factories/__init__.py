"""Test data factories for deterministic test data generation."""

from tests.factories.catalogs import (
    make_catalog_document,
    make_entry,
    make_mixed_strings,
    make_plural_unit,
    make_string_unit,
)

__all__ = [
    "make_catalog_document",
    "make_entry",
    "make_mixed_strings",
    "make_plural_unit",
    "make_string_unit",
]
