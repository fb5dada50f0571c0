"""Fixtures for localization module unit tests."""

import json
import threading

import pytest

from modules.localization.exceptions import TranslationFailed
from modules.localization.models import Catalog
from modules.localization.translator import TranslationProvider
from tests.factories import make_catalog_document


class FakeTranslationProvider(TranslationProvider):
    """Provider that "translates" by tagging text with the target language.

    Args:
        failing: Texts, or (text, language) pairs, that raise TranslationFailed.
    """

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.calls = []
        self._lock = threading.Lock()

    def translate(self, text, source_language, target_language, context=None):
        with self._lock:
            self.calls.append((text, source_language, target_language, context))
        if text in self.failing or (text, target_language) in self.failing:
            raise TranslationFailed("service unavailable", error_code="SERVER_ERROR")
        return f"{text} ({target_language})"


@pytest.fixture
def catalog_document():
    """Catalog document with every entry shape, see make_mixed_strings()."""
    return make_catalog_document()


@pytest.fixture
def catalog(catalog_document):
    """Catalog parsed from catalog_document."""
    return Catalog.from_document(catalog_document)


@pytest.fixture
def catalog_file(tmp_path, catalog_document):
    """catalog_document written to Localizable.xcstrings."""
    path = tmp_path / "Localizable.xcstrings"
    path.write_text(json.dumps(catalog_document, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def provider():
    """Provider that succeeds for every text."""
    return FakeTranslationProvider()


@pytest.fixture
def make_provider():
    """Factory for providers failing on chosen texts."""
    return FakeTranslationProvider
