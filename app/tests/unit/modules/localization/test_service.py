"""Unit tests for the localization service."""

import json

import pytest

from modules.localization.emitter import SwiftAccessorEmitter
from modules.localization.exceptions import ConfigurationMissing, MalformedDocument
from modules.localization.identifiers import IdentifierSynthesizer
from modules.localization.orchestrator import TranslationOrchestrator
from modules.localization.service import LocalizationService
from modules.localization.store import CatalogStore, backup_path_for


@pytest.fixture
def make_service(provider):
    def _make(**overrides):
        options = {
            "store": CatalogStore(),
            "synthesizer": IdentifierSynthesizer(),
            "emitter": SwiftAccessorEmitter(),
            "orchestrator": TranslationOrchestrator(provider),
            "default_languages": ["de", "fr"],
        }
        options.update(overrides)
        return LocalizationService(**options)

    return _make


def read_document(path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.mark.unit
class TestTranslate:
    def test_translates_and_saves(self, make_service, catalog_file):
        report = make_service().translate(catalog_file)

        assert report.translated == 10
        document = read_document(catalog_file)
        assert document["strings"]["Goodbye"]["localizations"]["fr"] == {
            "stringUnit": {"state": "translated", "value": "Goodbye (fr)"}
        }

    def test_keeps_backup_by_default(self, make_service, catalog_file):
        original = catalog_file.read_text(encoding="utf-8")

        make_service().translate(catalog_file)

        assert backup_path_for(catalog_file).read_text(encoding="utf-8") == original

    def test_backup_can_be_disabled_per_call(self, make_service, catalog_file):
        make_service().translate(catalog_file, backup=False)

        assert not backup_path_for(catalog_file).exists()

    def test_backup_default_comes_from_service(self, make_service, catalog_file):
        make_service(backup_enabled=False).translate(catalog_file)

        assert not backup_path_for(catalog_file).exists()

    def test_explicit_languages_override_defaults(
        self, make_service, provider, catalog_file
    ):
        make_service().translate(catalog_file, ["es"])

        assert {call[2] for call in provider.calls} == {"es"}

    def test_without_orchestrator_raises(self, make_service, catalog_file):
        service = make_service(orchestrator=None)

        with pytest.raises(ConfigurationMissing):
            service.translate(catalog_file)

    def test_malformed_file_is_left_alone(self, make_service, tmp_path):
        path = tmp_path / "Broken.xcstrings"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(MalformedDocument):
            make_service().translate(path)

        assert path.read_text(encoding="utf-8") == "[]"
        assert not backup_path_for(path).exists()


@pytest.mark.unit
class TestGenerateAccessors:
    def test_writes_swift_file(self, make_service, catalog_file):
        swift_path = make_service().generate_accessors(catalog_file)

        assert swift_path == catalog_file.with_suffix(".swift")
        source = swift_path.read_text(encoding="utf-8")
        assert "struct Localizable {" in source
        assert "static func sentDFiles(param1: String, param2: Int) -> String {" in source

    def test_uses_given_catalog(self, make_service, catalog, tmp_path):
        catalog_path = tmp_path / "Never.xcstrings"

        swift_path = make_service().generate_accessors(catalog_path, catalog=catalog)

        assert not catalog_path.exists()
        assert "struct Never {" in swift_path.read_text(encoding="utf-8")

    def test_custom_output_path(self, make_service, catalog_file, tmp_path):
        target = tmp_path / "Strings.swift"

        assert make_service().generate_accessors(catalog_file, target) == target
        assert target.exists()


@pytest.mark.unit
class TestRun:
    def test_translate_then_generate(self, make_service, catalog_file):
        result = make_service().run(catalog_file)

        assert result.catalog_path == catalog_file
        assert result.report.translated == 10
        assert result.swift_path == catalog_file.with_suffix(".swift")

    def test_generation_sees_saved_catalog(self, make_service, catalog_file):
        # Keys with no placeholder take their parameters from translations.
        document = read_document(catalog_file)
        document["strings"]["files_sent"] = {
            "localizations": {
                "en": {"stringUnit": {"state": "translated", "value": "%d sent"}}
            }
        }
        catalog_file.write_text(json.dumps(document), encoding="utf-8")

        result = make_service().run(catalog_file)

        source = result.swift_path.read_text(encoding="utf-8")
        assert "static func filesSent(param1: Int) -> String {" in source
        saved = read_document(catalog_file)
        assert saved["strings"]["files_sent"]["localizations"]["de"] == {
            "stringUnit": {"state": "translated", "value": "%d sent (de)"}
        }

    def test_generate_only(self, make_service, provider, catalog_file):
        original = catalog_file.read_text(encoding="utf-8")

        result = make_service(orchestrator=None).run(catalog_file, translate=False)

        assert result.report is None
        assert result.swift_path.exists()
        assert provider.calls == []
        assert catalog_file.read_text(encoding="utf-8") == original

    def test_translate_only(self, make_service, catalog_file):
        result = make_service().run(catalog_file, generate=False)

        assert result.swift_path is None
        assert not catalog_file.with_suffix(".swift").exists()

    def test_failures_do_not_stop_generation(
        self, make_service, make_provider, catalog_file
    ):
        service = make_service(
            orchestrator=TranslationOrchestrator(make_provider(failing={"Hello"}))
        )

        result = service.run(catalog_file, force_retranslate=True)

        assert result.report.failed == 2
        assert result.swift_path.exists()
        saved = read_document(catalog_file)
        assert saved["strings"]["Hello"]["localizations"]["de"] == {
            "stringUnit": {"state": "error", "value": ""}
        }
