"""Unit tests for identifier and parameter synthesis."""

import pytest

from modules.localization.exceptions import IdentifierCollisionError
from modules.localization.identifiers import (
    SWIFT_RESERVED_WORDS,
    IdentifierSynthesizer,
    ParameterType,
    scan_placeholders,
    split_components,
)
from modules.localization.models import Catalog
from tests.factories import make_catalog_document, make_entry, make_string_unit


@pytest.fixture
def synthesizer():
    return IdentifierSynthesizer()


@pytest.mark.unit
class TestNormalize:
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("Account Deletion/Hi!", "Account_Deletion_Hi"),
            ("Line one\nLine two", "Line_one_Line_two"),
            ("a\\b\tc\rd", "a_b_c_d"),
            ("Hello,   world", "Hello_world"),
            ("__private__", "private"),
            ("(x) [y] {z}", "x_y_z"),
            ("!!!", "key"),
            ("", "key"),
        ],
    )
    def test_normalize(self, synthesizer, key, expected):
        assert synthesizer.normalize(key) == expected


@pytest.mark.unit
class TestDeriveIdentifier:
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("Account Deletion/Hi!", "accountDeletionHi"),
            ("Hello", "hello"),
            ("welcome_title", "welcomeTitle"),
            ("Sign in with Apple", "signInWithApple"),
            ("Don't have an account?", "donTHaveAnAccount"),
            ("URL copied", "urlCopied"),
            ("Open iCloud settings", "openICloudSettings"),
            ("%@ sent %d files", "sentDFiles"),
            ("Привет мир", "приветМир"),
            ("e-mail", "eMail"),
        ],
    )
    def test_camel_case(self, synthesizer, key, expected):
        assert synthesizer.derive_identifier(key) == expected

    def test_result_has_no_separators_or_punctuation(self, synthesizer):
        name = synthesizer.derive_identifier("Account Deletion/Hi!")

        assert name[0].islower()
        assert all(char.isalnum() for char in name)

    @pytest.mark.parametrize("word", ["import", "class", "default", "self", "in"])
    def test_reserved_word_is_escaped(self, synthesizer, word):
        assert synthesizer.derive_identifier(word) == f"_{word}"

    def test_reserved_word_after_lowercasing(self, synthesizer):
        assert synthesizer.derive_identifier("Import") == "_import"

    @pytest.mark.parametrize(
        "key, expected", [("2fa", "_2fa"), ("3 days left", "_3DaysLeft")]
    )
    def test_leading_digit_is_escaped(self, synthesizer, key, expected):
        assert synthesizer.derive_identifier(key) == expected

    def test_only_symbols_falls_back_to_key(self, synthesizer):
        assert synthesizer.derive_identifier("👍") == "key"
        assert synthesizer.derive_identifier("...") == "key"

    def test_custom_escape_prefix_and_reserved_words(self):
        synthesizer = IdentifierSynthesizer(
            reserved_words=SWIFT_RESERVED_WORDS | {"description"},
            escape_prefix="l10n_",
        )

        assert synthesizer.derive_identifier("description") == "l10n_description"
        assert synthesizer.derive_identifier("2fa") == "l10n_2fa"

    def test_empty_escape_prefix_is_rejected(self):
        with pytest.raises(ValueError):
            IdentifierSynthesizer(escape_prefix="")

    def test_unknown_collision_policy_is_rejected(self):
        with pytest.raises(ValueError):
            IdentifierSynthesizer(collision_policy="ignore")


@pytest.mark.unit
class TestScanPlaceholders:
    def test_left_to_right(self):
        assert scan_placeholders("%d of %@ at %f") == ["%d", "%@", "%f"]

    def test_percent_literal_is_not_a_placeholder(self):
        assert scan_placeholders("100%% done") == []
        assert scan_placeholders("%%d") == []
        assert scan_placeholders("%%%d") == ["%d"]

    def test_length_modifiers(self):
        assert scan_placeholders("%lld items, %ld, %hhu, %zu") == [
            "%lld",
            "%ld",
            "%hhu",
            "%zu",
        ]

    def test_unknown_conversion_is_ignored(self):
        assert scan_placeholders("50% off, %y") == []


@pytest.mark.unit
class TestDeriveParameters:
    def test_types_follow_conversions(self, synthesizer):
        parameters = synthesizer.derive_parameters("%@ %@ %d")

        assert [(p.name, p.type) for p in parameters] == [
            ("param1", ParameterType.TEXT),
            ("param2", ParameterType.TEXT),
            ("param3", ParameterType.INTEGER),
        ]

    @pytest.mark.parametrize(
        "specifier, expected",
        [
            ("%@", ParameterType.TEXT),
            ("%s", ParameterType.TEXT),
            ("%d", ParameterType.INTEGER),
            ("%o", ParameterType.INTEGER),
            ("%u", ParameterType.INTEGER),
            ("%x", ParameterType.INTEGER),
            ("%X", ParameterType.INTEGER),
            ("%lld", ParameterType.INTEGER),
            ("%f", ParameterType.FLOAT),
            ("%e", ParameterType.FLOAT),
            ("%E", ParameterType.FLOAT),
            ("%g", ParameterType.FLOAT),
            ("%G", ParameterType.FLOAT),
            ("%c", ParameterType.CHARACTER),
            ("%p", ParameterType.POINTER),
        ],
    )
    def test_type_table(self, synthesizer, specifier, expected):
        (parameter,) = synthesizer.derive_parameters(f"Value {specifier}")

        assert parameter.type is expected
        assert parameter.specifier == specifier

    def test_no_placeholder_means_no_parameters(self, synthesizer):
        assert synthesizer.derive_parameters("Hello") == ()

    def test_falls_back_to_first_localization_with_placeholders(self, synthesizer):
        catalog = Catalog.from_document(
            make_catalog_document(
                {
                    "files_sent": make_entry(
                        {
                            "de": make_string_unit("Dateien gesendet"),
                            "en": make_string_unit("%@ sent %d files"),
                            "fr": make_string_unit("%@ a envoyé %d fichiers à %@"),
                        }
                    )
                }
            )
        )

        parameters = synthesizer.derive_parameters(
            "files_sent", catalog.get_group("files_sent")
        )

        assert [p.type for p in parameters] == [
            ParameterType.TEXT,
            ParameterType.INTEGER,
        ]

    def test_key_placeholders_take_precedence(self, synthesizer):
        catalog = Catalog.from_document(
            make_catalog_document(
                {"%d files": make_entry({"de": make_string_unit("%@ %d Dateien")})}
            )
        )

        parameters = synthesizer.derive_parameters(
            "%d files", catalog.get_group("%d files")
        )

        assert [p.type for p in parameters] == [ParameterType.INTEGER]


@pytest.mark.unit
class TestSynthesize:
    def test_records_in_sorted_order(self, synthesizer, catalog):
        records = synthesizer.synthesize(catalog)

        assert [r.key for r in records] == sorted(catalog.strings)

    def test_record_fields(self, synthesizer, catalog):
        records = {r.key: r for r in synthesizer.synthesize(catalog)}

        hello = records["Hello"]
        assert hello.name == "hello"
        assert hello.comment == "Greeting on the home screen"
        assert hello.has_parameters is False

        sent = records["%@ sent %d files"]
        assert sent.name == "sentDFiles"
        assert [p.type for p in sent.parameters] == [
            ParameterType.TEXT,
            ParameterType.INTEGER,
        ]

    def test_collisions_get_numbered(self, synthesizer):
        catalog = Catalog.from_document(
            make_catalog_document(
                {"Hello!": make_entry(), "Hello": make_entry(), "hello": make_entry()}
            )
        )

        names = {r.key: r.name for r in synthesizer.synthesize(catalog)}

        assert names == {"Hello": "hello", "Hello!": "hello2", "hello": "hello3"}

    def test_collision_error_policy(self):
        synthesizer = IdentifierSynthesizer(collision_policy="error")
        catalog = Catalog.from_document(
            make_catalog_document({"Hello": make_entry(), "Hello!": make_entry()})
        )

        with pytest.raises(IdentifierCollisionError) as exc_info:
            synthesizer.synthesize(catalog)

        assert exc_info.value.identifier == "hello"
        assert exc_info.value.keys == ["Hello", "Hello!"]

    def test_names_are_unique(self, synthesizer):
        catalog = Catalog.from_document(
            make_catalog_document(
                {key: make_entry() for key in ["👍", "...", "key", "Key", "key2"]}
            )
        )

        names = [r.name for r in synthesizer.synthesize(catalog)]

        assert len(names) == len(set(names))


@pytest.mark.unit
def test_split_components_keeps_combining_marks():
    assert split_components("café_crème") == ["café", "crème"]
    assert split_components("café-au lait") == ["café", "au", "lait"]
