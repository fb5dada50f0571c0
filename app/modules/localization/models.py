"""String Catalog models.

In-memory representation of an Xcode String Catalog (`.xcstrings`):

    {
      "sourceLanguage" : "en",
      "strings" : {
        "Hello %@" : {
          "comment" : "Greeting on the home screen",
          "localizations" : {
            "de" : { "stringUnit" : { "state" : "translated", "value" : "Hallo %@" } }
          }
        }
      },
      "version" : "1.0"
    }

Members the models do not name (`version`, `extractionState`,
`shouldTranslate`, ...) are kept as pydantic extras and written back as-is.
"""

from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modules.localization.exceptions import MalformedDocument

TRANSLATED = "translated"
ERROR = "error"

# Members that turn a localization unit into a plural/device/substitution unit.
ALTERNATE_FORMAT_MEMBERS = ("variations", "substitutions")


class UnitKind(str, Enum):
    """The two shapes a localization unit can take."""

    STRING = "string"
    OPAQUE = "opaque"


class StringUnit(BaseModel):
    """Translated text of one language and its translation state."""

    model_config = ConfigDict(extra="allow")

    state: Optional[str] = None
    value: Optional[str] = None


class LocalizationUnit(BaseModel):
    """Per-language payload of a catalog entry.

    Either a simple string unit, or an opaque alternate-format unit carrying
    `variations` / `substitutions`. The opaque content stays in the model
    extras and is never interpreted.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    string_unit: Optional[StringUnit] = Field(default=None, alias="stringUnit")

    @classmethod
    def text(cls, value: str, state: str) -> "LocalizationUnit":
        """Create a string unit."""
        return cls(string_unit=StringUnit(state=state, value=value))

    @property
    def alternate_format(self) -> Optional[str]:
        """Name of the alternate-format member, None for string units."""
        extra = self.model_extra or {}
        for member in ALTERNATE_FORMAT_MEMBERS:
            if member in extra:
                return member
        return None

    @property
    def kind(self) -> UnitKind:
        return UnitKind.STRING if self.alternate_format is None else UnitKind.OPAQUE

    @property
    def is_supported_format(self) -> bool:
        return self.kind is UnitKind.STRING

    @property
    def state(self) -> Optional[str]:
        return self.string_unit.state if self.string_unit else None

    @property
    def value(self) -> Optional[str]:
        return self.string_unit.value if self.string_unit else None

    @property
    def has_translation(self) -> bool:
        """True when the unit is a string unit in the "translated" state."""
        return self.is_supported_format and self.state == TRANSLATED


class LocalizationGroup(BaseModel):
    """All localizations of one catalog key.

    `localizations` is None until the first translation is merged: a missing
    map and a missing language both mean "not translated yet".
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    comment: Optional[str] = None
    localizations: Optional[Dict[str, LocalizationUnit]] = None

    def unit(self, language: str) -> Optional[LocalizationUnit]:
        """Unit for a language, None when absent."""
        return (self.localizations or {}).get(language)

    def source_text(self, key: str, source_language: str) -> str:
        """Text to translate from.

        The explicit source-language value when there is one, otherwise the
        key itself, which doubles as the default source string.
        """
        unit = self.unit(source_language)
        if unit is not None and unit.value is not None:
            return unit.value
        return key


class Catalog(BaseModel):
    """A String Catalog document.

    Attributes:
        source_language: Language the keys are written in.
        strings: Key -> LocalizationGroup, in document order.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    source_language: str = Field(alias="sourceLanguage", min_length=1)
    strings: Dict[str, LocalizationGroup]

    @classmethod
    def from_document(cls, data: Any) -> "Catalog":
        """Build a catalog from a decoded JSON document.

        Args:
            data: Decoded JSON value.

        Returns:
            Catalog instance.

        Raises:
            MalformedDocument: If the document does not match the schema.
        """
        if not isinstance(data, dict):
            raise MalformedDocument(
                f"Catalog document must be a JSON object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MalformedDocument(f"Invalid string catalog: {e}") from e

    def to_document(self) -> Dict[str, Any]:
        """Convert back to the document schema (camelCase members).

        Only members present in the document, or written since, are emitted,
        so explicit nulls survive and absent members stay absent.
        """
        return self.model_dump(by_alias=True, exclude_unset=True)

    def keys(self) -> list[str]:
        return list(self.strings.keys())

    def entries(self) -> Iterator[Tuple[str, LocalizationGroup]]:
        """Iterate (key, group) pairs in document order."""
        return iter(self.strings.items())

    def get_group(self, key: str) -> Optional[LocalizationGroup]:
        return self.strings.get(key)

    def set_translation(self, key: str, language: str, text: str, state: str) -> None:
        """Write the string unit of one (key, language) pair.

        Creates the group's localizations map and the language's unit when
        absent, otherwise overwrites the unit's stringUnit.

        Args:
            key: Existing catalog key.
            language: Language code.
            text: Translated text ("" for failures).
            state: Translation state ("translated", "error", ...).

        Raises:
            KeyError: If key is not in the catalog.
        """
        group = self.strings[key]
        if group.localizations is None:
            group.localizations = {}

        unit = group.localizations.get(language)
        if unit is None:
            group.localizations[language] = LocalizationUnit.text(text, state)
        else:
            unit.string_unit = StringUnit(state=state, value=text)
