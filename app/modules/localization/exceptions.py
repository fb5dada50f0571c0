"""Errors raised by the localization module.

Document and configuration errors abort a run. Entry-level errors
(UnsupportedFormat, TranslationFailed) are recorded in the processing report
and never abort it.
"""

from typing import Optional


class LocalizationError(Exception):
    """Base exception for all localization errors."""

    pass


class MalformedDocument(LocalizationError):
    """Raised when a catalog document does not match the String Catalog schema.

    Raised while loading, before anything is mutated.
    """

    pass


class ConfigurationMissing(LocalizationError):
    """Raised when a required input is absent for the requested operation.

    Example: no target languages, or no API key when translation was requested.
    Raised before any external call is made.
    """

    pass


class UnsupportedFormat(LocalizationError):
    """An entry uses a plural, device-variant or substitution unit.

    Instances are collected as warnings; the entry is left untouched.

    Attributes:
        key: Catalog key of the entry
        language: Language code of the unsupported unit
        shape: Name of the alternate-format member (e.g. "variations")
    """

    def __init__(self, key: str, language: str, shape: str):
        super().__init__(
            f"Unsupported format '{shape}' in entry with key: {key} ({language})"
        )
        self.key = key
        self.language = language
        self.shape = shape


class TranslationFailed(LocalizationError):
    """The translation capability could not translate one text.

    Attributes:
        reason: Human readable cause
        error_code: Optional machine error code from the client
        key: Catalog key, filled in by the orchestrator
        language: Target language, filled in by the orchestrator
    """

    def __init__(
        self,
        reason: str,
        error_code: Optional[str] = None,
        key: Optional[str] = None,
        language: Optional[str] = None,
    ):
        super().__init__(reason)
        self.reason = reason
        self.error_code = error_code
        self.key = key
        self.language = language

    def for_pair(self, key: str, language: str) -> "TranslationFailed":
        """Copy of this failure attributed to a (key, language) pair."""
        return TranslationFailed(self.reason, self.error_code, key, language)

    def __str__(self) -> str:
        if self.key is None:
            return self.reason
        return f"Failed to translate {self.key!r} into {self.language}: {self.reason}"


class IdentifierCollisionError(LocalizationError):
    """Two keys derive the same accessor name and the policy forbids suffixing.

    Attributes:
        identifier: The colliding accessor name
        keys: The catalog keys that produced it
    """

    def __init__(self, identifier: str, keys: list[str]):
        super().__init__(
            f"Keys {keys!r} all derive the identifier '{identifier}'"
        )
        self.identifier = identifier
        self.keys = keys
