# modules/localization/__init__.py
"""String Catalog localization module.

Translates Xcode String Catalogs (`.xcstrings`) through a chat completion
model and generates type-safe Swift accessors for their keys.

Features:
- Translates only the (key, language) pairs that need it
- Leaves plural, device-variant and substitution entries untouched
- Keeps a `.original` backup of the catalog before overwriting it
- Derives stable identifiers and typed parameters from catalog keys
"""

from modules.localization.emitter import SwiftAccessorEmitter
from modules.localization.exceptions import (
    ConfigurationMissing,
    IdentifierCollisionError,
    LocalizationError,
    MalformedDocument,
    TranslationFailed,
    UnsupportedFormat,
)
from modules.localization.factory import create_orchestrator, create_service
from modules.localization.identifiers import IdentifierRecord, IdentifierSynthesizer
from modules.localization.models import Catalog
from modules.localization.orchestrator import (
    ProcessingReport,
    ProgressEvent,
    TranslationOrchestrator,
)
from modules.localization.service import LocalizationService, RunResult
from modules.localization.store import CatalogStore
from modules.localization.translator import (
    OpenAITranslationProvider,
    TranslationProvider,
)

__all__ = [
    "Catalog",
    "CatalogStore",
    "ConfigurationMissing",
    "IdentifierCollisionError",
    "IdentifierRecord",
    "IdentifierSynthesizer",
    "LocalizationError",
    "LocalizationService",
    "MalformedDocument",
    "OpenAITranslationProvider",
    "ProcessingReport",
    "ProgressEvent",
    "RunResult",
    "SwiftAccessorEmitter",
    "TranslationFailed",
    "TranslationOrchestrator",
    "TranslationProvider",
    "UnsupportedFormat",
    "create_orchestrator",
    "create_service",
]
