"""Factory functions wiring the localization module from settings."""

from typing import Optional

from infrastructure.clients.openai import OpenAIChatClient
from infrastructure.configuration import Settings
from infrastructure.resilience import IntervalRateLimiter
from infrastructure.services import get_settings
from modules.localization.emitter import SwiftAccessorEmitter
from modules.localization.exceptions import ConfigurationMissing
from modules.localization.identifiers import SWIFT_RESERVED_WORDS, IdentifierSynthesizer
from modules.localization.orchestrator import TranslationOrchestrator
from modules.localization.service import LocalizationService
from modules.localization.store import CatalogStore
from modules.localization.translator import OpenAITranslationProvider


def create_orchestrator(
    settings: Optional[Settings] = None, api_key: Optional[str] = None
) -> TranslationOrchestrator:
    """Orchestrator backed by the OpenAI translation provider.

    Args:
        settings: Settings to use, the application settings by default.
        api_key: Key overriding OPENAI_API_KEY.

    Raises:
        ConfigurationMissing: If no API key is available.
    """
    settings = settings or get_settings()
    api_key = api_key or settings.openai.OPENAI_API_KEY
    if not api_key:
        raise ConfigurationMissing(
            "No OpenAI API key: pass --api-key or set OPENAI_API_KEY"
        )

    client = OpenAIChatClient(openai_settings=settings.openai, api_key=api_key)
    return TranslationOrchestrator(
        provider=OpenAITranslationProvider(client),
        rate_limiter=IntervalRateLimiter(settings.translation.rate_limit_seconds),
        max_workers=settings.translation.max_workers,
    )


def create_synthesizer(settings: Optional[Settings] = None) -> IdentifierSynthesizer:
    settings = settings or get_settings()
    return IdentifierSynthesizer(
        reserved_words=SWIFT_RESERVED_WORDS | set(settings.codegen.extra_reserved_words),
        escape_prefix=settings.codegen.escape_prefix,
        collision_policy=settings.codegen.collision_policy,
    )


def create_service(
    settings: Optional[Settings] = None,
    api_key: Optional[str] = None,
    translation: bool = True,
) -> LocalizationService:
    """Fully wired LocalizationService.

    Args:
        settings: Settings to use, the application settings by default.
        api_key: Key overriding OPENAI_API_KEY.
        translation: Build the translation pass. Without it only accessor
            generation is available and no API key is needed.

    Raises:
        ConfigurationMissing: If translation is requested without an API key.
    """
    settings = settings or get_settings()
    orchestrator = create_orchestrator(settings, api_key) if translation else None
    return LocalizationService(
        store=CatalogStore(),
        synthesizer=create_synthesizer(settings),
        emitter=SwiftAccessorEmitter(),
        orchestrator=orchestrator,
        default_languages=settings.translation.languages,
        backup_enabled=settings.translation.backup_enabled,
    )
