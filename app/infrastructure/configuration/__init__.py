"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
application using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    OpenAISettings, TranslationFeatureSettings, CodegenSettings: Section
        classes (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    model = settings.openai.OPENAI_MODEL
    languages = settings.translation.languages
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.integrations import OpenAISettings
from infrastructure.configuration.features import (
    CodegenSettings,
    TranslationFeatureSettings,
)

__all__ = [
    "Settings",
    "settings",
    "OpenAISettings",
    "TranslationFeatureSettings",
    "CodegenSettings",
]
