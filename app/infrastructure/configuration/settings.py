"""xcstrings-translate configuration settings - main aggregator."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import OpenAISettings

# Feature settings
from infrastructure.configuration.features import (
    CodegenSettings,
    TranslationFeatureSettings,
)


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External service configurations (OpenAI)
    - **Features**: Feature configurations (translation pass, code generation)

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_FORMAT: "console" for human readable output, "json" for log shipping

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        api_key = settings.openai.OPENAI_API_KEY
        languages = settings.translation.languages

        if settings.is_json_logging:
            ...
        ```
    """

    # Application-level settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # Integration settings
    openai: OpenAISettings

    # Feature settings
    translation: TranslationFeatureSettings
    codegen: CodegenSettings

    @property
    def is_json_logging(self) -> bool:
        """Check if logs should be rendered as JSON lines.

        Returns:
            True if LOG_FORMAT is "json", False otherwise.
        """
        return self.LOG_FORMAT == "json"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "openai": OpenAISettings,
            # Features
            "translation": TranslationFeatureSettings,
            "codegen": CodegenSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
