"""Translation feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings, split_csv

DEFAULT_LANGUAGES = "ar,en,de,es,fr,pt,tr,ur,zh,hi"


class TranslationFeatureSettings(FeatureSettings):
    """Configuration for the catalog translation pass.

    Environment Variables:
        TRANSLATION_LANGUAGES: Comma separated language codes to translate into.
            Codes must match the ones used by the string catalog.
        TRANSLATION_RATE_LIMIT_SECONDS: Minimum spacing between two calls to
            the translation service (default: 1.0)
        TRANSLATION_MAX_WORKERS: Number of calls allowed in flight (default: 1)
        TRANSLATION_BACKUP_ENABLED: Keep a `.original` copy of the catalog
            before overwriting it (default: True)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        for language in settings.translation.languages:
            ...
        ```
    """

    languages_csv: str = Field(
        default=DEFAULT_LANGUAGES,
        alias="TRANSLATION_LANGUAGES",
        description="Comma separated target language codes",
    )
    rate_limit_seconds: float = Field(
        default=1.0,
        ge=0.0,
        alias="TRANSLATION_RATE_LIMIT_SECONDS",
        description="Minimum delay between translation calls (seconds)",
    )
    max_workers: int = Field(
        default=1,
        ge=1,
        alias="TRANSLATION_MAX_WORKERS",
        description="Maximum number of translation calls in flight",
    )
    backup_enabled: bool = Field(
        default=True,
        alias="TRANSLATION_BACKUP_ENABLED",
        description="Move the previous catalog to <file>.original before saving",
    )

    @property
    def languages(self) -> list[str]:
        """Target languages parsed from TRANSLATION_LANGUAGES."""
        return split_csv(self.languages_csv)
