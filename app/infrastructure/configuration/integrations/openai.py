"""OpenAI integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class OpenAISettings(IntegrationSettings):
    """OpenAI API configuration.

    Environment Variables:
        OPENAI_API_KEY: API key, see https://platform.openai.com/api-keys
        OPENAI_MODEL: Chat model used for translations (default: gpt-4o)
        OPENAI_ORGANIZATION: Optional organization identifier
        OPENAI_BASE_URL: Optional API base URL (proxies, compatible servers)
        OPENAI_TIMEOUT_SECONDS: Per-request timeout (default: 60s)
        OPENAI_TEMPERATURE: Sampling temperature (default: unset, model default)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.openai.OPENAI_API_KEY:
            model = settings.openai.OPENAI_MODEL
        ```
    """

    OPENAI_API_KEY: str | None = Field(default=None, alias="OPENAI_API_KEY")
    OPENAI_MODEL: str = Field(default="gpt-4o", alias="OPENAI_MODEL")
    OPENAI_ORGANIZATION: str | None = Field(default=None, alias="OPENAI_ORGANIZATION")
    OPENAI_BASE_URL: str | None = Field(default=None, alias="OPENAI_BASE_URL")
    OPENAI_TIMEOUT_SECONDS: float = Field(default=60.0, alias="OPENAI_TIMEOUT_SECONDS")
    OPENAI_TEMPERATURE: float | None = Field(default=None, alias="OPENAI_TEMPERATURE")
