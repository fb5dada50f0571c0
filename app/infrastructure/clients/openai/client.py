"""OpenAI client for chat completion requests.

Provides access to the chat completions endpoint with consistent error
handling and OperationResult return types.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

import openai
import structlog
from openai import OpenAI

from infrastructure.operations import OperationResult, classify_openai_error

if TYPE_CHECKING:
    from infrastructure.configuration import OpenAISettings

logger = structlog.get_logger()


@dataclass(frozen=True)
class ChatMessage:
    """A single chat message sent to the model."""

    role: str
    content: str

    def to_dict(self) -> dict:
        """Convert to the request payload format."""
        return {"role": self.role, "content": self.content}


class OpenAIChatClient:
    """Client for OpenAI chat completions.

    All methods return OperationResult for consistent error handling. The
    underlying SDK client is created with automatic retries disabled: a
    failed call is reported to the caller, who decides what to do with it.

    Args:
        openai_settings: OpenAISettings with the API key, model and timeout
        api_key: Optional key overriding openai_settings.OPENAI_API_KEY
    """

    def __init__(
        self,
        openai_settings: "OpenAISettings",
        api_key: Optional[str] = None,
    ) -> None:
        self._model = openai_settings.OPENAI_MODEL
        self._temperature = openai_settings.OPENAI_TEMPERATURE
        self._client = OpenAI(
            api_key=api_key or openai_settings.OPENAI_API_KEY,
            organization=openai_settings.OPENAI_ORGANIZATION,
            base_url=openai_settings.OPENAI_BASE_URL,
            timeout=openai_settings.OPENAI_TIMEOUT_SECONDS,
            max_retries=0,
        )
        self._logger = logger.bind(component="openai_client", model=self._model)

    def complete(
        self,
        messages: Sequence[ChatMessage],
        model: Optional[str] = None,
    ) -> OperationResult:
        """Request a chat completion.

        Args:
            messages: Conversation sent to the model, system prompt first
            model: Optional model overriding the configured one

        Returns:
            OperationResult with the completion text as data, or an error
            classified from the SDK exception
        """
        request: dict = {
            "model": model or self._model,
            "messages": [message.to_dict() for message in messages],
        }
        if self._temperature is not None:
            request["temperature"] = self._temperature

        log = self._logger.bind(message_count=len(messages))
        log.debug("chat_completion_request")

        try:
            response = self._client.chat.completions.create(**request)
        except openai.OpenAIError as e:
            result = classify_openai_error(e)
            log.warning(
                "chat_completion_failed",
                status=result.status.value,
                error_code=result.error_code,
                error=result.message,
            )
            return result

        content = None
        if response.choices:
            content = response.choices[0].message.content

        if not content:
            log.warning("chat_completion_empty")
            return OperationResult.permanent_error(
                message="OpenAI returned an empty completion",
                error_code="EMPTY_COMPLETION",
            )

        log.debug("chat_completion_success", length=len(content))
        return OperationResult.success(
            data=content, message="Chat completion succeeded"
        )
