"""Translation capability.

`TranslationProvider` is the seam between the orchestrator and whatever
actually translates text. `OpenAITranslationProvider` is the default
implementation and talks to a chat completion model.
"""

import unicodedata
from abc import ABC, abstractmethod
from typing import Optional

from infrastructure.clients.openai import ChatMessage, OpenAIChatClient
from infrastructure.logging import get_module_logger
from modules.localization.exceptions import TranslationFailed

logger = get_module_logger()

SYSTEM_PROMPT = (
    "You are a translator tool that translates UI strings for a software application.\n"
    "Your inputs will be a source language, a target language, the original text, and\n"
    "optionally some context to help you understand how the original text is used within\n"
    "the application. Each piece of information will be inside some XML-like tags.\n"
    "In your response include *only* the translation, and do not include any metadata, tags,\n"
    "periods, quotes, or new lines, unless included in the original text."
)

# Unicode general categories with nothing to translate.
_NON_LINGUISTIC_CATEGORY_PREFIXES = ("Z", "S", "P", "C")
_NON_LINGUISTIC_CATEGORIES = {"Me"}


def _is_non_linguistic_char(char: str) -> bool:
    # Variation selectors (U+FE00..U+FE0F) follow emoji in emoji-only strings.
    if "\ufe00" <= char <= "\ufe0f":
        return True
    category = unicodedata.category(char)
    return (
        category.startswith(_NON_LINGUISTIC_CATEGORY_PREFIXES)
        or category in _NON_LINGUISTIC_CATEGORIES
    )


def is_non_linguistic(text: str) -> bool:
    """True when text has nothing to translate.

    Empty strings and strings made only of whitespace, symbols (emoji
    included), punctuation and control characters.

    Example:
        is_non_linguistic("")        # True
        is_non_linguistic("👍")      # True
        is_non_linguistic("...")     # True
        is_non_linguistic("OK!")     # False
    """
    return all(_is_non_linguistic_char(char) for char in text)


def build_request(
    text: str,
    source_language: str,
    target_language: str,
    context: Optional[str] = None,
) -> str:
    """Tagged request body sent as the user message."""
    request = f"<source>{source_language}</source>"
    request += f"<target>{target_language}</target>"
    request += f"<original>{text}</original>"
    if context:
        request += f"<context>{context}</context>"
    return request


class TranslationProvider(ABC):
    """Anything that can translate one text between two languages."""

    @abstractmethod
    def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
        context: Optional[str] = None,
    ) -> str:
        """Translate one text.

        Args:
            text: Text in the source language.
            source_language: Language code of text.
            target_language: Language code to translate into.
            context: Optional translator note describing where the text is used.

        Returns:
            The translated text.

        Raises:
            TranslationFailed: If no translation could be produced.
        """
        raise NotImplementedError


class OpenAITranslationProvider(TranslationProvider):
    """Translates through an OpenAI chat completion model.

    Args:
        client: Chat client used for the requests.
        system_prompt: Instructions sent ahead of every request.
    """

    def __init__(
        self, client: OpenAIChatClient, system_prompt: str = SYSTEM_PROMPT
    ) -> None:
        self.client = client
        self.system_prompt = system_prompt

    def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
        context: Optional[str] = None,
    ) -> str:
        messages = [
            ChatMessage(role="system", content=self.system_prompt),
            ChatMessage(
                role="user",
                content=build_request(text, source_language, target_language, context),
            ),
        ]

        result = self.client.complete(messages)
        if not result.is_success:
            raise TranslationFailed(result.describe(), error_code=result.error_code)

        translation = result.data
        logger.debug(
            "text_translated",
            target_language=target_language,
            original=text,
            translation=translation,
        )
        return translation
