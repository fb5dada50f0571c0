"""OpenAI chat client for infrastructure layer.

Public API (Package Level):
- OpenAIChatClient: Client for chat completion requests
- ChatMessage: Role/content pair sent to the model

Developer Usage:
    from infrastructure.clients.openai import ChatMessage, OpenAIChatClient
    from infrastructure.services import get_settings

    client = OpenAIChatClient(get_settings().openai)
    result = client.complete([ChatMessage("user", "Hello")])
    if result.is_success:
        print(result.data)
"""

from infrastructure.clients.openai.client import ChatMessage, OpenAIChatClient

__all__ = [
    "OpenAIChatClient",
    "ChatMessage",
]
