"""Pydantic schemas for inbound request bodies."""

from .anthropic import MessagesRequest as AnthropicMessagesRequest
from .gemini import GenerateContentRequest as GeminiGenerateContentRequest

__all__ = [
    "AnthropicMessagesRequest",
    "GeminiGenerateContentRequest",
]
