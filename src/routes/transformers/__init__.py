"""Transformers for converting between API formats."""

from .anthropic import (
    anthropic_request_to_openai,
    openai_response_to_anthropic,
    format_tool_use_marker,
    format_tool_result_marker,
)
from .gemini import (
    gemini_request_to_openai,
    openai_response_to_gemini,
    ToolCallIdFactory,
)

__all__ = [
    # Anthropic
    "anthropic_request_to_openai",
    "openai_response_to_anthropic",
    "format_tool_use_marker",
    "format_tool_result_marker",
    # Gemini
    "gemini_request_to_openai",
    "openai_response_to_gemini",
    "ToolCallIdFactory",
]
