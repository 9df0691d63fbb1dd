"""Helpers shared by the Anthropic and Gemini transformers."""

import json
import logging
from typing import Any, Dict, List

from ...errors import TranslationError

logger = logging.getLogger(__name__)


def to_compact_json(value: Any) -> str:
    """Serialize a value without whitespace between tokens."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def parse_tool_arguments(tool_call: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse the JSON-encoded arguments of an OpenAI tool call.

    Args:
        tool_call: OpenAI tool call dict

    Returns:
        Parsed arguments object

    Raises:
        TranslationError: If the arguments are missing or not valid JSON
    """
    function = tool_call.get("function") or {}
    name = function.get("name", "")
    arguments = function.get("arguments")

    # Some providers return already-decoded arguments
    if isinstance(arguments, dict):
        return arguments

    if not isinstance(arguments, str):
        raise TranslationError(f"Tool call '{name}' has no arguments payload")

    try:
        parsed = json.loads(arguments)
    except json.JSONDecodeError as e:
        logger.error(f"Malformed arguments for tool call '{name}': {arguments[:200]!r}")
        raise TranslationError(
            f"Upstream returned malformed arguments for tool call '{name}': {e}"
        ) from e

    if not isinstance(parsed, dict):
        raise TranslationError(
            f"Arguments for tool call '{name}' must be a JSON object"
        )
    return parsed


def first_choice(openai_response: Dict[str, Any]) -> Dict[str, Any]:
    """Return the first completion choice, failing if there is none."""
    choices: List[Dict[str, Any]] = openai_response.get("choices") or []
    if not choices:
        raise TranslationError("Upstream response contains no choices")
    return choices[0]


def get_usage(openai_response: Dict[str, Any]) -> Dict[str, int]:
    """Read token counts from an OpenAI response, defaulting absent values to 0."""
    usage = openai_response.get("usage") or {}
    return {
        "prompt_tokens": usage.get("prompt_tokens") or 0,
        "completion_tokens": usage.get("completion_tokens") or 0,
        "total_tokens": usage.get("total_tokens") or 0,
    }


def build_openai_payload(
    model: str,
    messages: List[Dict[str, Any]],
    max_tokens: int,
    **optional: Any,
) -> Dict[str, Any]:
    """
    Build an OpenAI-compatible chat completions request body.

    Optional parameters with a None value are left out. Streaming is never
    requested.
    """
    payload: Dict[str, Any] = {
        "model": model,
        "messages": messages,
        "max_tokens": max_tokens,
        "stream": False,
    }
    for key, value in optional.items():
        if value is not None:
            payload[key] = value
    return payload
