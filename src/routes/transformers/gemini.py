"""
Gemini Format Transformers - Handles conversion between Gemini generateContent and OpenAI API formats.
"""

import itertools
import logging
import secrets
import string
from typing import Any, Dict, List, Optional

from ...config import ProviderConfig, clamp_max_tokens
from .common import (
    build_openai_payload,
    first_choice,
    get_usage,
    parse_tool_arguments,
    to_compact_json,
)

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


class ToolCallIdFactory:
    """
    Synthesizes tool call ids for a single translated request.

    Gemini function calls carry no ids. Each id combines a per-request counter,
    which makes ids unique within the request, with a short random suffix.
    """

    def __init__(self, suffix_length: int = 8):
        self._counter = itertools.count()
        self._suffix_length = suffix_length

    def next_id(self) -> str:
        suffix = "".join(
            secrets.choice(_ID_ALPHABET) for _ in range(self._suffix_length)
        )
        return f"call_{next(self._counter)}_{suffix}"


def _get_field(data: Dict[str, Any], camel: str, snake: str) -> Any:
    """Read a field that Gemini clients send in either camelCase or snake_case."""
    value = data.get(camel)
    return value if value is not None else data.get(snake)


def map_gemini_role(role: Optional[str]) -> str:
    """Map a Gemini role to an OpenAI role. Unknown roles pass through."""
    if role is None:
        return "user"
    if role == "model":
        return "assistant"
    return role


def format_function_response_marker(name: str, response: Any) -> str:
    """Render a functionResponse part as display text."""
    return (
        f'<function_response name="{name}">'
        f"{to_compact_json(response)}</function_response>"
    )


def _process_function_call_part(
    function_call: Dict[str, Any], id_factory: ToolCallIdFactory
) -> Dict[str, Any]:
    return {
        "id": id_factory.next_id(),
        "type": "function",
        "function": {
            "name": function_call.get("name", ""),
            "arguments": to_compact_json(function_call.get("args", {})),
        },
    }


def convert_gemini_content(
    content: Dict[str, Any], id_factory: ToolCallIdFactory
) -> Dict[str, Any]:
    """
    Convert one Gemini content entry to an OpenAI chat message.

    Text parts and function calls are collected separately, each keeping its
    own order. Inline data is not carried over.

    Args:
        content: Gemini content with role and parts
        id_factory: Id source for synthesized tool calls

    Returns:
        OpenAI chat message
    """
    text_parts: List[str] = []
    tool_calls: List[Dict[str, Any]] = []

    for part in content.get("parts") or []:
        function_call = _get_field(part, "functionCall", "function_call")
        function_response = _get_field(part, "functionResponse", "function_response")

        if part.get("text"):
            text_parts.append(part["text"])
        elif function_call:
            tool_calls.append(_process_function_call_part(function_call, id_factory))
        elif function_response:
            text_parts.append(
                format_function_response_marker(
                    function_response.get("name", ""),
                    function_response.get("response", {}),
                )
            )
        elif _get_field(part, "inlineData", "inline_data"):
            logger.debug("Dropping inlineData part; not supported upstream")

    message: Dict[str, Any] = {
        "role": map_gemini_role(content.get("role")),
        "content": "\n".join(text_parts),
    }

    if tool_calls:
        message["tool_calls"] = tool_calls
        if not text_parts:
            message["content"] = None

    return message


def _convert_system_instruction(system_instruction: Any) -> Optional[str]:
    """Convert a Gemini systemInstruction to plain text."""
    if isinstance(system_instruction, str):
        return system_instruction or None
    if not isinstance(system_instruction, dict):
        return None
    texts = [
        part["text"]
        for part in system_instruction.get("parts") or []
        if isinstance(part, dict) and part.get("text")
    ]
    return "\n".join(texts) or None


def convert_gemini_tools(tools: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Flatten Gemini function declarations across tool groups into OpenAI tools.

    Declarations without parameters are sent without a ``parameters`` key.
    """
    openai_tools = []
    for tool in tools:
        declarations = _get_field(tool, "functionDeclarations", "function_declarations")
        for func in declarations or []:
            function: Dict[str, Any] = {
                "name": func.get("name"),
                "description": func.get("description") or "",
            }
            if func.get("parameters") is not None:
                function["parameters"] = func["parameters"]
            openai_tools.append({"type": "function", "function": function})
    return openai_tools


def gemini_request_to_openai(
    gemini_request: Dict[str, Any], target: ProviderConfig
) -> Dict[str, Any]:
    """
    Transform a Gemini generateContent request to an OpenAI chat completions request.

    Args:
        gemini_request: Gemini format request body
        target: Resolved upstream provider

    Returns:
        Dictionary in OpenAI chat completions format
    """
    id_factory = ToolCallIdFactory()
    messages = [
        convert_gemini_content(content, id_factory)
        for content in gemini_request["contents"]
    ]

    system_prompt = _convert_system_instruction(
        _get_field(gemini_request, "systemInstruction", "system_instruction")
    )
    if system_prompt:
        messages.insert(0, {"role": "system", "content": system_prompt})

    tools = convert_gemini_tools(gemini_request.get("tools") or [])
    generation_config = (
        _get_field(gemini_request, "generationConfig", "generation_config") or {}
    )

    return build_openai_payload(
        target.model,
        messages,
        clamp_max_tokens(
            _get_field(generation_config, "maxOutputTokens", "max_output_tokens"),
            target.max_tokens,
        ),
        temperature=generation_config.get("temperature"),
        top_p=_get_field(generation_config, "topP", "top_p"),
        stop=_get_field(generation_config, "stopSequences", "stop_sequences"),
        tools=tools or None,
        tool_choice="auto" if tools else None,
    )


def map_finish_reason(finish_reason: Optional[str]) -> str:
    """
    Map an OpenAI finish reason to a Gemini finish reason.

    Only "length" is distinguished; everything else, tool calls included,
    reports "STOP".
    """
    if finish_reason == "length":
        return "MAX_TOKENS"
    return "STOP"


def openai_response_to_gemini(
    openai_response: Dict[str, Any], model: str
) -> Dict[str, Any]:
    """
    Transform an OpenAI chat completion to Gemini generateContent format.

    Args:
        openai_response: Response from the upstream provider
        model: Model name the caller asked for, echoed as modelVersion

    Returns:
        Dictionary in Gemini generateContent format
    """
    choice = first_choice(openai_response)
    message = choice.get("message") or {}

    parts: List[Dict[str, Any]] = []

    if message.get("content"):
        parts.append({"text": message["content"]})

    for tool_call in message.get("tool_calls") or []:
        parts.append(
            {
                "functionCall": {
                    "name": tool_call.get("function", {}).get("name", ""),
                    "args": parse_tool_arguments(tool_call),
                }
            }
        )

    usage = get_usage(openai_response)

    return {
        "candidates": [
            {
                "content": {"parts": parts, "role": "model"},
                "finishReason": map_finish_reason(choice.get("finish_reason")),
                "index": 0,
            }
        ],
        "usageMetadata": {
            "promptTokenCount": usage["prompt_tokens"],
            "candidatesTokenCount": usage["completion_tokens"],
            "totalTokenCount": usage["total_tokens"],
        },
        "modelVersion": model,
    }
