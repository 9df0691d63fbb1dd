"""
Anthropic Format Transformers - Handles conversion between Anthropic/Claude and OpenAI API formats.
Requests are flattened into OpenAI chat messages; responses are rebuilt as Claude messages.
"""

import logging
import uuid
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


def format_tool_use_marker(name: str, tool_input: Any) -> str:
    """Render a tool_use block as display text."""
    return f"[Tool Use: {name}] {to_compact_json(tool_input)}"


def format_tool_result_marker(content: Any) -> str:
    """Render a tool_result block as display text."""
    return f"<tool_result>{to_compact_json(content)}</tool_result>"


def _process_text_block(block: Dict[str, Any]) -> str:
    return block.get("text", "")


def _process_tool_use_block(block: Dict[str, Any]) -> str:
    return format_tool_use_marker(block.get("name", ""), block.get("input", {}))


def _process_tool_result_block(block: Dict[str, Any]) -> str:
    content = block.get("content")
    logger.debug(
        f"Tool result for {block.get('tool_use_id', '')}: {to_compact_json(content)}"
    )
    return format_tool_result_marker(content)


def _process_content_block(block: Any) -> Optional[str]:
    """
    Render a single content block as text.

    Args:
        block: Content block dict

    Returns:
        Text for the block, or None if the block type is not carried over
    """
    if not isinstance(block, dict):
        return None

    block_type = block.get("type", "text")

    if block_type == "text":
        return _process_text_block(block)

    if block_type == "tool_use":
        return _process_tool_use_block(block)

    if block_type == "tool_result":
        return _process_tool_result_block(block)

    return None


def flatten_content_blocks(blocks: List[Any]) -> str:
    """Flatten Claude content blocks into one newline-joined string, in order."""
    parts = []
    for block in blocks:
        text = _process_content_block(block)
        if text is not None:
            parts.append(text)
    return "\n".join(parts)


def convert_anthropic_messages(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Convert Claude messages to OpenAI chat messages.

    Args:
        messages: Claude messages

    Returns:
        OpenAI messages with the same roles and order
    """
    converted = []
    for message in messages:
        content = message.get("content", "")
        if isinstance(content, str):
            converted.append({"role": message["role"], "content": content})
        else:
            converted.append(
                {"role": message["role"], "content": flatten_content_blocks(content)}
            )
    return converted


def _convert_system_prompt(system: Any) -> Optional[str]:
    """Convert a Claude system prompt (string or text blocks) to plain text."""
    if isinstance(system, str):
        return system or None
    if isinstance(system, list):
        texts = [
            block.get("text", "")
            for block in system
            if isinstance(block, dict) and block.get("type") == "text"
        ]
        return "\n".join(texts) or None
    return None


def convert_anthropic_tools(tools: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Convert Claude tool definitions to OpenAI function tools."""
    return [
        {
            "type": "function",
            "function": {
                "name": tool["name"],
                "description": tool.get("description") or "",
                "parameters": tool.get("input_schema"),
            },
        }
        for tool in tools
    ]


def anthropic_request_to_openai(
    anthropic_request: Dict[str, Any], target: ProviderConfig
) -> Dict[str, Any]:
    """
    Transform an Anthropic messages request to an OpenAI chat completions request.

    Args:
        anthropic_request: Anthropic format request body
        target: Resolved upstream provider

    Returns:
        Dictionary in OpenAI chat completions format
    """
    messages = convert_anthropic_messages(anthropic_request["messages"])

    system_prompt = _convert_system_prompt(anthropic_request.get("system"))
    if system_prompt:
        messages.insert(0, {"role": "system", "content": system_prompt})

    tools = anthropic_request.get("tools")

    return build_openai_payload(
        target.model,
        messages,
        clamp_max_tokens(anthropic_request.get("max_tokens"), target.max_tokens),
        temperature=anthropic_request.get("temperature"),
        tools=convert_anthropic_tools(tools) if tools else None,
        tool_choice=anthropic_request.get("tool_choice"),
    )


def convert_tool_calls_to_anthropic(
    tool_calls: List[Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Convert OpenAI tool calls to Claude tool_use blocks.

    Raises:
        TranslationError: If any call carries malformed arguments
    """
    content = []
    for call in tool_calls:
        args = parse_tool_arguments(call)
        name = call.get("function", {}).get("name", "")
        logger.debug(f"Tool call: {name}({to_compact_json(args)})")
        content.append(
            {
                "type": "tool_use",
                "id": call.get("id", ""),
                "name": name,
                "input": args,
            }
        )
    return content


def openai_response_to_anthropic(
    openai_response: Dict[str, Any], provider_name: str, model: str
) -> Dict[str, Any]:
    """
    Transform an OpenAI chat completion to Anthropic messages format.

    Args:
        openai_response: Response from the upstream provider
        provider_name: Provider name reported in the model field
        model: Model name reported in the model field

    Returns:
        Dictionary in Anthropic messages format
    """
    message = first_choice(openai_response).get("message") or {}
    tool_calls = message.get("tool_calls")

    if tool_calls:
        content_blocks = convert_tool_calls_to_anthropic(tool_calls)
        stop_reason = "tool_use"
    else:
        content_blocks = [{"type": "text", "text": message.get("content") or ""}]
        stop_reason = "end_turn"

    usage = get_usage(openai_response)

    return {
        "id": f"msg_{uuid.uuid4().hex[:24]}",
        "type": "message",
        "role": "assistant",
        "content": content_blocks,
        "model": f"{provider_name}/{model}",
        "stop_reason": stop_reason,
        "stop_sequence": None,
        "usage": {
            "input_tokens": usage["prompt_tokens"],
            "output_tokens": usage["completion_tokens"],
        },
    }
