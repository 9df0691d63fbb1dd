"""
Pydantic schemas for Anthropic/Claude API format.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class Message(BaseModel):
    """A single message in an Anthropic conversation."""

    role: str = Field(
        ...,
        description="Role of the message author",
        examples=["user", "assistant"],
    )
    content: Union[str, List[Dict[str, Any]]] = Field(
        ...,
        description="Message content. Can be a string or array of content blocks "
        "(text, tool_use, tool_result)",
        examples=["Hello, how can I help you?"],
    )


class Tool(BaseModel):
    """Tool definition for Anthropic API."""

    name: str = Field(
        ...,
        description="Unique name for the tool",
        examples=["get_weather", "search_web"],
    )
    description: Optional[str] = Field(
        default=None,
        description="Description of what the tool does",
    )
    input_schema: Dict[str, Any] = Field(
        ...,
        description="JSON schema defining the tool's input parameters",
    )


class MessagesRequest(BaseModel):
    """
    Request body for Anthropic-compatible /v1/messages endpoint.

    The requested model name is only echoed back; the upstream model comes
    from the proxy configuration.
    """

    model: str = Field(
        ...,
        description="Model ID requested by the client",
        examples=["claude-3-5-sonnet-20241022", "claude-3-opus-20240229"],
    )
    messages: List[Message] = Field(
        ...,
        description="List of messages in the conversation",
        min_length=1,
    )
    max_tokens: Optional[int] = Field(
        default=None,
        description="Maximum number of tokens to generate. Capped at the provider limit",
        ge=1,
        examples=[1024, 4096],
    )
    system: Optional[Union[str, List[Dict[str, Any]]]] = Field(
        default=None,
        description="System prompt. Can be a string or array of text blocks",
        examples=["You are a helpful assistant."],
    )
    temperature: Optional[float] = Field(
        default=None,
        description="Sampling temperature",
        examples=[0.7, 1.0],
    )
    tools: Optional[List[Tool]] = Field(
        default=None,
        description="List of tools available to the model",
    )
    tool_choice: Optional[Union[str, Dict[str, Any]]] = Field(
        default=None,
        description="How the model should use tools. Forwarded unchanged",
        examples=["auto", {"type": "function", "function": {"name": "get_weather"}}],
    )

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "model": "claude-3-5-sonnet-20241022",
                "max_tokens": 1024,
                "messages": [{"role": "user", "content": "Hello, Claude!"}],
                "temperature": 0.7,
            }
        }
