"""
Pydantic schemas for Gemini generateContent API format.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, Field


class Content(BaseModel):
    """A single turn in a Gemini conversation."""

    role: Optional[str] = Field(
        default=None,
        description="Role of the author. 'model' maps to 'assistant'; omitted means 'user'",
        examples=["user", "model"],
    )
    parts: List[Dict[str, Any]] = Field(
        ...,
        description="Ordered parts: text, functionCall, functionResponse or inlineData",
        examples=[[{"text": "Hello"}]],
    )


class FunctionDeclaration(BaseModel):
    """A function the model may call."""

    name: str = Field(..., description="Function name", examples=["get_weather"])
    description: Optional[str] = Field(
        default=None, description="What the function does"
    )
    parameters: Optional[Dict[str, Any]] = Field(
        default=None, description="JSON schema of the function arguments"
    )


class ToolGroup(BaseModel):
    """A group of function declarations."""

    function_declarations: Optional[List[FunctionDeclaration]] = Field(
        default=None,
        validation_alias=AliasChoices("functionDeclarations", "function_declarations"),
        description="Function declarations in this tool group",
    )

    class Config:
        extra = "allow"


class GenerationConfig(BaseModel):
    """Sampling parameters for generation. Accepts camelCase or snake_case keys."""

    max_output_tokens: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("maxOutputTokens", "max_output_tokens"),
        description="Maximum number of tokens to generate. Capped at the provider limit",
        ge=1,
    )
    temperature: Optional[float] = Field(default=None, description="Sampling temperature")
    top_p: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("topP", "top_p"),
        description="Nucleus sampling probability",
    )
    top_k: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("topK", "top_k"),
        description="Top-k sampling. Not forwarded upstream",
    )
    stop_sequences: Optional[List[str]] = Field(
        default=None,
        validation_alias=AliasChoices("stopSequences", "stop_sequences"),
        description="Custom stop sequences",
    )

    class Config:
        extra = "allow"


class GenerateContentRequest(BaseModel):
    """
    Request body for Gemini-compatible generateContent endpoint.

    The model name comes from the URL path and is echoed back as modelVersion.
    """

    contents: List[Content] = Field(
        ...,
        description="Conversation contents",
        min_length=1,
    )
    generation_config: Optional[GenerationConfig] = Field(
        default=None,
        validation_alias=AliasChoices("generationConfig", "generation_config"),
        description="Generation parameters",
    )
    system_instruction: Optional[Union[str, Dict[str, Any]]] = Field(
        default=None,
        validation_alias=AliasChoices("systemInstruction", "system_instruction"),
        description="System prompt as text or a content with text parts",
    )
    tools: Optional[List[ToolGroup]] = Field(
        default=None,
        description="Function declarations available to the model",
    )

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "contents": [{"role": "user", "parts": [{"text": "Hello!"}]}],
                "generationConfig": {"temperature": 0.7, "maxOutputTokens": 1024},
            }
        }
