"""Tests for Gemini transformer module."""

import copy
import json
import re
import pytest

from src.config import resolve_target_config
from src.errors import TranslationError
from src.routes.transformers.gemini import (
    ToolCallIdFactory,
    convert_gemini_content,
    convert_gemini_tools,
    format_function_response_marker,
    gemini_request_to_openai,
    map_finish_reason,
    map_gemini_role,
    openai_response_to_gemini,
)


@pytest.fixture
def target():
    return resolve_target_config({"model": "target-model", "max_tokens": "16384"})


class TestToolCallIdFactory:
    """Tests for ToolCallIdFactory."""

    def test_id_format(self):
        call_id = ToolCallIdFactory().next_id()
        assert re.fullmatch(r"call_0_[a-z0-9]{8}", call_id)

    def test_ids_unique_within_request(self):
        factory = ToolCallIdFactory()
        ids = [factory.next_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestMapGeminiRole:
    """Tests for map_gemini_role."""

    def test_model_becomes_assistant(self):
        assert map_gemini_role("model") == "assistant"

    def test_user_unchanged(self):
        assert map_gemini_role("user") == "user"

    def test_unknown_role_forwarded(self):
        assert map_gemini_role("function") == "function"

    def test_missing_role_is_user(self):
        assert map_gemini_role(None) == "user"


class TestConvertGeminiContent:
    """Tests for convert_gemini_content."""

    def test_text_parts_joined(self):
        content = {"role": "user", "parts": [{"text": "line 1"}, {"text": "line 2"}]}
        result = convert_gemini_content(content, ToolCallIdFactory())
        assert result == {"role": "user", "content": "line 1\nline 2"}

    def test_function_call_only(self):
        content = {
            "role": "model",
            "parts": [{"functionCall": {"name": "get_weather", "args": {"city": "Paris"}}}],
        }
        result = convert_gemini_content(content, ToolCallIdFactory())

        assert result["role"] == "assistant"
        assert result["content"] is None
        assert len(result["tool_calls"]) == 1
        call = result["tool_calls"][0]
        assert call["type"] == "function"
        assert call["id"].startswith("call_")
        assert call["function"]["name"] == "get_weather"
        assert json.loads(call["function"]["arguments"]) == {"city": "Paris"}

    def test_text_and_calls_bucketed(self):
        content = {
            "role": "model",
            "parts": [
                {"functionCall": {"name": "a", "args": {}}},
                {"text": "first"},
                {"functionCall": {"name": "b", "args": {"x": 1}}},
                {"text": "second"},
            ],
        }
        result = convert_gemini_content(content, ToolCallIdFactory())

        assert result["content"] == "first\nsecond"
        assert [c["function"]["name"] for c in result["tool_calls"]] == ["a", "b"]

    def test_inline_data_dropped(self):
        content = {
            "role": "user",
            "parts": [
                {"text": "Describe this"},
                {"inlineData": {"mimeType": "image/png", "data": "iVBOR"}},
            ],
        }
        result = convert_gemini_content(content, ToolCallIdFactory())
        assert result == {"role": "user", "content": "Describe this"}

    def test_function_response_rendered_as_text(self):
        content = {
            "role": "user",
            "parts": [
                {
                    "functionResponse": {
                        "name": "get_weather",
                        "response": {"temp": 21},
                    }
                }
            ],
        }
        result = convert_gemini_content(content, ToolCallIdFactory())
        assert result["content"] == (
            '<function_response name="get_weather">{"temp":21}</function_response>'
        )

    def test_no_parts_gives_empty_string(self):
        result = convert_gemini_content({"role": "user", "parts": []}, ToolCallIdFactory())
        assert result == {"role": "user", "content": ""}


class TestFormatFunctionResponseMarker:
    """Tests for format_function_response_marker."""

    def test_marker(self):
        assert format_function_response_marker("f", {"ok": True}) == (
            '<function_response name="f">{"ok":true}</function_response>'
        )


class TestConvertGeminiTools:
    """Tests for convert_gemini_tools."""

    def test_flattens_all_groups(self):
        tools = [
            {
                "function_declarations": [
                    {"name": "a", "description": "A", "parameters": {"type": "object"}},
                    {"name": "b", "description": "B", "parameters": {"type": "object"}},
                ]
            },
            {
                "functionDeclarations": [
                    {"name": "c", "description": "C", "parameters": {"type": "object"}}
                ]
            },
        ]
        result = convert_gemini_tools(tools)

        assert [t["function"]["name"] for t in result] == ["a", "b", "c"]
        assert result[0] == {
            "type": "function",
            "function": {
                "name": "a",
                "description": "A",
                "parameters": {"type": "object"},
            },
        }

    def test_parameterless_declaration(self):
        result = convert_gemini_tools([{"function_declarations": [{"name": "now"}]}])
        assert result == [
            {"type": "function", "function": {"name": "now", "description": ""}}
        ]

    def test_null_fields_from_validated_body(self):
        tools = [
            {
                "function_declarations": [
                    {"name": "now", "description": None, "parameters": None}
                ]
            }
        ]
        function = convert_gemini_tools(tools)[0]["function"]
        assert function["description"] == ""
        assert "parameters" not in function

    def test_empty(self):
        assert convert_gemini_tools([]) == []


class TestGeminiRequestToOpenAI:
    """Tests for gemini_request_to_openai."""

    def test_two_turn_conversation(self, target):
        request = {
            "contents": [
                {"role": "user", "parts": [{"text": "hi"}]},
                {"role": "model", "parts": [{"text": "hello"}]},
            ]
        }
        result = gemini_request_to_openai(request, target)

        assert result["messages"] == [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
        ]
        assert result["model"] == "target-model"
        assert result["stream"] is False
        assert "tools" not in result
        assert "tool_choice" not in result

    def test_generation_config(self, target):
        request = {
            "contents": [{"role": "user", "parts": [{"text": "hi"}]}],
            "generationConfig": {
                "maxOutputTokens": 20000,
                "temperature": 0.4,
                "topP": 0.9,
                "stopSequences": ["END"],
            },
        }
        result = gemini_request_to_openai(request, target)

        assert result["max_tokens"] == 16384
        assert result["temperature"] == 0.4
        assert result["top_p"] == 0.9
        assert result["stop"] == ["END"]

    def test_max_tokens_below_ceiling(self, target):
        request = {
            "contents": [{"role": "user", "parts": [{"text": "hi"}]}],
            "generationConfig": {"maxOutputTokens": 1000},
        }
        assert gemini_request_to_openai(request, target)["max_tokens"] == 1000

    def test_tools_and_auto_tool_choice(self, target):
        request = {
            "contents": [{"role": "user", "parts": [{"text": "weather?"}]}],
            "tools": [
                {
                    "function_declarations": [
                        {
                            "name": "get_weather",
                            "description": "Get weather",
                            "parameters": {"type": "object"},
                        }
                    ]
                }
            ],
        }
        result = gemini_request_to_openai(request, target)

        assert result["tools"][0]["function"]["name"] == "get_weather"
        assert result["tool_choice"] == "auto"

    def test_system_instruction_prepended(self, target):
        request = {
            "systemInstruction": {"parts": [{"text": "Be brief."}]},
            "contents": [{"role": "user", "parts": [{"text": "hi"}]}],
        }
        result = gemini_request_to_openai(request, target)
        assert result["messages"][0] == {"role": "system", "content": "Be brief."}

    def test_ids_unique_across_contents(self, target):
        request = {
            "contents": [
                {"role": "model", "parts": [{"functionCall": {"name": "f", "args": {}}}]},
                {"role": "model", "parts": [{"functionCall": {"name": "f", "args": {}}}]},
            ]
        }
        result = gemini_request_to_openai(request, target)
        first = result["messages"][0]["tool_calls"][0]["id"]
        second = result["messages"][1]["tool_calls"][0]["id"]
        assert first != second

    def test_input_not_mutated(self, target):
        request = {
            "contents": [
                {"role": "model", "parts": [{"functionCall": {"name": "f", "args": {"x": 1}}}]}
            ],
            "generationConfig": {"maxOutputTokens": 50000},
        }
        original = copy.deepcopy(request)
        gemini_request_to_openai(request, target)
        assert request == original


class TestMapFinishReason:
    """Tests for map_finish_reason."""

    @pytest.mark.parametrize(
        "upstream, expected",
        [
            ("length", "MAX_TOKENS"),
            ("stop", "STOP"),
            ("tool_calls", "STOP"),
            ("content_filter", "STOP"),
            (None, "STOP"),
        ],
    )
    def test_mapping(self, upstream, expected):
        assert map_finish_reason(upstream) == expected


class TestOpenAIResponseToGemini:
    """Tests for openai_response_to_gemini."""

    def test_text_response(self):
        openai_response = {
            "choices": [
                {
                    "message": {"role": "assistant", "content": "Hello!"},
                    "finish_reason": "stop",
                }
            ],
            "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
        }
        result = openai_response_to_gemini(openai_response, "gemini-1.5-pro")

        assert result == {
            "candidates": [
                {
                    "content": {"parts": [{"text": "Hello!"}], "role": "model"},
                    "finishReason": "STOP",
                    "index": 0,
                }
            ],
            "usageMetadata": {
                "promptTokenCount": 3,
                "candidatesTokenCount": 2,
                "totalTokenCount": 5,
            },
            "modelVersion": "gemini-1.5-pro",
        }

    def test_text_and_tool_calls(self):
        openai_response = {
            "choices": [
                {
                    "message": {
                        "content": "Checking",
                        "tool_calls": [
                            {
                                "id": "c1",
                                "function": {"name": "f", "arguments": '{"x":1}'},
                            }
                        ],
                    },
                    "finish_reason": "tool_calls",
                }
            ]
        }
        result = openai_response_to_gemini(openai_response, "gemini-2.5-flash")
        candidate = result["candidates"][0]

        assert candidate["content"]["parts"] == [
            {"text": "Checking"},
            {"functionCall": {"name": "f", "args": {"x": 1}}},
        ]
        assert candidate["finishReason"] == "STOP"

    def test_length_finish_reason(self):
        openai_response = {
            "choices": [{"message": {"content": "trunc"}, "finish_reason": "length"}]
        }
        result = openai_response_to_gemini(openai_response, "gemini-1.5-pro")
        assert result["candidates"][0]["finishReason"] == "MAX_TOKENS"

    def test_empty_content_has_no_text_part(self):
        openai_response = {"choices": [{"message": {"content": ""}}]}
        result = openai_response_to_gemini(openai_response, "gemini-1.5-pro")
        assert result["candidates"][0]["content"]["parts"] == []

    def test_missing_usage_defaults_to_zero(self):
        openai_response = {"choices": [{"message": {"content": "Hi"}}]}
        result = openai_response_to_gemini(openai_response, "gemini-1.5-pro")
        assert result["usageMetadata"] == {
            "promptTokenCount": 0,
            "candidatesTokenCount": 0,
            "totalTokenCount": 0,
        }

    def test_malformed_arguments_raise(self):
        openai_response = {
            "choices": [
                {"message": {"tool_calls": [{"function": {"name": "f", "arguments": "{"}}]}}
            ]
        }
        with pytest.raises(TranslationError):
            openai_response_to_gemini(openai_response, "gemini-1.5-pro")
