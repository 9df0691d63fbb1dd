"""
Anthropic API Routes - Handles Anthropic/Claude-compatible endpoints.
This module provides the Anthropic-compatible messages endpoint that transforms
requests/responses and delegates to the configured OpenAI-compatible provider.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Header, Request, Response

from ..config import create_anthropic_error_response, load_target_config
from ..errors import ProxyError
from ..schemas import AnthropicMessagesRequest
from ..services.auth import ANTHROPIC_KEY_HEADERS, require_api_key
from ..services.openai_client import send_chat_completion
from .transformers import anthropic_request_to_openai, openai_response_to_anthropic
from .utils import json_response, log_token_cap, parse_json_body, validate_body

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/v1/messages",
    tags=["Anthropic Compatible"],
    summary="Create a message",
    description="""
Create a message using Anthropic Claude-compatible format.

The request is forwarded to the configured OpenAI-compatible provider and the
response is returned in Anthropic format. The response `model` field reports
`<provider>/<requested model>`.

**Authentication:** The caller's key is forwarded upstream. Supply it via:
- `Authorization: Bearer <key>` header
- `x-api-key` header (Anthropic style)

**Tool Use:** Define tools in the `tools` array and receive `tool_use` content
blocks when the model wants to call a tool. `tool_use` and `tool_result` blocks
in the conversation history are passed to the model as text.

Streaming is not supported; responses are always returned complete.
""",
    response_model=None,
)
async def anthropic_messages(
    http_request: Request,
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="x-api-key"),
) -> Response:
    """
    Anthropic-compatible messages endpoint.
    Transforms Anthropic requests to OpenAI format, sends them upstream,
    and transforms responses back to Anthropic format.
    """
    try:
        api_key = require_api_key(authorization, x_api_key, ANTHROPIC_KEY_HEADERS)

        body = await parse_json_body(http_request)
        request = validate_body(AnthropicMessagesRequest, body)
        target = load_target_config()

        logger.info(
            f"Claude API -> {target.provider_name} | Model: {request.model} -> {target.model}"
        )
        log_token_cap(request.max_tokens, target.max_tokens)

        openai_request = anthropic_request_to_openai(request.model_dump(), target)
        completion = await send_chat_completion(
            openai_request, api_key, target.base_url
        )
        anthropic_response = openai_response_to_anthropic(
            completion, target.provider_name, request.model
        )

        logger.info(f"Processed Anthropic response for model: {request.model}")
        return json_response(anthropic_response)

    except ProxyError as e:
        logger.error(f"Claude API error ({type(e).__name__}): {e.message}")
        return json_response(create_anthropic_error_response(e.message), e.status_code)
    except Exception as e:
        logger.exception(f"Proxy error: {e}")
        return json_response(
            create_anthropic_error_response("Internal server error"), 500
        )
