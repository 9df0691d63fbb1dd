"""
Gemini API Routes - Handles Gemini-compatible generateContent endpoints.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Header, Request, Response

from ..config import create_gemini_error_response, load_target_config
from ..errors import ProxyError
from ..schemas import GeminiGenerateContentRequest
from ..services.auth import GEMINI_KEY_HEADERS, require_api_key
from ..services.openai_client import send_chat_completion
from .transformers import gemini_request_to_openai, openai_response_to_gemini
from .utils import json_response, log_token_cap, parse_json_body, validate_body

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/v1beta/models/{model}:generateContent",
    tags=["Gemini Compatible"],
    summary="Generate content",
    description="""
Generate content using Google Gemini-compatible format.

The request is forwarded to the configured OpenAI-compatible provider and the
response is returned in Gemini format, with `modelVersion` echoing the model
named in the path.

**Authentication:** The caller's key is forwarded upstream. Supply it via:
- `Authorization: Bearer <key>` header
- `x-goog-api-key` header (Gemini style)
- `key` query parameter

**Function Calling:** Declare functions under `tools[].function_declarations`
and receive `functionCall` parts when the model wants to call one.

Streaming is not supported; responses are always returned complete.
""",
    response_model=None,
)
async def gemini_generate_content(
    model: str,
    http_request: Request,
    authorization: Optional[str] = Header(None),
    x_goog_api_key: Optional[str] = Header(None, alias="x-goog-api-key"),
) -> Response:
    """
    Gemini-compatible generateContent endpoint.
    Transforms Gemini requests to OpenAI format, sends them upstream,
    and transforms responses back to Gemini format.
    """
    try:
        api_key = require_api_key(
            authorization,
            x_goog_api_key,
            GEMINI_KEY_HEADERS,
            query_key=http_request.query_params.get("key"),
        )

        body = await parse_json_body(http_request)
        request = validate_body(GeminiGenerateContentRequest, body)
        target = load_target_config()

        logger.info(
            f"Gemini API -> {target.provider_name} | Model: {model} -> {target.model}"
        )
        if request.generation_config is not None:
            log_token_cap(request.generation_config.max_output_tokens, target.max_tokens)

        openai_request = gemini_request_to_openai(request.model_dump(), target)
        completion = await send_chat_completion(
            openai_request, api_key, target.base_url
        )
        gemini_response = openai_response_to_gemini(completion, model)

        logger.info(f"Processed Gemini response for model: {model}")
        return json_response(gemini_response)

    except ProxyError as e:
        logger.error(f"Gemini API error ({type(e).__name__}): {e.message}")
        return json_response(
            create_gemini_error_response(e.message, e.status_code), e.status_code
        )
    except Exception as e:
        logger.exception(f"Gemini API error: {e}")
        return json_response(
            create_gemini_error_response("Internal server error", 500), 500
        )
