"""
Info Routes - Service description, resolved configuration and model listings.
None of these endpoints require authentication.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Response

from ..config import (
    APP_NAME,
    APP_VERSION,
    ENVIRONMENT_VARIABLES,
    create_anthropic_error_response,
    create_gemini_error_response,
    load_target_config,
)
from ..errors import ConfigurationError
from ..models import build_claude_model_list, build_gemini_model_list
from .utils import json_response

logger = logging.getLogger(__name__)
router = APIRouter()

SERVICE_INFO: Dict[str, Any] = {
    "name": APP_NAME,
    "message": f"{APP_NAME} is running",
    "version": APP_VERSION,
    "description": "Proxy server that converts Claude and Gemini API requests "
    "to any OpenAI-compatible endpoint",
    "features": [
        "Claude API compatibility",
        "Gemini API compatibility",
        "Configurable target model via environment variables",
        "Tool/function calling support",
        "Real-time responses (no caching)",
        "CORS enabled",
    ],
    "endpoints": {
        "/": "This endpoint - health check and info",
        "/health": "Health check",
        "/v1/messages": "Claude API proxy endpoint",
        "/v1/models": "List supported Claude models",
        "/v1beta/models/{model}:generateContent": "Gemini API proxy endpoint",
        "/v1beta/models": "List supported Gemini models",
        "/v1/config": "View current proxy configuration",
    },
    "supported_apis": ["Claude (Anthropic)", "Gemini (Google)"],
}


@router.get("/", tags=["Health"], summary="Service info")
async def service_info() -> Dict[str, Any]:
    """Describe the service and its endpoints."""
    return SERVICE_INFO


@router.get(
    "/v1/config",
    tags=["Configuration"],
    summary="Show proxy configuration",
    response_model=None,
)
async def show_config() -> Response:
    """Show the target configuration resolved from the environment."""
    try:
        target = load_target_config()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e.message}")
        return json_response(create_anthropic_error_response(e.message), e.status_code)

    return json_response(
        {
            "current_config": {
                "target_model": target.model,
                "target_provider": target.provider_name,
                "target_base_url": target.base_url,
                "target_max_tokens": target.max_tokens,
            },
            "environment_variables": ENVIRONMENT_VARIABLES,
        }
    )


@router.get(
    "/v1/models",
    tags=["Anthropic Compatible"],
    summary="List Claude models",
    response_model=None,
)
async def list_claude_models() -> Response:
    """List the Claude model names accepted by /v1/messages."""
    try:
        target = load_target_config()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e.message}")
        return json_response(create_anthropic_error_response(e.message), e.status_code)

    logger.info("Claude models list requested")
    return json_response(build_claude_model_list(target))


@router.get(
    "/v1beta/models",
    tags=["Gemini Compatible"],
    summary="List Gemini models",
    response_model=None,
)
async def list_gemini_models() -> Response:
    """List the Gemini model names accepted by generateContent."""
    try:
        target = load_target_config()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e.message}")
        return json_response(
            create_gemini_error_response(e.message, e.status_code), e.status_code
        )

    logger.info("Gemini models list requested")
    return json_response(build_gemini_model_list(target))
