"""
OpenAI-compatible API Client - Handles communication with the upstream provider.
A new HTTP client is built for every request from the resolved base URL and the
caller's forwarded credential.
"""

import json
import logging
from typing import Any, Dict

import httpx

from ..config import APP_NAME, APP_VERSION, CONNECT_TIMEOUT, REQUEST_TIMEOUT
from ..errors import UpstreamError

logger = logging.getLogger(__name__)


def build_chat_completions_url(base_url: str) -> str:
    """Join the provider base URL with the chat completions path."""
    return f"{base_url.rstrip('/')}/chat/completions"


def _build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "User-Agent": f"{APP_NAME.replace(' ', '-')}/{APP_VERSION}",
    }


def _extract_error_message(resp: httpx.Response) -> str:
    """Pull a readable message out of an upstream error body."""
    default_message = f"Upstream API error: {resp.status_code}"
    try:
        error_data = resp.json()
    except (json.JSONDecodeError, ValueError):
        return default_message

    if isinstance(error_data, dict) and "error" in error_data:
        error = error_data["error"]
        if isinstance(error, dict):
            return error.get("message") or default_message
        if isinstance(error, str):
            return error
    return default_message


async def send_chat_completion(
    payload: Dict[str, Any], api_key: str, base_url: str
) -> Dict[str, Any]:
    """
    Send a non-streaming chat completion request to the upstream provider.

    Args:
        payload: OpenAI-compatible request body
        api_key: Credential forwarded from the caller
        base_url: Provider base URL, e.g. https://api.groq.com/openai/v1

    Returns:
        Parsed chat completion response

    Raises:
        UpstreamError: On transport failure, timeout, non-200 status or a
            non-JSON body
    """
    url = build_chat_completions_url(base_url)
    timeout = httpx.Timeout(REQUEST_TIMEOUT, connect=CONNECT_TIMEOUT)

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.post(url, json=payload, headers=_build_headers(api_key))
    except httpx.TimeoutException as e:
        logger.error(f"Upstream request timed out: {e}")
        raise UpstreamError(
            "Request timed out. The upstream API took too long to respond.",
            status_code=504,
        ) from e
    except httpx.RequestError as e:
        logger.error(f"Upstream request failed: {e}")
        raise UpstreamError(f"Upstream request failed: {e}", status_code=502) from e

    if resp.status_code != 200:
        logger.error(f"Upstream API error {resp.status_code}: {resp.text[:500]}")
        raise UpstreamError(_extract_error_message(resp), status_code=resp.status_code)

    try:
        return resp.json()
    except (json.JSONDecodeError, ValueError) as e:
        logger.error(f"Failed to parse upstream response: {e}, data: {resp.text[:500]!r}")
        raise UpstreamError(
            "Upstream returned a non-JSON response", status_code=502
        ) from e
