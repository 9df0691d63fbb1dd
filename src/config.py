"""
Configuration constants for the Universal AI API Proxy.
Centralizes target provider resolution and error envelopes shared across modules.
"""

import os
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigurationError

# App Info
APP_VERSION = "1.0.0"
APP_NAME = "Universal AI API Proxy"

# Timeouts
REQUEST_TIMEOUT = 300  # 5 minutes for upstream requests
CONNECT_TIMEOUT = 10.0

# Target defaults
DEFAULT_TARGET_MODEL = "moonshotai/kimi-k2-instruct"
DEFAULT_TARGET_PROVIDER = "groq"
DEFAULT_TARGET_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_TARGET_MAX_TOKENS = 16384

# Environment variables read on every request
ENV_TARGET_MODEL = "TARGET_MODEL"
ENV_TARGET_PROVIDER = "TARGET_PROVIDER"
ENV_TARGET_BASE_URL = "TARGET_BASE_URL"
ENV_TARGET_MAX_TOKENS = "TARGET_MAX_TOKENS"

_DIGITS_RE = re.compile(r"[0-9]+")

ENVIRONMENT_VARIABLES: Dict[str, str] = {
    ENV_TARGET_MODEL: f"Target model to use (default: {DEFAULT_TARGET_MODEL})",
    ENV_TARGET_PROVIDER: f"Target provider name (default: {DEFAULT_TARGET_PROVIDER})",
    ENV_TARGET_BASE_URL: f"Target API base URL (default: {DEFAULT_TARGET_BASE_URL})",
    ENV_TARGET_MAX_TOKENS: f"Maximum tokens limit (default: {DEFAULT_TARGET_MAX_TOKENS})",
}

# Gemini error status strings keyed by HTTP status code
GEMINI_ERROR_STATUSES: Dict[int, str] = {
    400: "INVALID_ARGUMENT",
    401: "UNAUTHENTICATED",
    403: "PERMISSION_DENIED",
    404: "NOT_FOUND",
    429: "RESOURCE_EXHAUSTED",
    502: "UNAVAILABLE",
    503: "UNAVAILABLE",
    504: "DEADLINE_EXCEEDED",
}


@dataclass(frozen=True)
class ProviderConfig:
    """Resolved upstream target for a single request."""

    model: str
    provider_name: str
    base_url: str
    max_tokens: int


def _parse_max_tokens(value: str) -> int:
    """
    Parse the max-token ceiling as a positive base-10 integer.

    Args:
        value: Raw configuration string

    Returns:
        Parsed ceiling

    Raises:
        ConfigurationError: If the value is not a positive integer
    """
    text = value.strip()
    if not _DIGITS_RE.fullmatch(text):
        raise ConfigurationError(
            f"{ENV_TARGET_MAX_TOKENS} must be a positive integer, got {value!r}"
        )

    parsed = int(text)
    if parsed <= 0:
        raise ConfigurationError(
            f"{ENV_TARGET_MAX_TOKENS} must be a positive integer, got {value!r}"
        )
    return parsed


def resolve_target_config(raw: Mapping[str, Optional[str]]) -> ProviderConfig:
    """
    Resolve the upstream target from raw configuration values.

    Absent or empty values fall back to the defaults. The mapping uses the keys
    ``model``, ``provider``, ``base_url`` and ``max_tokens``.

    Args:
        raw: Raw configuration values

    Returns:
        ProviderConfig for the request

    Raises:
        ConfigurationError: If ``max_tokens`` is present but invalid
    """
    max_tokens_raw = raw.get("max_tokens")
    max_tokens = (
        _parse_max_tokens(max_tokens_raw)
        if max_tokens_raw
        else DEFAULT_TARGET_MAX_TOKENS
    )

    return ProviderConfig(
        model=raw.get("model") or DEFAULT_TARGET_MODEL,
        provider_name=raw.get("provider") or DEFAULT_TARGET_PROVIDER,
        base_url=raw.get("base_url") or DEFAULT_TARGET_BASE_URL,
        max_tokens=max_tokens,
    )


def load_target_config() -> ProviderConfig:
    """Resolve the target from the process environment. Never cached."""
    return resolve_target_config(
        {
            "model": os.getenv(ENV_TARGET_MODEL),
            "provider": os.getenv(ENV_TARGET_PROVIDER),
            "base_url": os.getenv(ENV_TARGET_BASE_URL),
            "max_tokens": os.getenv(ENV_TARGET_MAX_TOKENS),
        }
    )


def clamp_max_tokens(requested: Optional[int], ceiling: int) -> int:
    """Clamp a requested token budget to the provider ceiling."""
    return min(requested or ceiling, ceiling)


def create_anthropic_error_response(message: str) -> Dict[str, Any]:
    """Create the flat error body returned on the Claude path."""
    return {"error": message}


def create_gemini_error_response(message: str, code: int) -> Dict[str, Any]:
    """
    Create the nested error body returned on the Gemini path.

    Args:
        message: Error message to display
        code: HTTP status code

    Returns:
        Gemini-style error response dictionary
    """
    return {
        "error": {
            "code": code,
            "message": message,
            "status": GEMINI_ERROR_STATUSES.get(code, "INTERNAL"),
        }
    }
