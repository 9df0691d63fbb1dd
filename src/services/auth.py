"""
Credential extraction for inbound requests.

The proxy never validates credentials itself: whatever the caller supplies is
forwarded to the upstream provider, which is responsible for accepting or
rejecting it.
"""

import logging
from typing import Optional

from ..errors import AuthenticationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

ANTHROPIC_KEY_HEADERS = "Authorization header or x-api-key header"
GEMINI_KEY_HEADERS = "Authorization header or x-goog-api-key header"


def extract_api_key(header_value: Optional[str]) -> Optional[str]:
    """
    Extract an API key from an Authorization-style header value.

    Args:
        header_value: Raw header value, e.g. "Bearer sk-..." or a bare key

    Returns:
        The key with any "Bearer " prefix removed, or None if absent
    """
    if not header_value:
        return None

    if header_value.startswith(BEARER_PREFIX):
        return header_value[len(BEARER_PREFIX) :]

    return header_value


def require_api_key(
    authorization: Optional[str],
    alternate: Optional[str],
    expected_headers: str,
    query_key: Optional[str] = None,
) -> str:
    """
    Resolve the caller's credential from the accepted headers.

    Candidates are tried in order: Authorization header, protocol-specific
    header, then the ``key`` query parameter. The first one that yields a
    non-empty key is used.

    Args:
        authorization: Authorization header value
        alternate: Protocol-specific header value (x-api-key / x-goog-api-key)
        expected_headers: Human-readable header names for the error message
        query_key: Optional ``key`` query parameter value

    Returns:
        The credential to forward upstream

    Raises:
        AuthenticationError: If no credential was supplied
    """
    api_key = next(
        (
            key
            for key in map(extract_api_key, (authorization, alternate, query_key))
            if key
        ),
        None,
    )
    if not api_key:
        logger.warning("Rejected request without API key")
        raise AuthenticationError(f"Missing API key in {expected_headers}")
    return api_key
