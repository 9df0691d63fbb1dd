"""Exception hierarchy for the proxy."""

from typing import Optional


class ProxyError(Exception):
    """Base exception for all proxy errors."""

    status_code = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthenticationError(ProxyError):
    """No credential was supplied in any accepted header."""

    status_code = 401


class MalformedInputError(ProxyError):
    """Inbound body is not JSON or misses a required field."""

    status_code = 400


class TranslationError(ProxyError):
    """Upstream output could not be translated (e.g. malformed tool arguments)."""

    status_code = 502


class ConfigurationError(ProxyError):
    """Configuration value is present but invalid."""

    status_code = 500


class UpstreamError(ProxyError):
    """The upstream call failed or returned a non-success status."""

    status_code = 502
