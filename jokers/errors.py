"""Exceptions raised by the JokeAPI client.

Every failure the client reports derives from JokeError, so callers can
catch one type or distinguish transport, parse and API-level failures.
"""
from __future__ import annotations

from typing import Optional


class JokeError(Exception):
    """Base class for all client errors."""


class TransportError(JokeError):
    """Raised when the HTTP request fails or returns a non-2xx status."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class DeserializationError(JokeError):
    """Raised when a response body does not match the expected envelope."""


class ApiResponseError(JokeError):
    """Raised when the API answers with ``error: true``."""

    def __init__(self, message: str = "error:true", api_message: Optional[str] = None,
                 code: Optional[int] = None):
        self.api_message = api_message
        self.code = code
        super().__init__(message)
