"""
Exception hierarchy for groqkit client operations.

Provides specific exception types for different failure modes,
making error handling more precise and testable.
"""

from __future__ import annotations

from typing import Optional


class GroqError(Exception):
    """Base exception for all groqkit errors.

    All library exceptions inherit from this to allow
    for broad exception handling when needed.
    """

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigurationError(GroqError):
    """Client setup is invalid or incomplete.

    Raised for a missing credential, a malformed base URL, or a call that
    can never be valid (e.g. a JSON body on a GET). Never retried.
    """


class ValidationError(GroqError):
    """Caller supplied an invalid logical request.

    Raised by resource facades before any network activity.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class EncodingError(GroqError):
    """Request payload could not be serialized."""


class DecodingError(GroqError):
    """Successful response body could not be decoded into the target type.

    The server answered 2xx, so this is never retried.
    """

    def __init__(self, message: str, body: Optional[str] = None,
                 original_error: Optional[BaseException] = None):
        super().__init__(message, original_error)
        self.body = body


class TransportError(GroqError):
    """Network-related error occurred before a response was obtained.

    Raised for connection errors, DNS failures, resets, etc.
    """

    def __init__(self, message: str = "Network error", original_error: Optional[BaseException] = None):
        super().__init__(message, original_error)


class RequestTimeoutError(TransportError):
    """Request exceeded the configured timeout."""

    def __init__(self, message: str = "Request timed out", timeout: float = 0.0,
                 original_error: Optional[BaseException] = None):
        super().__init__(message, original_error)
        self.timeout = timeout


class CancelledError(GroqError):
    """Call was aborted while waiting to retry."""

    def __init__(self, message: str = "Request cancelled during retry backoff"):
        super().__init__(message)


class APIError(GroqError):
    """API returned a non-2xx response, or no response at all.

    Raised from ``PipelineError.unwrap()`` for callers who prefer exceptions
    over inspecting the result value.
    """

    def __init__(self, message: str, status_code: int = 0, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message
