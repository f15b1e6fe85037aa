"""
Shared types for the request execution pipeline.

Result shapes handed back to callers (``TypedResponse`` on success,
``PipelineError`` otherwise) and the per-invocation ``OutboundCall`` record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, List, Mapping, Optional, TypeVar, Union

from groqkit.exceptions import APIError

T = TypeVar("T")


class HttpMethod(str, Enum):
    """HTTP verbs accepted by the pipeline."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def from_string(cls, name: str) -> Optional[HttpMethod]:
        """Convert string to HttpMethod, or None if unsupported."""
        name_upper = (name or "").upper()
        for method in cls:
            if method.value == name_upper:
                return method
        return None

    @property
    def allows_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)


@dataclass(frozen=True)
class TypedResponse(Generic[T]):
    """Successful (2xx) response from the API.

    Attributes:
        data: Decoded body, or None when the response had no body
        headers: Response headers, each name mapped to all of its values
        status_code: HTTP status code (always 2xx)
    """
    data: Optional[T]
    headers: Mapping[str, List[str]] = field(default_factory=dict)
    status_code: int = 200

    def __post_init__(self):
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def ok(self) -> bool:
        return True

    def header(self, name: str) -> Optional[str]:
        """First value of a header, matched case-insensitively."""
        wanted = name.lower()
        for key, values in self.headers.items():
            if key.lower() == wanted and values:
                return values[0]
        return None

    def unwrap(self) -> Optional[T]:
        return self.data


@dataclass(frozen=True)
class PipelineError:
    """Structured error for a call that did not produce a 2xx response.

    A status code of 0 means no HTTP response was ever obtained
    (connection refused, DNS failure, ...), as opposed to the server
    answering with an error status.

    Attributes:
        message: Best-effort human readable message
        status_code: HTTP status code, or 0 for transport failures
        body: Raw response body text, if any
    """
    message: str
    status_code: int = 0
    body: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def is_transport_error(self) -> bool:
        return self.status_code == 0

    def to_exception(self) -> APIError:
        return APIError(self.message, status_code=self.status_code, body=self.body)

    def unwrap(self) -> Any:
        """Raise this error as an ``APIError``."""
        raise self.to_exception()

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


Result = Union[TypedResponse[T], PipelineError]


@dataclass(frozen=True)
class OutboundCall:
    """One logical API call, constructed fresh for every invocation.

    Attributes:
        method: HTTP method
        path: Path relative to the configured base URL
        body: None, a typed payload to JSON-encode, or a MultipartPayload
        query: Call-specific query parameters
        headers: Call-specific headers, applied over the defaults
    """
    method: str
    path: str
    body: Any = None
    query: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
