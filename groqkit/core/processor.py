"""
Response processing: typed decoding of 2xx bodies and classification of
everything else into a ``PipelineError``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Type

import requests

from groqkit.exceptions import ConfigurationError, DecodingError
from groqkit.json_utils import from_wire
from groqkit.types import PipelineError, Result, TypedResponse

logger = logging.getLogger(__name__)

MAX_ERROR_MESSAGE_LENGTH = 200


def header_multimap(response: requests.Response) -> Dict[str, List[str]]:
    """Headers as name -> all values, keeping the case the server sent."""
    raw_headers = getattr(response.raw, "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "getlist"):
        return {name: list(raw_headers.getlist(name)) for name in raw_headers.keys()}
    return {name: [value] for name, value in response.headers.items()}


def body_text(response: requests.Response) -> str:
    """Response body as text.

    Uses the charset from ``Content-Type`` when one is declared and UTF-8
    otherwise. Undecodable bytes become U+FFFD.
    """
    content = response.content or b""
    charset = _declared_charset(response.headers.get("Content-Type"))
    if charset:
        try:
            return content.decode(charset, errors="replace")
        except LookupError:
            logger.debug(f"Unknown response charset {charset!r}, decoding as UTF-8")
    return content.decode("utf-8", errors="replace")


def _declared_charset(content_type: Optional[str]) -> Optional[str]:
    if not content_type:
        return None
    for param in content_type.split(";")[1:]:
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset":
            return value.strip().strip("'\"") or None
    return None


def extract_error_message(status_code: int, body: Optional[str]) -> str:
    """Best-effort message for a failed response.

    Prefers ``error.message`` from a JSON error envelope, then the raw body
    (truncated), then a generic ``HTTP <status> Error``.
    """
    if body is None or not body.strip():
        return f"HTTP {status_code} Error"

    try:
        payload = json.loads(body)
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and "message" in error:
            return str(error["message"])

    if len(body) > MAX_ERROR_MESSAGE_LENGTH:
        return body[:MAX_ERROR_MESSAGE_LENGTH] + "..."
    return body


class ResponseProcessor:
    """Turns a raw response into a ``Result``."""

    def process(self, response: requests.Response, response_type: Optional[Type[Any]] = None) -> Result:
        """Decode ``response`` into ``response_type``, or classify it as an error.

        Args:
            response: Final response from the interceptor chain
            response_type: ``str`` for raw text, ``bytes`` for raw content,
                ``dict``/``list`` for plain JSON, a dataclasses_json record
                class, or None to ignore the body

        Returns:
            TypedResponse for 2xx statuses, PipelineError otherwise

        Raises:
            DecodingError: If a 2xx body cannot be decoded into ``response_type``
        """
        status_code = response.status_code
        if not 200 <= status_code < 300:
            return self.classify_error(response)

        headers = header_multimap(response)
        content = response.content or b""
        if not content:
            return TypedResponse(data=None, headers=headers, status_code=status_code)

        data = self._decode(response, content, response_type)
        return TypedResponse(data=data, headers=headers, status_code=status_code)

    def classify_error(self, response: requests.Response) -> PipelineError:
        status_code = response.status_code
        body = body_text(response) if response.content else None
        message = extract_error_message(status_code, body)

        log = logger.warning if status_code < 500 else logger.error
        log(f"API error {status_code} for {_request_label(response)}: {message}")
        return PipelineError(message=message, status_code=status_code, body=body)

    @staticmethod
    def _decode(response: requests.Response, content: bytes, response_type: Optional[Type[Any]]) -> Any:
        if response_type is None:
            return None
        if response_type is bytes:
            return content
        if response_type is str:
            return body_text(response)

        text = body_text(response)
        try:
            payload = json.loads(text)
        except ValueError as e:
            raise DecodingError(f"Failed to parse response body: {e}", body=text, original_error=e) from e

        if response_type in (dict, list):
            if not isinstance(payload, response_type):
                raise DecodingError(
                    f"Expected a JSON {response_type.__name__}, got {type(payload).__name__}", body=text
                )
            return payload

        if not hasattr(response_type, "from_dict"):
            raise ConfigurationError(f"Unsupported response type: {response_type!r}")

        try:
            return from_wire(payload, response_type)
        except DecodingError as e:
            raise DecodingError(e.message, body=text, original_error=e.original_error) from e


def _request_label(response: requests.Response) -> str:
    request = getattr(response, "request", None)
    if request is None:
        return "request"
    return f"{request.method} {request.url}"
