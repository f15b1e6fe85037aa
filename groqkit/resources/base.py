"""
Shared behavior for resource facades.

A facade validates caller input locally, raising ``ValidationError`` before
any network activity, then delegates to the client's pipeline.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Sized, Tuple, Union
from urllib.parse import quote

from groqkit.exceptions import ValidationError

if TYPE_CHECKING:
    from groqkit.client import GroqClient

logger = logging.getLogger(__name__)

API_PREFIX = "/openai/v1"

FileSource = Union[bytes, bytearray, str, os.PathLike]


class APIResource:
    """Base class for per-endpoint-group facades."""

    def __init__(self, client: GroqClient):
        """
        Args:
            client: The GroqClient instance to use for API calls
        """
        self._client = client

    @staticmethod
    def _require_text(value: Optional[str], label: str, field: Optional[str] = None) -> str:
        if value is None or not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{label} cannot be null or empty", field=field)
        return value

    @staticmethod
    def _require_items(value: Optional[Sized], label: str, field: Optional[str] = None) -> Any:
        if value is None or len(value) == 0:
            raise ValidationError(f"{label} cannot be null or empty", field=field)
        return value

    @staticmethod
    def _require_file(source: Optional[FileSource], label: str) -> FileSource:
        if source is None or (isinstance(source, str) and not source.strip()):
            raise ValidationError(f"{label} cannot be null or empty", field="file")
        return source

    @staticmethod
    def _require_request(request: Any, expected: type) -> None:
        if request is None:
            raise ValidationError(f"{expected.__name__} cannot be null")
        if not isinstance(request, expected):
            raise ValidationError(f"Expected {expected.__name__}, got {type(request).__name__}")

    @classmethod
    def _path(cls, *segments: str) -> str:
        """Join path segments under the API prefix, percent-encoding each one."""
        return "/".join([API_PREFIX] + [quote(segment, safe="") for segment in segments])


def _looks_like_path(text: str) -> bool:
    return text.startswith("/") or ":\\" in text


def read_file_source(source: FileSource, filename: Optional[str], default_name: str) -> Tuple[bytes, str]:
    """Resolve an upload source into raw bytes and a filename.

    Bytes are used as-is. ``os.PathLike`` objects and strings that look like
    absolute paths are read from disk. Any other string is literal content.

    Raises:
        ValidationError: If a referenced file does not exist
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source), filename or default_name

    if isinstance(source, os.PathLike) or (isinstance(source, str) and _looks_like_path(source)):
        path = Path(source)
        if not path.is_file():
            raise ValidationError(f"File does not exist: {path}", field="file")
        logger.debug(f"Reading upload content from {path}")
        return path.read_bytes(), filename or path.name

    if isinstance(source, str):
        return source.encode("utf-8"), filename or default_name

    raise ValidationError(f"Unsupported file source type: {type(source).__name__}", field="file")
