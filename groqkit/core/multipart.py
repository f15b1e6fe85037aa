"""
Multipart/form-data payloads for file upload endpoints.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from urllib3 import encode_multipart_formdata
from urllib3.fields import RequestField

from groqkit.exceptions import EncodingError

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = "application/octet-stream"

# Suffix -> media type. Checked in order, first match wins.
MEDIA_TYPES: Tuple[Tuple[str, str], ...] = (
    (".jsonl", "application/jsonl"),
    (".json", "application/json"),
    (".txt", "text/plain"),
    (".csv", "text/csv"),
    (".pdf", "application/pdf"),
    (".jpg", "image/jpeg"),
    (".jpeg", "image/jpeg"),
    (".png", "image/png"),
    (".mp3", "audio/mpeg"),
    (".wav", "audio/wav"),
    (".flac", "audio/flac"),
    (".m4a", "audio/mp4"),
    (".ogg", "audio/ogg"),
    (".webm", "audio/webm"),
    (".mp4", "video/mp4"),
)


def guess_media_type(filename: str) -> str:
    """Infer a media type from the filename suffix."""
    lowered = (filename or "").lower()
    for suffix, media_type in MEDIA_TYPES:
        if lowered.endswith(suffix):
            return media_type
    return DEFAULT_MEDIA_TYPE


@dataclass(frozen=True)
class FilePart:
    """One in-memory file to send as a multipart field.

    Attributes:
        filename: Name reported to the server
        content: Raw bytes, must not be empty
        media_type: Declared media type; inferred from the filename if omitted
    """
    filename: str
    content: bytes
    media_type: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.content, (bytes, bytearray, memoryview)):
            raise EncodingError(f"File content for {self.filename!r} must be bytes")
        if len(self.content) == 0:
            raise EncodingError(f"File content is empty: {self.filename!r}")
        object.__setattr__(self, "content", bytes(self.content))

    @property
    def resolved_media_type(self) -> str:
        return self.media_type or guess_media_type(self.filename)

    def __repr__(self) -> str:
        return f"FilePart(filename={self.filename!r}, content_size={len(self.content)})"


MultipartField = Union[FilePart, Any]
MultipartFields = Union[Mapping[str, MultipartField], Iterable[Tuple[str, MultipartField]]]


@dataclass(frozen=True)
class MultipartPayload:
    """Encoded multipart body plus the content type carrying its boundary."""
    body: bytes
    content_type: str
    field_names: Tuple[str, ...] = ()


def build_multipart(fields: MultipartFields, boundary: Optional[str] = None) -> MultipartPayload:
    """Encode form fields into a multipart/form-data payload.

    Field order follows the order of ``fields``.

    Args:
        fields: Ordered mapping or sequence of (name, value) pairs. A
            FilePart becomes a file field; anything else is sent as text
            via ``str(value)``.
        boundary: Fixed boundary, random when omitted

    Returns:
        MultipartPayload ready to attach to a request

    Raises:
        EncodingError: If there are no fields or a field cannot be encoded
    """
    items = list(fields.items()) if isinstance(fields, Mapping) else list(fields)
    if not items:
        raise EncodingError("Multipart payload needs at least one field")

    parts: List[RequestField] = []
    for name, value in items:
        if isinstance(value, FilePart):
            part = RequestField(name=name, data=value.content, filename=value.filename)
            part.make_multipart(content_type=value.resolved_media_type)
        else:
            part = RequestField(name=name, data=str(value))
            part.make_multipart()
        parts.append(part)

    try:
        body, content_type = encode_multipart_formdata(parts, boundary=boundary)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Failed to encode multipart payload: {e}", e) from e

    logger.debug(f"Built multipart payload with fields {[name for name, _ in items]} ({len(body)} bytes)")
    return MultipartPayload(body=body, content_type=content_type,
                            field_names=tuple(name for name, _ in items))
