"""
JSON conversion between typed records and the wire format.

Records are ``dataclasses_json`` dataclasses whose attribute names are the
snake_case wire names. Absent (None) fields are never serialized.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Optional, Type, TypeVar

from groqkit.exceptions import DecodingError, EncodingError

T = TypeVar("T")


def strip_none(value: Any) -> Any:
    """Recursively drop None entries from dicts."""
    if isinstance(value, dict):
        return {k: strip_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [strip_none(item) for item in value]
    return value


def to_wire(obj: Any) -> Any:
    """Convert a typed payload into JSON-compatible primitives."""
    if hasattr(obj, "to_dict") and dataclasses.is_dataclass(obj):
        return strip_none(obj.to_dict(encode_json=False))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return strip_none(dataclasses.asdict(obj))
    return obj


def to_json(obj: Any) -> Optional[str]:
    """Serialize a payload to compact JSON text.

    Raises:
        EncodingError: If the payload is not JSON-serializable
    """
    if obj is None:
        return None
    try:
        return json.dumps(to_wire(obj), ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Failed to serialize {type(obj).__name__} to JSON: {e}", e) from e


def from_wire(data: Any, cls: Type[T]) -> T:
    """Build a typed record from decoded JSON.

    Unknown fields are ignored and missing fields become None.

    Raises:
        DecodingError: If the data does not fit ``cls``
    """
    if not isinstance(data, dict):
        raise DecodingError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    try:
        return cls.from_dict(data, infer_missing=True)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DecodingError(f"Failed to decode {cls.__name__}: {e}", original_error=e) from e
