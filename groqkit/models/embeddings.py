"""
Embedding records.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from dataclasses_json import Undefined, dataclass_json

from groqkit.models.common import Usage


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class EmbeddingRequest:
    model: Optional[str] = None
    input: List[str] = field(default_factory=list)
    encoding_format: Optional[str] = None
    user: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class EmbeddingData:
    object: Optional[str] = None
    embedding: Optional[List[float]] = None
    index: Optional[int] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class EmbeddingResponse:
    object: Optional[str] = None
    data: List[EmbeddingData] = field(default_factory=list)
    model: Optional[str] = None
    usage: Optional[Usage] = None
