"""
Model catalog records.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from dataclasses_json import Undefined, dataclass_json


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Model:
    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    owned_by: Optional[str] = None
    active: Optional[bool] = None
    context_window: Optional[int] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ModelList:
    object: Optional[str] = None
    data: List[Model] = field(default_factory=list)
