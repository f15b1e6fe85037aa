"""
Records shared by several endpoint groups.
"""

from dataclasses import dataclass
from typing import Optional

from dataclasses_json import Undefined, dataclass_json


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Usage:
    """Token accounting reported with completions and embeddings."""
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
