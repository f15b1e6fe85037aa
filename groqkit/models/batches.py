"""
Batch job records.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dataclasses_json import Undefined, dataclass_json

DEFAULT_COMPLETION_WINDOW = "24h"


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class BatchCreateRequest:
    input_file_id: Optional[str] = None
    endpoint: Optional[str] = None
    completion_window: Optional[str] = DEFAULT_COMPLETION_WINDOW
    metadata: Optional[Dict[str, Any]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class BatchRequestCounts:
    total: Optional[int] = None
    completed: Optional[int] = None
    failed: Optional[int] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Batch:
    id: Optional[str] = None
    object: Optional[str] = None
    endpoint: Optional[str] = None
    input_file_id: Optional[str] = None
    completion_window: Optional[str] = None
    status: Optional[str] = None
    output_file_id: Optional[str] = None
    error_file_id: Optional[str] = None
    created_at: Optional[int] = None
    in_progress_at: Optional[int] = None
    expires_at: Optional[int] = None
    finalizing_at: Optional[int] = None
    completed_at: Optional[int] = None
    failed_at: Optional[int] = None
    expired_at: Optional[int] = None
    cancelling_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    request_counts: Optional[BatchRequestCounts] = None
    metadata: Optional[Dict[str, Any]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class BatchList:
    object: Optional[str] = None
    data: List[Batch] = field(default_factory=list)
