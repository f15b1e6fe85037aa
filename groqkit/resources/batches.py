"""
Batch jobs facade.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from groqkit.models.batches import Batch, BatchCreateRequest, BatchList
from groqkit.resources.base import APIResource
from groqkit.types import Result


class BatchesResource(APIResource):
    """Batch create/retrieve/list/cancel operations."""

    def create(self, request: BatchCreateRequest) -> Result[Batch]:
        """Create a batch from an uploaded JSONL input file.

        Raises:
            ValidationError: If the input file ID or the endpoint is empty
        """
        self._require_request(request, BatchCreateRequest)
        self._require_text(request.input_file_id, "Input file ID", "input_file_id")
        self._require_text(request.endpoint, "Endpoint", "endpoint")
        return self._client.post(self._path("batches"), request, Batch)

    def retrieve(self, batch_id: str) -> Result[Batch]:
        self._require_text(batch_id, "Batch ID", "batch_id")
        return self._client.get(self._path("batches", batch_id), Batch)

    def list(self, query: Optional[Dict[str, Any]] = None) -> Result[BatchList]:
        return self._client.get(self._path("batches"), BatchList, query=query)

    def cancel(self, batch_id: str) -> Result[Batch]:
        self._require_text(batch_id, "Batch ID", "batch_id")
        return self._client.post(self._path("batches", batch_id, "cancel"), None, Batch)
