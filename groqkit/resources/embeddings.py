"""
Embeddings facade.
"""

from __future__ import annotations

from typing import List, Union

from groqkit.models.embeddings import EmbeddingRequest, EmbeddingResponse
from groqkit.resources.base import APIResource
from groqkit.types import Result


class EmbeddingsResource(APIResource):
    """Embedding operations."""

    def create(self, request: EmbeddingRequest) -> Result[EmbeddingResponse]:
        self._require_request(request, EmbeddingRequest)
        self._require_text(request.model, "Model", "model")
        self._require_items(request.input, "Input", "input")
        return self._client.post(self._path("embeddings"), request, EmbeddingResponse)

    def create_for_input(self, model: str, input: Union[str, List[str]]) -> Result[EmbeddingResponse]:
        """Embed one string or a list of strings.

        Raises:
            ValidationError: If the input is empty or contains a blank string
        """
        inputs = [input] if isinstance(input, str) else list(input or [])
        self._require_items(inputs, "Input list", "input")
        for item in inputs:
            self._require_text(item, "Input text", "input")
        return self.create(EmbeddingRequest(model=model, input=inputs))
