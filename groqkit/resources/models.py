"""
Model catalog facade.
"""

from __future__ import annotations

from groqkit.models.model import Model, ModelList
from groqkit.resources.base import APIResource
from groqkit.types import Result


class ModelsResource(APIResource):
    """Model listing operations."""

    def list(self) -> Result[ModelList]:
        return self._client.get(self._path("models"), ModelList)

    def retrieve(self, model_id: str) -> Result[Model]:
        self._require_text(model_id, "Model ID", "model_id")
        return self._client.get(self._path("models", model_id), Model)
