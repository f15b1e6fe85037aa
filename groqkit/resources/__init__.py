"""
Resource facades, one per endpoint group.
"""

from groqkit.resources.audio import AudioResource
from groqkit.resources.base import APIResource
from groqkit.resources.batches import BatchesResource
from groqkit.resources.chat import ChatResource
from groqkit.resources.embeddings import EmbeddingsResource
from groqkit.resources.files import FilesResource
from groqkit.resources.models import ModelsResource

__all__ = [
    "APIResource",
    "AudioResource",
    "BatchesResource",
    "ChatResource",
    "EmbeddingsResource",
    "FilesResource",
    "ModelsResource",
]
