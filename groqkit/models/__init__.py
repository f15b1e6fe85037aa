"""
Typed request/response records for each endpoint group.
"""

from groqkit.models.audio import SpeechRequest, Transcription, TranscriptionRequest
from groqkit.models.batches import Batch, BatchCreateRequest, BatchList, BatchRequestCounts
from groqkit.models.chat import (
    ChatChoice,
    ChatCompletion,
    ChatCompletionRequest,
    ChatMessage,
    ChatTool,
    ChatToolCall,
    FunctionDefinition,
    ToolCallFunction,
    ToolChoice,
    ToolChoiceMode,
)
from groqkit.models.common import Usage
from groqkit.models.embeddings import EmbeddingData, EmbeddingRequest, EmbeddingResponse
from groqkit.models.files import FileDeleteResponse, FileList, FileObject, FileUploadRequest
from groqkit.models.model import Model, ModelList

__all__ = [
    "SpeechRequest",
    "Transcription",
    "TranscriptionRequest",
    "Batch",
    "BatchCreateRequest",
    "BatchList",
    "BatchRequestCounts",
    "ChatChoice",
    "ChatCompletion",
    "ChatCompletionRequest",
    "ChatMessage",
    "ChatTool",
    "ChatToolCall",
    "FunctionDefinition",
    "ToolCallFunction",
    "ToolChoice",
    "ToolChoiceMode",
    "Usage",
    "EmbeddingData",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "FileDeleteResponse",
    "FileList",
    "FileObject",
    "FileUploadRequest",
    "Model",
    "ModelList",
]
