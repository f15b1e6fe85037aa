"""
groqkit: typed client for the Groq inference API.

Provides a request execution pipeline (URL building, request composition,
authentication, retry with backoff, response classification) and
per-endpoint facades on top of it.
"""

from groqkit._version import __version__
from groqkit.client import GroqClient
from groqkit.config import ClientConfig
from groqkit.core.multipart import FilePart, MultipartPayload, build_multipart
from groqkit.exceptions import (
    APIError,
    CancelledError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    GroqError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)
from groqkit.logging import configure_logging
from groqkit.types import PipelineError, Result, TypedResponse

__all__ = [
    "__version__",
    # Client
    "GroqClient",
    "ClientConfig",
    # Results
    "TypedResponse",
    "PipelineError",
    "Result",
    # Multipart
    "FilePart",
    "MultipartPayload",
    "build_multipart",
    # Exceptions
    "GroqError",
    "ConfigurationError",
    "ValidationError",
    "EncodingError",
    "DecodingError",
    "TransportError",
    "RequestTimeoutError",
    "CancelledError",
    "APIError",
    # Logging
    "configure_logging",
]
