"""
Request execution pipeline: URL building, request composition, the
interceptor chain, transport and response processing.

``BaseClient`` lives in ``groqkit.core.base_client`` and is imported from
there, since it depends on ``groqkit.config``.
"""

from groqkit.core.composer import RequestComposer
from groqkit.core.interceptors import (
    Attempt,
    AuthInterceptor,
    CallContext,
    CallRecord,
    Interceptor,
    InterceptorChain,
    ObservabilityInterceptor,
    RetryInterceptor,
    backoff_delay,
    is_retryable_status,
)
from groqkit.core.multipart import FilePart, MultipartPayload, build_multipart, guess_media_type
from groqkit.core.processor import ResponseProcessor
from groqkit.core.transport import HTTPTransport
from groqkit.core.urls import URLBuilder

__all__ = [
    "RequestComposer",
    "Attempt",
    "AuthInterceptor",
    "CallContext",
    "CallRecord",
    "Interceptor",
    "InterceptorChain",
    "ObservabilityInterceptor",
    "RetryInterceptor",
    "backoff_delay",
    "is_retryable_status",
    "FilePart",
    "MultipartPayload",
    "build_multipart",
    "guess_media_type",
    "ResponseProcessor",
    "HTTPTransport",
    "URLBuilder",
]
