"""
Base client with Template Method pattern.

Owns the pieces of the request execution pipeline and runs them in a fixed
order for every call: compose -> interceptor chain -> process.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, Optional, Type

import requests

from groqkit.config import ClientConfig
from groqkit.core.composer import RequestComposer
from groqkit.core.interceptors import (
    AuthInterceptor,
    CallContext,
    CallHook,
    InterceptorChain,
    ObservabilityInterceptor,
    RetryInterceptor,
    Sleeper,
    context_sleep,
)
from groqkit.core.processor import ResponseProcessor
from groqkit.core.transport import HTTPTransport
from groqkit.core.urls import URLBuilder
from groqkit.error_handling import with_error_handling
from groqkit.types import OutboundCall, Result

logger = logging.getLogger(__name__)


class BaseClient:
    """Request execution pipeline bound to one ``ClientConfig``.

    Safe to share between threads: the config is frozen, the session pools
    connections, and everything else is created per call.
    """

    def __init__(
        self,
        config: ClientConfig,
        session: Optional[requests.Session] = None,
        on_call: Optional[CallHook] = None,
        sleep: Sleeper = context_sleep,
    ):
        """Initialize the pipeline.

        Args:
            config: Resolved client configuration
            session: Optional session to send through (a new one by default)
            on_call: Optional observability hook receiving a CallRecord per call
            sleep: Backoff wait function, replaceable in tests
        """
        self.config = config
        self.transport = HTTPTransport(config.timeout, session=session)
        self.composer = RequestComposer(
            URLBuilder(config.base_url, config.default_query),
            config.default_headers,
        )
        self.chain = InterceptorChain(
            [
                AuthInterceptor(config.api_key),
                ObservabilityInterceptor(hook=on_call),
                RetryInterceptor(config.max_retries, sleep=sleep),
            ],
            self.transport,
        )
        self.processor = ResponseProcessor()
        self._shutdown = threading.Event()

    # Template Method
    @with_error_handling
    def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        response_type: Optional[Type[Any]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Result:
        """Execute one logical call.

        Steps:
        1. Compose the outbound request
        2. Run it through the interceptor chain
        3. Process the final response into a Result

        Args:
            method: HTTP method
            path: Path relative to the base URL
            body: Typed payload, MultipartPayload, or None
            query: Call-specific query parameters
            headers: Call-specific headers
            response_type: Target type for the success body
            cancel_event: Event that aborts the call while it waits to retry

        Returns:
            TypedResponse on 2xx, PipelineError otherwise (status 0 when no
            response was ever obtained)

        Raises:
            ConfigurationError, EncodingError, DecodingError, CancelledError
        """
        call = OutboundCall(
            method=method,
            path=path,
            body=body,
            query=dict(query or {}),
            headers=dict(headers or {}),
        )
        prepared = self.composer.compose(call)
        context = CallContext(cancel_event=cancel_event, shutdown_event=self._shutdown)

        response = self.chain.execute(prepared, context)
        try:
            return self.processor.process(response, response_type)
        finally:
            response.close()

    def close(self) -> None:
        """Abort calls waiting to retry and release pooled connections."""
        self._shutdown.set()
        self.transport.close()

    @property
    def closed(self) -> bool:
        return self._shutdown.is_set()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.config.base_url!r}, "
            f"timeout={self.config.timeout}s, "
            f"max_retries={self.config.max_retries})"
        )
