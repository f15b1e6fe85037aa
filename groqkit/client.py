"""
Public client for the Groq inference API.

Usage:
    from groqkit import GroqClient

    client = GroqClient(api_key="gsk_...")
    result = client.models.list()
    if result.ok:
        print([model.id for model in result.data.data])
    else:
        print(result.status_code, result.message)
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, Optional, Type, Union

import requests

from groqkit.config import ClientConfig
from groqkit.core.base_client import BaseClient
from groqkit.core.interceptors import CallHook, Sleeper, context_sleep
from groqkit.core.multipart import MultipartFields, MultipartPayload, build_multipart
from groqkit.resources import (
    AudioResource,
    BatchesResource,
    ChatResource,
    EmbeddingsResource,
    FilesResource,
    ModelsResource,
)
from groqkit.types import Result

logger = logging.getLogger(__name__)


class GroqClient(BaseClient):
    """Client exposing generic HTTP verbs and per-endpoint facades.

    Attributes:
        chat: Chat completions
        embeddings: Embeddings
        audio: Text-to-speech and transcription
        batches: Batch jobs
        files: File management
        models: Model catalog
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        default_query: Optional[Mapping[str, Any]] = None,
        *,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
        on_call: Optional[CallHook] = None,
        sleep: Sleeper = context_sleep,
    ):
        """Initialize the client.

        Settings not passed explicitly fall back to ``GROQ_API_KEY``,
        ``GROQ_BASE_URL``, ``GROQ_TIMEOUT`` and ``GROQ_MAX_RETRIES``. A
        ready-made ``config`` takes precedence over the individual settings.

        Raises:
            ConfigurationError: If no usable API key or base URL can be resolved
        """
        if config is None:
            config = ClientConfig.create(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=max_retries,
                default_headers=default_headers,
                default_query=default_query,
            )
        super().__init__(config, session=session, on_call=on_call, sleep=sleep)

        self.chat = ChatResource(self)
        self.embeddings = EmbeddingsResource(self)
        self.audio = AudioResource(self)
        self.batches = BatchesResource(self)
        self.files = FilesResource(self)
        self.models = ModelsResource(self)

        logger.debug(f"Initialized {self!r}")

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> GroqClient:
        return cls(config=config, **kwargs)

    def get(self, path: str, response_type: Optional[Type[Any]] = None, *,
            query: Optional[Mapping[str, Any]] = None,
            headers: Optional[Mapping[str, str]] = None,
            cancel_event: Optional[threading.Event] = None) -> Result:
        return self.request("GET", path, query=query, headers=headers,
                            response_type=response_type, cancel_event=cancel_event)

    def post(self, path: str, body: Any = None, response_type: Optional[Type[Any]] = None, *,
             query: Optional[Mapping[str, Any]] = None,
             headers: Optional[Mapping[str, str]] = None,
             cancel_event: Optional[threading.Event] = None) -> Result:
        return self.request("POST", path, body=body, query=query, headers=headers,
                            response_type=response_type, cancel_event=cancel_event)

    def put(self, path: str, body: Any = None, response_type: Optional[Type[Any]] = None, *,
            query: Optional[Mapping[str, Any]] = None,
            headers: Optional[Mapping[str, str]] = None,
            cancel_event: Optional[threading.Event] = None) -> Result:
        return self.request("PUT", path, body=body, query=query, headers=headers,
                            response_type=response_type, cancel_event=cancel_event)

    def patch(self, path: str, body: Any = None, response_type: Optional[Type[Any]] = None, *,
              query: Optional[Mapping[str, Any]] = None,
              headers: Optional[Mapping[str, str]] = None,
              cancel_event: Optional[threading.Event] = None) -> Result:
        return self.request("PATCH", path, body=body, query=query, headers=headers,
                            response_type=response_type, cancel_event=cancel_event)

    def delete(self, path: str, response_type: Optional[Type[Any]] = None, *,
               query: Optional[Mapping[str, Any]] = None,
               headers: Optional[Mapping[str, str]] = None,
               cancel_event: Optional[threading.Event] = None) -> Result:
        return self.request("DELETE", path, query=query, headers=headers,
                            response_type=response_type, cancel_event=cancel_event)

    def post_multipart(self, path: str, payload: Union[MultipartPayload, MultipartFields],
                       response_type: Optional[Type[Any]] = None, *,
                       headers: Optional[Mapping[str, str]] = None,
                       cancel_event: Optional[threading.Event] = None) -> Result:
        """POST a multipart/form-data payload.

        Args:
            path: Path relative to the base URL
            payload: A prebuilt MultipartPayload, or fields to encode
            response_type: Target type for the success body
            headers: Call-specific headers
            cancel_event: Event that aborts the call while it waits to retry

        Raises:
            EncodingError: If the fields cannot be encoded (e.g. an empty file)
        """
        if not isinstance(payload, MultipartPayload):
            payload = build_multipart(payload)
        return self.request("POST", path, body=payload, headers=headers,
                            response_type=response_type, cancel_event=cancel_event)
