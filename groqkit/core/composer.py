"""
Request composition.

Turns an ``OutboundCall`` into a ``requests.PreparedRequest``: resolves the
URL, merges headers and picks the body encoding for the method.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from groqkit.core.multipart import MultipartPayload
from groqkit.core.urls import URLBuilder
from groqkit.exceptions import ConfigurationError
from groqkit.json_utils import to_json
from groqkit.types import HttpMethod, OutboundCall

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class RequestComposer:
    """Builds prepared requests for one client configuration."""

    def __init__(self, url_builder: URLBuilder, default_headers: Optional[Mapping[str, str]] = None):
        self.url_builder = url_builder
        self.default_headers = dict(default_headers or {})

    def compose(self, call: OutboundCall) -> requests.PreparedRequest:
        """Produce a fully-formed request for ``call``.

        Body encoding:
            - no body, GET/DELETE: no body at all
            - no body, POST/PUT/PATCH: zero-length body
            - MultipartPayload: attached as-is with its boundary content type
            - anything else: JSON, only for POST/PUT/PATCH

        Raises:
            ConfigurationError: Unsupported method, or a JSON body on a
                method that cannot carry one
            EncodingError: If the payload cannot be serialized
        """
        method = HttpMethod.from_string(call.method)
        if method is None:
            raise ConfigurationError(f"Unsupported HTTP method: {call.method!r}")

        url = self.url_builder.build(call.path, call.query)
        headers = self._merge_headers(call.headers)
        data: Any = None

        if isinstance(call.body, MultipartPayload):
            headers["Content-Type"] = call.body.content_type
            data = call.body.body
        elif call.body is not None:
            if not method.allows_body:
                raise ConfigurationError(f"Unsupported method for body: {method.value}")
            headers["Content-Type"] = JSON_CONTENT_TYPE
            data = to_json(call.body).encode("utf-8")

        prepared = requests.Request(method=method.value, url=url, headers=headers, data=data).prepare()

        if prepared.body is None and method.allows_body:
            prepared.body = b""
            prepared.headers["Content-Length"] = "0"

        logger.debug(f"Composed {method.value} {url}")
        return prepared

    def _merge_headers(self, call_headers: Optional[Mapping[str, str]]) -> CaseInsensitiveDict:
        headers = CaseInsensitiveDict(self.default_headers)
        if call_headers:
            for name, value in call_headers.items():
                headers[name] = value
        return headers
