"""
Raw HTTP transport: the innermost link of the interceptor chain.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests
from requests.exceptions import ConnectTimeout, ReadTimeout, RequestException, Timeout

from groqkit.exceptions import RequestTimeoutError, TransportError

logger = logging.getLogger(__name__)


class HTTPTransport:
    """Sends prepared requests through a pooled ``requests.Session``.

    Any ``requests`` failure surfaces as ``TransportError`` (or its timeout
    subclass) so the retry policy sees a single exception type.
    """

    def __init__(self, timeout: float, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        try:
            # Same value for connect and read; requests has no write timeout.
            return self.session.send(request, timeout=(self.timeout, self.timeout))
        except (ConnectTimeout, ReadTimeout, Timeout) as e:
            raise RequestTimeoutError(f"Request timed out: {e}", timeout=self.timeout, original_error=e) from e
        except RequestException as e:
            raise TransportError(f"Network error: {e}", original_error=e) from e

    __call__ = send

    def close(self) -> None:
        self.session.close()

    def __repr__(self) -> str:
        return f"HTTPTransport(timeout={self.timeout}s)"
