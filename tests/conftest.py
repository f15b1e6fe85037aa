"""
Test configuration and fixtures for groqkit tests.
"""
import json
import socket
import threading
from collections import deque
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from groqkit import GroqClient


class ScriptedResponse:
    """Response the mock server sends for one request."""
    def __init__(self, status=200, body=b"", headers=None):
        self.status = status
        self.body = body if isinstance(body, bytes) else body.encode("utf-8")
        self.headers = list((headers or {}).items())


class RecordedRequest:
    """Request as received by the mock server."""
    def __init__(self, method, path, headers, body):
        self.method = method
        self.path = path
        self.headers = headers
        self.body = body

    def json(self):
        return json.loads(self.body.decode("utf-8"))


class MockAPIServer:
    """In-process HTTP server replaying a queue of scripted responses.

    Once the queue is empty every request gets ``200 {}``.
    """

    def __init__(self):
        self.responses = deque()
        self.requests = []
        self._lock = threading.Lock()
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), self._handler_class())
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self):
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}/"

    def enqueue(self, status=200, body=b"", headers=None):
        self.responses.append(ScriptedResponse(status, body, headers))

    def enqueue_json(self, payload, status=200, headers=None):
        merged = {"Content-Type": "application/json"}
        merged.update(headers or {})
        self.enqueue(status, json.dumps(payload), merged)

    @property
    def last_request(self):
        return self.requests[-1]

    def start(self):
        self._thread.start()

    def stop(self):
        self._server.shutdown()
        self._server.server_close()

    def _next_response(self, recorded):
        with self._lock:
            self.requests.append(recorded)
            if self.responses:
                return self.responses.popleft()
        return ScriptedResponse(200, b"{}", {"Content-Type": "application/json"})

    def _handler_class(self):
        server = self

        class Handler(BaseHTTPRequestHandler):
            def _handle(self):
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length else b""
                scripted = server._next_response(
                    RecordedRequest(self.command, self.path, self.headers, body)
                )
                self.send_response(scripted.status)
                for name, value in scripted.headers:
                    self.send_header(name, value)
                self.send_header("Content-Length", str(len(scripted.body)))
                self.end_headers()
                if scripted.body:
                    self.wfile.write(scripted.body)

            do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = _handle

            def log_message(self, format, *args):
                pass

        return Handler


class RecordingSleep:
    """Backoff wait replacement that records delays instead of sleeping."""
    def __init__(self):
        self.delays = []

    def __call__(self, delay, context):
        context.raise_if_cancelled()
        self.delays.append(delay)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GROQ_* variables from the host environment out of tests."""
    for name in ("GROQ_API_KEY", "GROQ_BASE_URL", "GROQ_TIMEOUT", "GROQ_MAX_RETRIES", "GROQ_LOG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_server():
    """Running mock API server."""
    server = MockAPIServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def client(mock_server, recording_sleep):
    """Client pointed at the mock server with the default retry settings."""
    with GroqClient(api_key="k", base_url=mock_server.url, max_retries=2,
                    timeout=5.0, sleep=recording_sleep) as c:
        yield c


@pytest.fixture
def unused_port():
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
