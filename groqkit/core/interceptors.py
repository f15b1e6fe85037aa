"""
Interceptor chain applied around every outbound call.

Interceptors are plain objects in an explicit ordered list. The chain folds
them around the transport function, so the first interceptor sees the call
first and the response last. The client uses, in order: authentication,
observability, retry-with-backoff.
"""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import requests

from groqkit.core.processor import body_text
from groqkit.exceptions import CancelledError, TransportError

logger = logging.getLogger(__name__)

Proceed = Callable[[requests.PreparedRequest], requests.Response]
Transport = Callable[[requests.PreparedRequest], requests.Response]


class CallContext:
    """Per-call state shared by the interceptors of one invocation.

    Cancellation is signalled through ``threading.Event`` objects: the
    caller's own event and the client's shutdown event.
    """

    POLL_INTERVAL = 0.05

    def __init__(self, cancel_event: Optional[threading.Event] = None,
                 shutdown_event: Optional[threading.Event] = None):
        self._events = [e for e in (cancel_event, shutdown_event) if e is not None]

    @property
    def cancelled(self) -> bool:
        return any(event.is_set() for event in self._events)

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise CancelledError()

    def wait(self, delay: float) -> None:
        """Block for ``delay`` seconds unless cancelled first.

        Raises:
            CancelledError: If cancellation is signalled before or during the wait
        """
        self.raise_if_cancelled()
        if not self._events:
            time.sleep(delay)
            return
        if len(self._events) == 1:
            if self._events[0].wait(delay):
                raise CancelledError()
            return

        deadline = time.monotonic() + delay
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            self._events[0].wait(min(remaining, self.POLL_INTERVAL))
            self.raise_if_cancelled()


class Interceptor(ABC):
    """One stage of the chain."""

    @abstractmethod
    def intercept(self, request: requests.PreparedRequest, proceed: Proceed,
                  context: CallContext) -> requests.Response:
        """Handle ``request``, calling ``proceed`` to hand it to the next stage."""
        ...


class InterceptorChain:
    """Ordered interceptors around a transport function."""

    def __init__(self, interceptors: Sequence[Interceptor], transport: Transport):
        self.interceptors: List[Interceptor] = list(interceptors)
        self.transport = transport

    def execute(self, request: requests.PreparedRequest,
                context: Optional[CallContext] = None) -> requests.Response:
        context = context or CallContext()

        def dispatch(index: int, current: requests.PreparedRequest) -> requests.Response:
            if index == len(self.interceptors):
                return self.transport(current)
            return self.interceptors[index].intercept(
                current, lambda nxt: dispatch(index + 1, nxt), context
            )

        return dispatch(0, request)

    def __repr__(self) -> str:
        names = ", ".join(type(i).__name__ for i in self.interceptors)
        return f"InterceptorChain([{names}])"


class AuthInterceptor(Interceptor):
    """Sets the bearer credential on every request, overriding caller values."""

    def __init__(self, api_key: str):
        self._authorization = f"Bearer {api_key}"

    def intercept(self, request, proceed, context):
        authed = request.copy()
        authed.headers["Authorization"] = self._authorization
        return proceed(authed)

    def __repr__(self) -> str:
        return "AuthInterceptor(api_key=****)"


@dataclass(frozen=True)
class CallRecord:
    """Timing of one call through the chain, as seen by the observability hook."""
    method: str
    url: str
    started_at: float
    ended_at: float
    status_code: Optional[int] = None
    error: Optional[BaseException] = None

    @property
    def duration_ms(self) -> float:
        return (self.ended_at - self.started_at) * 1000.0


CallHook = Callable[[CallRecord], None]


class ObservabilityInterceptor(Interceptor):
    """Records start/end timestamps around the call.

    Side effect only: the request and response pass through untouched and
    call errors propagate unchanged.
    """

    def __init__(self, hook: Optional[CallHook] = None, clock: Callable[[], float] = time.perf_counter):
        self.hook = hook
        self.clock = clock

    def intercept(self, request, proceed, context):
        started = self.clock()
        response = None
        error = None
        try:
            response = proceed(request)
            return response
        except BaseException as e:
            error = e
            raise
        finally:
            record = CallRecord(
                method=request.method or "",
                url=request.url or "",
                started_at=started,
                ended_at=self.clock(),
                status_code=response.status_code if response is not None else None,
                error=error,
            )
            self._emit(record)

    def _emit(self, record: CallRecord) -> None:
        outcome = record.status_code if record.error is None else type(record.error).__name__
        logger.debug(f"{record.method} {record.url} -> {outcome} in {record.duration_ms:.1f}ms")
        if self.hook is None:
            return
        try:
            self.hook(record)
        except Exception:
            logger.warning("Observability hook failed", exc_info=True)


def is_retryable_status(status_code: int) -> bool:
    """429 and every 5xx are retryable."""
    return status_code == 429 or status_code >= 500


def backoff_delay(attempt: int) -> float:
    """Seconds to wait before retry ``attempt`` (1-indexed): 1s, 2s, 4s, ..."""
    return (2 ** attempt) * 0.5


@dataclass(frozen=True)
class Attempt:
    """Outcome of one attempt: either a response or a transport error."""
    number: int
    response: Optional[requests.Response] = None
    error: Optional[TransportError] = None

    @property
    def retryable(self) -> bool:
        if self.response is None:
            return True
        return is_retryable_status(self.response.status_code)


Sleeper = Callable[[float, CallContext], None]


def context_sleep(delay: float, context: CallContext) -> None:
    context.wait(delay)


class RetryInterceptor(Interceptor):
    """Repeats the call on transport errors, 429 and 5xx responses.

    Attempts run from 0 to ``max_retries`` inclusive. Before attempt ``i``
    (i >= 1) the call waits ``backoff_delay(i)``. When attempts run out the
    most recent response is returned as-is; if no attempt produced a
    response, the last ``TransportError`` is re-raised.
    """

    def __init__(self, max_retries: int, sleep: Sleeper = context_sleep):
        self.max_retries = max_retries
        self.sleep = sleep

    def intercept(self, request, proceed, context):
        attempts: List[Attempt] = []

        for number in range(self.max_retries + 1):
            if number > 0:
                delay = backoff_delay(number)
                logger.warning(
                    f"Retrying {request.method} {request.url} in {delay:.1f}s "
                    f"(attempt {number + 1} of {self.max_retries + 1}, "
                    f"last outcome: {self._describe(attempts[-1])})"
                )
                self.sleep(delay, context)

            attempt = self._attempt(number, request, proceed)
            if not attempt.retryable:
                return attempt.response

            if attempt.response is not None and number < self.max_retries:
                self._discard(attempt.response)
            attempts.append(attempt)

        return self._final_outcome(attempts)

    @staticmethod
    def _attempt(number: int, request, proceed: Proceed) -> Attempt:
        try:
            return Attempt(number=number, response=proceed(request))
        except TransportError as e:
            return Attempt(number=number, error=e)

    @staticmethod
    def _discard(response: requests.Response) -> None:
        # Body is already buffered; closing releases the pooled connection.
        body = body_text(response)
        logger.debug(f"Discarding retryable {response.status_code} response body: {body[:200]}")
        response.close()

    @staticmethod
    def _final_outcome(attempts: Sequence[Attempt]) -> requests.Response:
        for attempt in reversed(attempts):
            if attempt.response is not None:
                return attempt.response
        raise attempts[-1].error

    @staticmethod
    def _describe(attempt: Attempt) -> str:
        if attempt.response is not None:
            return f"HTTP {attempt.response.status_code}"
        return str(attempt.error)

    def __repr__(self) -> str:
        return f"RetryInterceptor(max_retries={self.max_retries})"
