"""
Error handling infrastructure for the pipeline driver.

Converts transport failures that survived the retry policy into
``PipelineError`` values, so callers get one result shape for every
outcome that involved the network.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, cast

from groqkit.exceptions import RequestTimeoutError, TransportError
from groqkit.types import PipelineError, Result

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized conversion of transport exceptions into PipelineError values.

    Only ``TransportError`` is converted. Configuration, validation,
    encoding, decoding and cancellation errors are raised to the caller.
    """

    @staticmethod
    def handle_timeout(error: RequestTimeoutError) -> PipelineError:
        """Handle timeout errors.

        Args:
            error: The timeout exception

        Returns:
            PipelineError with status code 0
        """
        error_message = f"Request timed out after {error.timeout}s: {error.original_error or error}"
        logger.error(error_message)
        return PipelineError(message=error_message, status_code=0)

    @staticmethod
    def handle_network(error: TransportError) -> PipelineError:
        """Handle network errors.

        Args:
            error: The network exception

        Returns:
            PipelineError with status code 0
        """
        if error.original_error is not None:
            error_message = f"Network error: {error.original_error}"
        else:
            error_message = error.message
        logger.error(error_message)
        return PipelineError(message=error_message, status_code=0)

    @classmethod
    def handle_exception(cls, error: TransportError) -> PipelineError:
        """Convert a transport exception into a PipelineError.

        This is the main entry point for error handling.
        """
        if isinstance(error, RequestTimeoutError):
            return cls.handle_timeout(error)
        return cls.handle_network(error)


def with_error_handling(func: Callable[..., Result]) -> Callable[..., Result]:
    """Decorator that turns an escaping ``TransportError`` into a PipelineError.

    Usage:
        @with_error_handling
        def request(self, ...) -> Result:
            # Just implement the happy path; network failures become values
            ...
    """
    @wraps(func)
    def wrapper(*args, **kwargs) -> Result:
        try:
            return func(*args, **kwargs)
        except TransportError as e:
            return ErrorHandler.handle_exception(e)

    return cast(Callable[..., Result], wrapper)
