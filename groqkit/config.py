"""
Configuration management for groqkit clients.

This module provides an immutable client configuration resolved once at
construction, with environment-based fallbacks and validation.
"""
from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from groqkit._version import __version__
from groqkit.core.urls import is_absolute_http_url
from groqkit.exceptions import ConfigurationError

API_KEY_ENV = "GROQ_API_KEY"
BASE_URL_ENV = "GROQ_BASE_URL"
TIMEOUT_ENV = "GROQ_TIMEOUT"
MAX_RETRIES_ENV = "GROQ_MAX_RETRIES"

DEFAULT_BASE_URL = "https://api.groq.com/"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 2
USER_AGENT = f"groqkit-python/{__version__}"


def _builtin_headers() -> dict:
    return {
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every call made through one client.

    Build instances with ``ClientConfig.create()``, which applies the
    environment fallbacks; direct construction only validates.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    default_headers: Mapping[str, str] = field(default_factory=_builtin_headers)
    default_query: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate once, then freeze the mappings."""
        self._validate_config()
        object.__setattr__(self, "base_url", self.base_url.strip())
        object.__setattr__(self, "api_key", self.api_key.strip())
        object.__setattr__(self, "default_headers", MappingProxyType(dict(self.default_headers)))
        object.__setattr__(self, "default_query", MappingProxyType(dict(self.default_query)))

    def _validate_config(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigurationError(
                f"API key must be provided either explicitly or via the {API_KEY_ENV} environment variable"
            )

        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ConfigurationError("Base URL cannot be empty")

        if not is_absolute_http_url(self.base_url.strip()):
            raise ConfigurationError(f"Invalid base URL: {self.base_url!r}")

        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ConfigurationError("timeout must be a positive number of seconds")

        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int) or self.max_retries < 0:
            raise ConfigurationError("max_retries must be a non-negative integer")

    @classmethod
    def create(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        default_query: Optional[Mapping[str, Any]] = None,
    ) -> ClientConfig:
        """
        Resolve a configuration from explicit values and the environment.

        Each setting is taken from its argument when given, then from its
        environment variable, then from the library default. The built-in
        ``Content-Type`` and ``User-Agent`` headers are always present;
        ``default_headers`` may override their values.

        Raises:
            ConfigurationError: If the resolved settings are invalid
        """
        if api_key is None:
            api_key = os.getenv(API_KEY_ENV)
        if api_key is None:
            raise ConfigurationError(
                f"API key must be provided either explicitly or via the {API_KEY_ENV} environment variable"
            )

        if base_url is None:
            base_url = os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL

        if timeout is None:
            timeout = _env_number(TIMEOUT_ENV, float, DEFAULT_TIMEOUT)

        if max_retries is None:
            max_retries = _env_number(MAX_RETRIES_ENV, int, DEFAULT_MAX_RETRIES)

        headers = _builtin_headers()
        if default_headers:
            headers.update(default_headers)

        return cls(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            default_headers=headers,
            default_query=dict(default_query or {}),
        )

    def replace(self, **changes: Any) -> ClientConfig:
        """
        Create a new config instance with updated values.

        Args:
            **changes: Configuration values to update

        Returns:
            New, re-validated ClientConfig instance
        """
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary, with the API key masked."""
        return {
            "base_url": self.base_url,
            "api_key": _mask(self.api_key),
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "default_headers": dict(self.default_headers),
            "default_query": dict(self.default_query),
        }

    def __repr__(self) -> str:
        return (
            f"ClientConfig(base_url={self.base_url!r}, api_key={_mask(self.api_key)!r}, "
            f"timeout={self.timeout}, max_retries={self.max_retries})"
        )


def _env_number(name: str, kind: type, default: Any) -> Any:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return kind(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a valid {kind.__name__}, got {raw!r}", e) from e


def _mask(secret: str) -> str:
    if len(secret) <= 8:
        return "****"
    return f"{secret[:4]}...{secret[-4:]}"
