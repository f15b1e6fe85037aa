"""
URL composition for outbound calls.

Joins the configured base URL with a relative path and appends default
and per-call query parameters. Parameters are appended, never merged by
key, so a name present in both sets appears twice.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import urlencode, urlsplit

from groqkit.exceptions import ConfigurationError


def is_absolute_http_url(url: str) -> bool:
    """Check that ``url`` has an http(s) scheme and a host."""
    try:
        parts = urlsplit(url)
        # Accessing .port validates it.
        parts.port
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def join_url(base_url: str, path: str) -> str:
    """Join base and path with exactly one slash between them."""
    if not path:
        return base_url
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def format_query_value(value: Any) -> str:
    """Render a scalar query value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _expand(params: Optional[Mapping[str, Any]]) -> Iterator[Tuple[str, str]]:
    if not params:
        return
    for key, value in params.items():
        if isinstance(value, (set, frozenset)):
            value = sorted(value, key=format_query_value)
        if isinstance(value, (list, tuple)):
            for item in value:
                yield key, format_query_value(item)
        else:
            yield key, format_query_value(value)


class URLBuilder:
    """Builds absolute request URLs against one base URL."""

    def __init__(self, base_url: str, default_query: Optional[Mapping[str, Any]] = None):
        self.base_url = base_url
        self.default_query = dict(default_query or {})

    def build(self, path: str, query: Optional[Mapping[str, Any]] = None) -> str:
        """Build the URL for ``path`` with default then call-supplied parameters.

        Args:
            path: Path relative to the base URL
            query: Call-specific parameters; sequence values expand to
                one entry per element, in order

        Returns:
            Absolute URL string

        Raises:
            ConfigurationError: If base + path is not a valid absolute URL
        """
        url = join_url(self.base_url, path)
        if not is_absolute_http_url(url):
            raise ConfigurationError(f"Invalid base URL or path: {url}")

        pairs: List[Tuple[str, str]] = list(_expand(self.default_query))
        pairs.extend(_expand(query))
        if not pairs:
            return url

        separator = "&" if urlsplit(url).query else "?"
        return f"{url}{separator}{urlencode(pairs)}"
