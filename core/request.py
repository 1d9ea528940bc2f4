# =============================================================================
# core/request.py  -  Request Translation
# =============================================================================
#
# Turns SearchArguments + a resolved format into the SearxNG search URL:
#
#     <base>/search?format=<fmt>&q=<q>&<other defined fields...>
#
# RULES:
#   - The base URL may carry a path prefix (https://host/searx).  We JOIN
#     "search" onto it instead of replacing the path.
#   - format=html is never sent: html is what SearxNG returns by default.
#   - Only the fields listed in _QUERY_FIELDS are forwarded.  Keys the
#     caller made up are never put on the wire.
# =============================================================================

from typing import Any

import httpx

from core.errors import ConfigurationError
from core.models import SearchArguments

SEARCH_PATH = "search"


def _query_value(value: Any) -> str:
    """Strings verbatim, booleans as true/false, numbers in base 10."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


# Declaration order of SearchArguments, minus `format`
_QUERY_FIELDS: tuple[str, ...] = (
    "q",
    "categories",
    "engines",
    "language",
    "time_range",
    "safesearch",
    "image_proxy",
    "enabled_plugins",
    "disabled_plugins",
    "enabled_engines",
    "disabled_engines",
)


def validate_base_url(value: str) -> str:
    """Check the configured SearxNG URL once, at startup.

    Raises:
        ConfigurationError: when the value is empty or not an absolute
            http(s) URL with a host.
    """
    if not value:
        raise ConfigurationError("SearxNG base URL is required")
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid SearxNG base URL {value!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(
            f"Invalid SearxNG base URL {value!r}: expected an absolute http(s) URL"
        )
    return value


def search_endpoint(base_url: str) -> httpx.URL:
    """Join the search path onto the base URL, keeping any path prefix."""
    base = httpx.URL(base_url)
    if not base.path.endswith("/"):
        base = base.copy_with(path=base.path + "/")
    return base.join(SEARCH_PATH)


def query_params(arguments: SearchArguments, fmt: str) -> list[tuple[str, str]]:
    """The ordered query string for one call."""
    params: list[tuple[str, str]] = []
    if fmt != "html":
        params.append(("format", fmt))

    for name in _QUERY_FIELDS:
        value = getattr(arguments, name)
        if value is not None:
            params.append((name, _query_value(value)))
    return params


def build_search_url(base_url: str, arguments: SearchArguments, fmt: str) -> httpx.URL:
    return httpx.URL(search_endpoint(base_url), params=query_params(arguments, fmt))
