# =============================================================================
# core/formats.py  -  Format Negotiation
# =============================================================================
#
# The caller may ask for json, csv, rss or html.  Anything else (missing,
# misspelled, wrong type) silently becomes json.  This runs BEFORE the URL is
# built because the resolved format decides whether `format=` is sent at all.
# =============================================================================

from typing import Any

from core.models import DEFAULT_FORMAT, FORMATS


def resolve_format(raw: Any) -> str:
    """Return the output format to request from SearxNG."""
    if isinstance(raw, str) and raw in FORMATS:
        return raw
    return DEFAULT_FORMAT
