# =============================================================================
# core/response.py  -  Response Marshaling
# =============================================================================
#
# A 2xx body becomes exactly one text block:
#   - json           -> parsed, then re-serialized with 2-space indentation
#   - csv, rss, html -> the raw body, byte for byte
#
# A json body that does not parse is a domain failure, not a crash.
# =============================================================================

import json

from core.errors import normalize_failure
from core.models import FetchFailure, FetchedResponse, ToolCallResult


def pretty_json(body: str) -> str:
    """Parse and re-indent a JSON document.  Raises ValueError on bad input."""
    return json.dumps(json.loads(body), indent=2, ensure_ascii=False)


def marshal_response(response: FetchedResponse, fmt: str) -> ToolCallResult:
    if fmt != "json":
        return ToolCallResult.from_text(response.body)

    try:
        text = pretty_json(response.body)
    except ValueError as exc:
        return normalize_failure(
            FetchFailure(kind="decode", detail=f"Invalid JSON response from SearxNG: {exc}")
        )
    return ToolCallResult.from_text(text)
