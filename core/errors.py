# =============================================================================
# core/errors.py  -  Error Taxonomy & Normalization
# =============================================================================
#
# Failures come in two tiers and are handled very differently:
#
#   1. PROTOCOL level (checked before any network access)
#        Unknown tool name, missing `q`.  These RAISE ProtocolError; the MCP
#        layer turns them into a JSON-RPC error with the matching code.
#
#   2. DOMAIN level (after the upstream was contacted)
#        Non-2xx status, connection failure, undecodable body.  These never
#        raise past the call.  They become a ToolCallResult with
#        is_error=True and a human-readable message.
#
# ConfigurationError sits outside both: it only happens at startup and ends
# the process before any call is served.
# =============================================================================

import json
from typing import Optional

from core.models import FetchFailure, FetchedResponse, ToolCallResult

# JSON-RPC 2.0 error codes used by MCP
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

# How much of a non-JSON error body is quoted back to the caller
ERROR_BODY_PREVIEW_CHARS = 200
TRUNCATION_MARKER = "..."


class SearxngError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SearxngError):
    """The SearxNG base URL is missing or is not an absolute http(s) URL."""


class ProtocolError(SearxngError):
    """A call that violates the tool contract.

    Carries the JSON-RPC error code so the transport can report it on its
    own error channel.
    """

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @classmethod
    def unknown_tool(cls, name: str) -> "ProtocolError":
        return cls(METHOD_NOT_FOUND, f"Unknown tool: {name}")

    @classmethod
    def missing_query(cls) -> "ProtocolError":
        return cls(INVALID_PARAMS, "Missing required argument: 'q'")


# =============================================================================
# Domain-level message composition
# =============================================================================

def upstream_failure_message(response: FetchedResponse, fmt: str) -> str:
    """Describe a non-2xx answer from SearxNG.

    Starts with "<status> <reason>" and, when the body has something useful,
    appends it:
      - json format: the `message` field of a JSON object body, if any
      - other formats: the first 200 characters of the body
    """
    message = f"SearxNG API error: {response.status_code} {response.reason_phrase}"

    if fmt == "json":
        detail = _json_error_message(response.body)
        if detail:
            message += f" - {detail}"
    elif response.body:
        message += f" - {_preview(response.body)}"

    return message


def _json_error_message(body: str) -> Optional[str]:
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return None


def _preview(body: str) -> str:
    if len(body) <= ERROR_BODY_PREVIEW_CHARS:
        return body
    return body[:ERROR_BODY_PREVIEW_CHARS] + TRUNCATION_MARKER


def failed_result(detail: str) -> ToolCallResult:
    """Wrap a failure description in an is_error envelope."""
    return ToolCallResult.from_text(f"Error executing search: {detail}", is_error=True)


def normalize_failure(failure: FetchFailure) -> ToolCallResult:
    return failed_result(failure.detail)
