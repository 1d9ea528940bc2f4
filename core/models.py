# =============================================================================
# core/models.py  -  Data Models
# =============================================================================
#
# These dataclasses describe every value that flows through one search call:
#
#   SearchArguments  ->  (format negotiation)  ->  URL  ->  FetchResult
#                                                             |
#                                                    ToolCallResult
#
# Like the rest of core/, they carry no knowledge of MCP.  The tools/ layer
# converts a ToolCallResult into whatever the MCP transport expects.
# =============================================================================

from dataclasses import dataclass, field, fields
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# Output formats
# -----------------------------------------------------------------------------
# SearxNG can answer in any of these.  "html" is its native format, which is
# why the request translator never sends format=html explicitly.
# -----------------------------------------------------------------------------
FORMATS: tuple[str, ...] = ("json", "csv", "rss", "html")
DEFAULT_FORMAT = "json"

TIME_RANGES: tuple[str, ...] = ("day", "month", "year")
SAFESEARCH_LEVELS: tuple[int, ...] = (0, 1, 2)


# -----------------------------------------------------------------------------
# SearchArguments - one instance per tool call
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchArguments:
    """The recognised arguments of a `search` call.

    Field order matters: the request translator emits query parameters in
    this order.  Multi-value fields (engines, categories, plugins) arrive
    already comma-joined and are passed through untouched.
    """

    q: str
    categories: Optional[str] = None
    engines: Optional[str] = None
    language: Optional[str] = None
    time_range: Optional[str] = None     # day | month | year
    safesearch: Optional[int] = None     # 0 = off, 1 = moderate, 2 = strict
    image_proxy: Optional[bool] = None
    enabled_plugins: Optional[str] = None
    disabled_plugins: Optional[str] = None
    enabled_engines: Optional[str] = None
    disabled_engines: Optional[str] = None
    format: Optional[Any] = None         # raw caller value, negotiated later

    @classmethod
    def from_mapping(cls, arguments: dict[str, Any]) -> "SearchArguments":
        """Pick the known keys out of a raw argument object.

        Unknown keys are dropped; they never reach the outgoing request.
        The caller has already checked `q`.
        """
        known = {f.name: arguments.get(f.name) for f in fields(cls)}
        return cls(**known)


# -----------------------------------------------------------------------------
# ToolCallResult - the outward envelope
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextContent:
    """A single text content block."""

    text: str
    type: str = "text"


@dataclass(frozen=True)
class ToolCallResult:
    """What a search call hands back to the caller.

    is_error is set only for domain-level failures (the upstream answered
    with a non-2xx status, or the request/parse blew up).  Protocol
    violations never produce a ToolCallResult; they raise ProtocolError.
    """

    content: tuple[TextContent, ...] = field(default_factory=tuple)
    is_error: bool = False

    @classmethod
    def from_text(cls, text: str, is_error: bool = False) -> "ToolCallResult":
        return cls(content=(TextContent(text=text),), is_error=is_error)

    @property
    def first_text(self) -> str:
        return self.content[0].text if self.content else ""


# -----------------------------------------------------------------------------
# FetchResult - the upstream outcome, returned rather than raised
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FetchedResponse:
    """The upstream answered.  The body has already been read in full."""

    status_code: int
    reason_phrase: str
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class FetchFailure:
    """The upstream could not be reached, or its body could not be used.

    kind is "transport" for network errors and "decode" for a 2xx body that
    did not parse in the negotiated format.
    """

    kind: str
    detail: str


FetchResult = Union[FetchedResponse, FetchFailure]
