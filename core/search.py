# =============================================================================
# core/search.py  -  The Search Pipeline
# =============================================================================
#
# One call, start to finish:
#
#   validate name + q  ->  resolve format  ->  build URL  ->  fetch
#        |                                                     |
#   ProtocolError                       non-2xx / failure -> is_error result
#   (nothing sent)                      2xx               -> marshaled result
#
# LIFECYCLE:
#   start() opens the shared httpx.AsyncClient, stop() closes it.  Both are
#   called exactly once, by the server lifespan in tools/mcp_server.py.
#   Calls still awaiting the network when stop() runs are abandoned.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

from core.client import fetch
from core.descriptor import SEARCH_TOOL
from core.errors import ProtocolError, failed_result, normalize_failure, upstream_failure_message
from core.formats import resolve_format
from core.models import FetchFailure, SearchArguments, ToolCallResult
from core.request import build_search_url, validate_base_url
from core.response import marshal_response

logger = logging.getLogger(__name__)


class SearchService:
    """Proxies `search` tool calls to one SearxNG instance.

    Args:
        base_url: Absolute URL of the SearxNG instance.  Validated here, so a
            bad value fails at construction rather than on the first call.
        transport: Optional httpx transport, used by tests to stand in for
            the network.
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = validate_base_url(base_url)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def start(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(transport=self._transport)

    async def stop(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "SearchService":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()

    async def call(self, name: str, arguments: Optional[dict[str, Any]]) -> ToolCallResult:
        """Dispatch one tool call.

        Raises:
            ProtocolError: unknown tool, or `q` missing/empty.  No request is
                sent in either case.

        Every other failure is returned as a ToolCallResult with
        is_error=True.
        """
        if name != SEARCH_TOOL.name:
            raise ProtocolError.unknown_tool(name)

        arguments = arguments or {}
        q = arguments.get("q")
        if not isinstance(q, str) or not q:
            raise ProtocolError.missing_query()

        return await self.search(SearchArguments.from_mapping(arguments))

    async def search(self, arguments: SearchArguments) -> ToolCallResult:
        if self._client is None:
            raise RuntimeError("SearchService.start() must be awaited before searching")

        fmt = resolve_format(arguments.format)
        url = build_search_url(self.base_url, arguments, fmt)
        logger.info("GET %s", url)

        outcome = await fetch(self._client, url)
        if isinstance(outcome, FetchFailure):
            return normalize_failure(outcome)
        if not outcome.ok:
            return failed_result(upstream_failure_message(outcome, fmt))
        return marshal_response(outcome, fmt)
