# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes core.search.SearchService as a single MCP tool named "search".
#
#   The FastMCP tool declaration below gives clients the tool listing and
#   its input schema.  Calls do NOT go through FastMCP's tool runner: a
#   tools/call handler installed on the low-level MCP server hands the raw
#   arguments straight to the service.  That way
#     - an out-of-set `format` reaches format negotiation (-> json)
#       instead of failing schema validation
#     - protocol violations leave as JSON-RPC errors instead of being
#       folded into an isError result by the SDK's call_tool wrapper
#
# HOW OUTCOMES MAP ONTO MCP:
#   - success             -> CallToolResult, one text block
#   - domain failure      -> CallToolResult, one text block, isError=true
#   - protocol violation  -> McpError   (JSON-RPC error with its code)
#
# LIFECYCLE:
#   The FastMCP lifespan calls service.start() when the server comes up and
#   service.stop() when it goes down.  There are no signal handlers here;
#   Ctrl+C stops the stdio loop and the lifespan cleans up.
#
# RUNNING THIS SERVER:
#   python main.py --instance=https://your-searxng-instance.com
# =============================================================================

import logging
import sys
from contextlib import asynccontextmanager
from typing import Annotated, Any, Literal, Optional

import mcp.types as types
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.shared.exceptions import McpError
from pydantic import Field

from core.descriptor import FIELD_DESCRIPTIONS, TOOL_DESCRIPTION, TOOL_NAME
from core.errors import ProtocolError
from core.models import ToolCallResult
from core.search import SearchService

SERVER_NAME = "searxng"
SERVER_VERSION = "0.1.1"

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP protocol, so every log line goes to STDERR.
#
#   CYAN   - incoming tool calls
#   GREEN  - responses
#   YELLOW - status / failures
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

# Responses can be whole result pages; only this much is echoed to the log
_LOG_PREVIEW_CHARS = 300


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the start of the tool response in GREEN, then return it."""
    preview = text if len(text) <= _LOG_PREVIEW_CHARS else text[:_LOG_PREVIEW_CHARS] + "..."
    logging.info(f"{_GREEN}  ← {tool_name} response ({len(text)} chars): {preview}{_RESET}")
    return text


def _described(name: str):
    return Field(description=FIELD_DESCRIPTIONS[name])




def _to_mcp_result(result: ToolCallResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=result.is_error,
    )


# =============================================================================
# Server factory
# =============================================================================
def create_server(service: SearchService) -> FastMCP:
    """Build the FastMCP server around an (unstarted) SearchService."""

    @asynccontextmanager
    async def lifespan(server: FastMCP):
        await service.start()
        _log_status(f"Connected to SearxNG at {service.base_url}")
        try:
            yield {}
        finally:
            await service.stop()
            _log_status("SearxNG client closed")

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION, lifespan=lifespan)

    async def dispatch(name: str, arguments: dict[str, Any]) -> ToolCallResult:
        _log_request(name, arguments)
        try:
            result = await service.call(name, arguments)
        except ProtocolError as exc:
            _log_status(f"Rejected: {exc.message}")
            raise McpError(types.ErrorData(code=exc.code, message=exc.message)) from exc
        except Exception:
            logging.exception("[MCP Error] %s failed", name)
            raise

        if result.is_error:
            _log_status(result.first_text)
        else:
            _log_response(name, result.first_text)
        return result

    # -------------------------------------------------------------------------
    # TOOL: search
    # -------------------------------------------------------------------------
    # Parameter names are the SearxNG query parameter names, so the schema
    # the model sees is also the wire format.  No output schema: the result
    # is a single text block, not structured content.
    # -------------------------------------------------------------------------
    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION, output_schema=None)
    async def search(
        q: Annotated[str, _described("q")],
        categories: Annotated[Optional[str], _described("categories")] = None,
        engines: Annotated[Optional[str], _described("engines")] = None,
        language: Annotated[Optional[str], _described("language")] = None,
        time_range: Annotated[Optional[Literal["day", "month", "year"]], _described("time_range")] = None,
        safesearch: Annotated[Optional[Literal[0, 1, 2]], _described("safesearch")] = None,
        image_proxy: Annotated[Optional[bool], _described("image_proxy")] = None,
        enabled_plugins: Annotated[Optional[str], _described("enabled_plugins")] = None,
        disabled_plugins: Annotated[Optional[str], _described("disabled_plugins")] = None,
        enabled_engines: Annotated[Optional[str], _described("enabled_engines")] = None,
        disabled_engines: Annotated[Optional[str], _described("disabled_engines")] = None,
        format: Annotated[Optional[Literal["json", "csv", "rss", "html"]], _described("format")] = None,
    ) -> str:
        arguments = {
            "q": q,
            "categories": categories,
            "engines": engines,
            "language": language,
            "time_range": time_range,
            "safesearch": safesearch,
            "image_proxy": image_proxy,
            "enabled_plugins": enabled_plugins,
            "disabled_plugins": disabled_plugins,
            "enabled_engines": enabled_engines,
            "disabled_engines": disabled_engines,
            "format": format,
        }
        result = await dispatch(TOOL_NAME, {k: v for k, v in arguments.items() if v is not None})
        if result.is_error:
            raise ToolError(result.first_text)
        return result.first_text

    # -------------------------------------------------------------------------
    # tools/call handler
    # -------------------------------------------------------------------------
    # Replaces the handler FastMCP registered in its constructor, the same
    # way FastMCP installs its own resource and prompt handlers.  McpError
    # raised here reaches the session as a JSON-RPC error response.
    # -------------------------------------------------------------------------
    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await dispatch(request.params.name, request.params.arguments or {})
        return types.ServerResult(_to_mcp_result(result))

    mcp._mcp_server.request_handlers[types.CallToolRequest] = handle_call_tool

    return mcp
