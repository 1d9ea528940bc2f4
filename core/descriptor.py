# =============================================================================
# core/descriptor.py  -  The `search` Tool Contract
# =============================================================================
#
# The description strings below are what the calling model reads to decide
# how to use the tool, so they say exactly what each argument does and give
# an example.  tools/mcp_server.py reuses them for the FastMCP signature.
# =============================================================================

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from core.models import FORMATS, SAFESEARCH_LEVELS, TIME_RANGES

TOOL_NAME = "search"
TOOL_DESCRIPTION = "Perform a search using SearxNG for automation workflows"

FIELD_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "q": 'The search query string (REQUIRED). Example: "n8n automation"',
    "categories": 'Optional: Comma separated list of search categories (e.g., "general,images")',
    "engines": 'Optional: Comma separated list of search engines to use (e.g., "google,brave")',
    "language": 'Optional: Language code for the search (e.g., "en", "de")',
    "time_range": "Optional: Time range for search results",
    "safesearch": "Optional: Safe search level (0: None, 1: Moderate, 2: Strict)",
    "image_proxy": "Optional: Proxy image results through SearxNG (true/false)",
    "enabled_plugins": "Optional: Comma-separated list of enabled plugins",
    "disabled_plugins": "Optional: Comma-separated list of disabled plugins",
    "enabled_engines": "Optional: Comma-separated list of enabled engines (overrides general engines list)",
    "disabled_engines": "Optional: Comma-separated list of disabled engines",
    "format": "Optional: Output format of the results (json, csv, rss, html). Defaults to json",
})


def _string(name: str) -> dict[str, Any]:
    return {"type": "string", "description": FIELD_DESCRIPTIONS[name]}


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: Mapping[str, Any] = field(default_factory=dict)


SEARCH_TOOL = ToolDescriptor(
    name=TOOL_NAME,
    description=TOOL_DESCRIPTION,
    input_schema=MappingProxyType({
        "type": "object",
        "description": "Arguments for the SearxNG search tool. The 'q' parameter is mandatory.",
        "properties": {
            "q": _string("q"),
            "categories": _string("categories"),
            "engines": _string("engines"),
            "language": _string("language"),
            "time_range": {**_string("time_range"), "enum": list(TIME_RANGES)},
            "safesearch": {
                "type": "integer",
                "description": FIELD_DESCRIPTIONS["safesearch"],
                "enum": list(SAFESEARCH_LEVELS),
            },
            "image_proxy": {"type": "boolean", "description": FIELD_DESCRIPTIONS["image_proxy"]},
            "enabled_plugins": _string("enabled_plugins"),
            "disabled_plugins": _string("disabled_plugins"),
            "enabled_engines": _string("enabled_engines"),
            "disabled_engines": _string("disabled_engines"),
            "format": {**_string("format"), "enum": list(FORMATS)},
        },
        "required": ["q"],
    }),
)
