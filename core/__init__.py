# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL of the search translation logic.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or the MCP SDK.  The only
#   third-party import is httpx, for building the SearxNG URL and issuing
#   the upstream GET.  Everything else is plain Python.
#
#   tools/ wraps this package in an MCP server; main.py starts it.
# =============================================================================
