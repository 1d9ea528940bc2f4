# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP wrapper around core/.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and the search pipeline:
#     1. It declares the `search` tool with a typed FastMCP signature
#     2. It forwards the arguments to core.search.SearchService
#     3. It maps the outcome onto MCP's result / error channels
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or read HTTP responses (that's in core/)
#   - They do NOT parse configuration (that's core/settings.py + main.py)
# =============================================================================
