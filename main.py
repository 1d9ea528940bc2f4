# =============================================================================
# main.py  -  Entry Point for the SearxNG MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py --instance=https://your-searxng-instance.com
#   (or set SEARXNG_BASE_URL in the environment / a .env file)
#
# WHAT HAPPENS:
#   1. Loads .env, then reads the SearxNG URL (core/settings.py)
#   2. Bad or missing URL -> usage on stderr, exit status 1
#   3. Builds the SearchService and the FastMCP server around it
#   4. Serves MCP over stdio until the client disconnects or Ctrl+C
# =============================================================================

import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from core.errors import ConfigurationError
from core.search import SearchService
from core.settings import USAGE_EXAMPLE, load_settings
from tools.mcp_server import configure_logging, create_server


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()

    try:
        settings = load_settings(sys.argv[1:] if argv is None else argv)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Example: {USAGE_EXAMPLE}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    mcp = create_server(SearchService(settings.base_url))
    logging.info(f"SearxNG MCP Server running on stdio, using instance: {settings.base_url}")

    try:
        mcp.run()
    except KeyboardInterrupt:
        # In-flight calls are abandoned, not drained
        logging.info("Interrupted, shutting down")
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
