# =============================================================================
# core/settings.py  -  Startup Configuration
# =============================================================================
#
# WHERE THE SEARXNG URL COMES FROM (first match wins):
#   1. --instance=<url>   (or "--instance <url>") on the command line
#   2. SEARXNG_BASE_URL   environment variable (a .env file works too;
#                          main.py calls load_dotenv() before we get here)
#
# LOG_LEVEL (default INFO) controls how chatty the stderr log is.
#
# A missing or malformed URL raises ConfigurationError.  main.py turns that
# into a usage message and a non-zero exit before the MCP server starts.
# =============================================================================

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from core.errors import ConfigurationError
from core.request import validate_base_url

USAGE_EXAMPLE = "searxng-mcp --instance=https://your-searxng-instance.com"


@dataclass(frozen=True)
class Settings:
    base_url: str
    log_level: str = "INFO"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="searxng-mcp",
        description="MCP server exposing a SearxNG instance as a `search` tool",
        add_help=False,
    )
    parser.add_argument("--instance", dest="instance", default=None)
    return parser


def load_settings(argv: Sequence[str], environ: Optional[dict] = None) -> Settings:
    """Build Settings from command-line arguments and the environment.

    Raises:
        ConfigurationError: no SearxNG URL was given, or it is not an
            absolute http(s) URL.
    """
    environ = os.environ if environ is None else environ

    # Unrecognised flags are left for whoever launched us
    args, _ = _parser().parse_known_args(list(argv))
    base_url = args.instance or environ.get("SEARXNG_BASE_URL", "")

    if not base_url:
        raise ConfigurationError("Argument format must be --instance=<url>")

    return Settings(
        base_url=validate_base_url(base_url),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
    )
