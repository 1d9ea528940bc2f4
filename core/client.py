# =============================================================================
# core/client.py  -  Upstream Fetch
# =============================================================================
#
# The only place that talks to the network.  One GET per call; the whole
# body is read before returning, so the marshaler always sees the complete
# representation.
#
# Failures are RETURNED as FetchFailure instead of raised, so the caller
# handles both outcomes in plain sight.
#
# No timeout is set here: whatever httpx.AsyncClient was built with applies.
# =============================================================================

import logging

import httpx

from core.models import FetchFailure, FetchedResponse, FetchResult

logger = logging.getLogger(__name__)


async def fetch(client: httpx.AsyncClient, url: httpx.URL) -> FetchResult:
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        logger.warning("SearxNG request to %s failed: %r", url, exc)
        return FetchFailure(kind="transport", detail=str(exc) or exc.__class__.__name__)

    logger.debug("SearxNG answered %s for %s", response.status_code, url)
    return FetchedResponse(
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        body=response.text,
    )
