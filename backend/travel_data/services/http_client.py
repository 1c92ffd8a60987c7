"""Shared upstream HTTP client — one AsyncClient for the whole process."""

import logging

import httpx

from travel_data.config import settings

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def get_http_client() -> httpx.AsyncClient:
    """Return the shared client, creating it on first use.

    Never carries credentials of its own; callers pass auth headers per request.
    """
    global _client
    if _client is None:
        _client = httpx.AsyncClient(timeout=settings.http_timeout)
        logger.info("Upstream HTTP client created")
    return _client


async def close_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
        logger.info("Upstream HTTP client closed")
