"""Asynchronous HTTP body streaming using httpx."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from ..core.model import RemoteSourceError
from .base import CHUNK_SIZE, USER_AGENT

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _get_client(client: Optional[httpx.AsyncClient]):
    """Yield the caller's client, or a temporary one closed on exit."""
    if client is not None:
        # Caller owns it, don't close it here
        yield client
        return

    async with httpx.AsyncClient(headers={"User-Agent": USER_AGENT}, timeout=None) as temporary:
        yield temporary


async def iter_http_async(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
    *,
    chunk_size: int = CHUNK_SIZE,
) -> AsyncIterator[bytes]:
    """Stream the body of ``url`` chunk by chunk as it arrives."""
    logger.debug("GET %s (async)", url)
    async with _get_client(client) as http:
        try:
            async with http.stream("GET", url) as response:
                response.raise_for_status()
                async for chunk in response.aiter_bytes(chunk_size):
                    yield chunk
        except httpx.HTTPStatusError as e:
            raise RemoteSourceError(
                f"GET {url} failed with status {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise RemoteSourceError(f"GET {url} failed: {e}", url=url) from e
