"""I/O layer for source-reader - opens the right byte stream for each source."""

import asyncio
from typing import AsyncIterator, BinaryIO, Optional, assert_never

import httpx

# Re-export these for import convenience
from .base import CHUNK_SIZE, USER_AGENT, HTTPClient, HTTPResponse
from .local import open_local_reader, open_stdin_reader
from .http_sync import open_http_reader, default_client
from .http_async import iter_http_async
from ..core.classify import parse_source
from ..core.model import Local, Remote, Stdin


def open_reader(source, client: Optional[HTTPClient] = None) -> BinaryIO:
    """Open a binary stream for a source (SourceReader, path, URL or '-').

    ``client`` is only used for remote sources. Each call opens its own
    handle; the caller closes it.
    """
    match parse_source(source):
        case Local(path):
            return open_local_reader(path)
        case Remote(url):
            return open_http_reader(url, client)
        case Stdin():
            return open_stdin_reader()
        case unreachable:
            assert_never(unreachable)


def read_to_end(source, client: Optional[HTTPClient] = None) -> bytes:
    """Read a whole source into memory. There is no size limit."""
    buf = bytearray()
    with open_reader(source, client) as stream:
        while chunk := stream.read(CHUNK_SIZE):
            buf += chunk
    return bytes(buf)


async def iter_source_async(
    source,
    client: Optional[httpx.AsyncClient] = None,
    *,
    chunk_size: int = CHUNK_SIZE,
) -> AsyncIterator[bytes]:
    """Yield the bytes of a source in chunks without blocking the event loop."""
    match parse_source(source):
        case Remote(url):
            async for chunk in iter_http_async(url, client, chunk_size=chunk_size):
                yield chunk
        case Local(path):
            stream = await asyncio.to_thread(open_local_reader, path)
            async for chunk in _drain_in_thread(stream, chunk_size):
                yield chunk
        case Stdin():
            async for chunk in _drain_in_thread(open_stdin_reader(), chunk_size):
                yield chunk
        case unreachable:
            assert_never(unreachable)


async def _drain_in_thread(stream: BinaryIO, chunk_size: int) -> AsyncIterator[bytes]:
    try:
        while chunk := await asyncio.to_thread(stream.read, chunk_size):
            yield chunk
    finally:
        stream.close()


async def read_to_end_async(source, client: Optional[httpx.AsyncClient] = None) -> bytes:
    """Async counterpart of read_to_end."""
    buf = bytearray()
    async for chunk in iter_source_async(source, client):
        buf += chunk
    return bytes(buf)


__all__ = [
    "open_reader", "read_to_end", "iter_source_async", "read_to_end_async",
    "open_local_reader", "open_stdin_reader", "open_http_reader", "iter_http_async",
    "default_client", "HTTPClient", "HTTPResponse", "CHUNK_SIZE", "USER_AGENT",
]
