"""source-reader - read bytes from a local path, an HTTP(S) URL or stdin."""

from .core.model import Local, Remote, Stdin, SourceReader, RemoteSourceError   # re-export
from .core.classify import parse_source
from .core.naming import filename, describe
from .io import open_reader, read_to_end, iter_source_async, read_to_end_async
from .io.base import HTTPClient, USER_AGENT


__all__ = [
    "SourceReader", "Local", "Remote", "Stdin", "RemoteSourceError",
    "parse_source", "filename", "describe",
    "open_reader", "read_to_end", "iter_source_async", "read_to_end_async",
    "HTTPClient", "USER_AGENT",
]
