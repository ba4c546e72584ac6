"""Synchronous HTTP body reader using requests."""

import io
import logging
from typing import BinaryIO, Iterator, Optional

import requests

from ..core.model import RemoteSourceError
from .base import CHUNK_SIZE, USER_AGENT, HTTPClient, HTTPResponse

logger = logging.getLogger(__name__)


def default_client() -> requests.Session:
    """Create a session that identifies itself with USER_AGENT."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def _status_of(exc: requests.RequestException) -> Optional[int]:
    # Response.__bool__ is False for error statuses, so compare against None
    response = getattr(exc, "response", None)
    return response.status_code if response is not None else None


def _wrap(url: str, exc: requests.RequestException) -> RemoteSourceError:
    return RemoteSourceError(f"GET {url} failed: {exc}", url=url, status_code=_status_of(exc))


class HTTPBodyReader(io.RawIOBase):
    """Raw stream over a response body, filled from ``iter_content`` as data arrives."""

    def __init__(self, url: str, response: HTTPResponse, chunk_size: int = CHUNK_SIZE,
                 session: Optional[requests.Session] = None):
        self.url = url
        self._response = response
        self._session = session  # closed with the stream when we created it
        self._error: Optional[RemoteSourceError] = None
        self._chunks: Iterator[bytes] = response.iter_content(chunk_size=chunk_size)
        self._pending = b''

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if self._error is not None:
            # A failed body is truncated, never report it as a clean EOF
            raise self._error
        while not self._pending:
            try:
                self._pending = next(self._chunks)
            except StopIteration:
                return 0
            except requests.RequestException as e:
                self._error = _wrap(self.url, e)
                raise self._error from e

        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size

    def close(self):
        if not self.closed:
            self._response.close()
            if self._session is not None:
                self._session.close()
        super().close()


def open_http_reader(url: str, client: Optional[HTTPClient] = None) -> BinaryIO:
    """GET ``url`` and return a buffered stream over the response body.

    Uses a fresh default session when no client is given. Any
    ``requests.RequestException`` is raised as ``RemoteSourceError``.
    """
    owned = client is None
    session = default_client() if owned else client
    logger.debug("GET %s", url)
    try:
        response = session.get(url, stream=True)
    except requests.RequestException as e:
        if owned:
            session.close()
        raise _wrap(url, e) from e

    try:
        response.raise_for_status()
    except requests.RequestException as e:
        response.close()
        if owned:
            session.close()
        raise _wrap(url, e) from e

    return io.BufferedReader(HTTPBodyReader(url, response, session=session if owned else None))
