"""Protocols and shared constants for the I/O layer."""

from typing import Any, Iterator, Protocol, runtime_checkable


USER_AGENT = "source-reader (requests)"

CHUNK_SIZE = 64 * 1024  # 64 KB


@runtime_checkable
class HTTPResponse(Protocol):
    """The parts of a ``requests.Response`` used for streaming a body."""

    def raise_for_status(self) -> None:
        """Raise ``requests.HTTPError`` for a non-success status."""
        ...

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class HTTPClient(Protocol):
    """Injectable HTTP collaborator for remote sources.

    ``requests.Session`` satisfies this. Substitutes should raise
    ``requests.RequestException`` subclasses on failure.
    """

    def get(self, url: str, **kwargs: Any) -> HTTPResponse:
        ...
