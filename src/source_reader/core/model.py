from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True, slots=True)
class Local:
    """A filesystem path, not checked for existence."""
    path: Path


@dataclass(frozen=True, slots=True)
class Remote:
    """An http:// or https:// URL, kept verbatim."""
    url: str


@dataclass(frozen=True, slots=True)
class Stdin:
    """The process's standard input."""


SourceReader = Union[Local, Remote, Stdin]


@dataclass(slots=True)
class Result:
    source: str
    success: bool
    bytes_read: int
    error: str | None = None


class RemoteSourceError(IOError):
    """Raised when a remote source cannot be fetched.

    Transport failures and non-success statuses all end up here; the original
    exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
