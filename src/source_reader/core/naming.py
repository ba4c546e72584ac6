from __future__ import annotations
from typing import Any, Dict, assert_never

from .model import Local, Remote, SourceReader, Stdin


def filename(source: SourceReader) -> str | None:
    """Return the name a source would be saved under, if it has one.

    For URLs this is plain text after the last ``/``; query strings and
    fragments are not stripped.
    """
    match source:
        case Local(path):
            name = path.name
            return name if name and name != ".." else None
        case Remote(url):
            return url.rsplit("/", 1)[-1]
        case Stdin():
            return None
        case _:
            assert_never(source)


def display(source: SourceReader) -> str:
    match source:
        case Local(path):
            return str(path)
        case Remote(url):
            return url
        case Stdin():
            return "-"
        case _:
            assert_never(source)


def describe(source: SourceReader) -> Dict[str, Any]:
    """Return a JSON-serialisable summary of a source."""
    match source:
        case Local():
            kind = "local"
        case Remote():
            kind = "remote"
        case Stdin():
            kind = "stdin"
        case _:
            assert_never(source)
    return {"source": display(source), "kind": kind, "filename": filename(source)}
