from __future__ import annotations
import os
from pathlib import Path

from .model import Local, Remote, SourceReader, Stdin

REMOTE_PREFIXES = ("http://", "https://")


def parse_source(value: str | os.PathLike | SourceReader) -> SourceReader:
    """Classify a command-line style source argument.

    ``-`` is stdin, anything starting with ``http://`` or ``https://`` is
    remote, everything else is a local path. Path-like values are always
    local, whatever their text looks like.
    """
    if isinstance(value, (Local, Remote, Stdin)):
        return value
    if isinstance(value, os.PathLike):
        return Local(Path(value))
    if not isinstance(value, str):
        raise TypeError(f"Cannot build a source from {type(value).__name__}")

    if value == "-":
        return Stdin()
    if value.startswith(REMOTE_PREFIXES):
        return Remote(value)
    return Local(Path(value))
