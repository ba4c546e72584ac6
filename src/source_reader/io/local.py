"""Local file and stdin readers."""

import io
import logging
import sys
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)


class StdinReader(io.BufferedIOBase):
    """Non-closing view of ``sys.stdin.buffer``.

    Reads go straight to the process's stdin buffer, so bytes left unread
    when this handle is closed are still there for the next reader.
    """

    @property
    def _stdin(self) -> BinaryIO:
        # Looked up on every read so a replaced sys.stdin is honoured
        return sys.stdin.buffer

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed stdin handle")

    def readable(self) -> bool:
        return True

    def read(self, size: int | None = -1) -> bytes:
        self._check_open()
        return self._stdin.read(size)

    def read1(self, size: int = -1) -> bytes:
        self._check_open()
        return self._stdin.read1(size)

    def readinto(self, buffer) -> int:
        self._check_open()
        return self._stdin.readinto(buffer)

    def readinto1(self, buffer) -> int:
        self._check_open()
        return self._stdin.readinto1(buffer)

    def fileno(self) -> int:
        return self._stdin.fileno()


def open_local_reader(path: Path) -> BinaryIO:
    """Open a local file for binary reading; OS errors propagate as-is."""
    logger.debug("opening local source %s", path)
    return open(path, "rb")


def open_stdin_reader() -> BinaryIO:
    """Return a handle on stdin. Closing it leaves stdin open."""
    logger.debug("reading from stdin")
    return StdinReader()
