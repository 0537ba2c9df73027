"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Optional

BUFFER_SIZE = 10
MAX_FD = 1024


class LineReader:
    """Read lines from raw file descriptors, keeping unread data per descriptor.

    Each call reads chunks of ``buffer_size`` bytes until a chunk holds a
    newline or the end of input is reached, then returns the next line
    with its newline. Data past that line is kept for the next call on
    the same descriptor.
    """

    max_fd = MAX_FD

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._stash: Dict[int, bytearray] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from ``fd``, newline included, or None at the end.

        A read error discards whatever was kept for ``fd`` and is re-raised.
        """
        if not 0 <= fd < self.max_fd:
            raise ValueError(f"file descriptor {fd} is outside 0..{self.max_fd - 1}")
        stash = self._stash.setdefault(fd, bytearray())
        while True:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self._stash.pop(fd, None)
                raise
            stash += chunk
            if not chunk or b"\n" in chunk:
                break
        newline = stash.find(b"\n")
        end = len(stash) if newline == -1 else newline + 1
        if end == 0:
            self._stash.pop(fd, None)
            return None
        line = bytes(stash[:end])
        del stash[:end]
        return line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd`` using a shared reader."""
    return _default_reader.read_line(fd)