"""Read newline-terminated lines from raw file descriptors, one at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_MAX_FD",
    "LineReader",
    "get_next_line",
]

DEFAULT_BUFFER_SIZE = 4
DEFAULT_MAX_FD = 1024

_SHARED_KEY = -1


class LineReader:
    """Reads lines from file descriptors, keeping leftover bytes between calls.

    Each call reads at most ``buffer_size`` bytes at a time until a newline
    or end of file is reached.  Bytes read past the newline are kept and
    served first on the next call for the same descriptor.

    With ``shared=False`` every descriptor below ``max_fd`` keeps its own
    leftover bytes, so several descriptors can be read in turn.  With
    ``shared=True`` a single leftover store serves every descriptor and no
    upper bound applies to descriptor numbers.
    """

    def __init__(
        self,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        max_fd: int = DEFAULT_MAX_FD,
        shared: bool = False,
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if not shared and max_fd <= 0:
            raise ValueError(f"max_fd must be positive, got {max_fd}")
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self.shared = shared
        self._pending: dict[int, bytes] = {}

    def _key(self, fd: int) -> int:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if self.shared:
            return _SHARED_KEY
        if fd >= self.max_fd:
            raise ValueError(
                f"file descriptor {fd} out of range (max_fd={self.max_fd})"
            )
        return fd

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line of ``fd`` with its newline, or None at end of file.

        The last line is returned without a newline if the data does not end
        with one.  A read error discards any leftover bytes and propagates.
        """
        key = self._key(fd)
        pending = bytearray(self._pending.get(key, b""))
        while True:
            idx = pending.find(b"\n")
            if idx >= 0:
                self._pending[key] = bytes(pending[idx + 1:])
                return bytes(pending[: idx + 1])
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self._pending.pop(key, None)
                raise
            if not chunk:
                self._pending.pop(key, None)
                return bytes(pending) if pending else None
            pending += chunk

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield the lines of ``fd`` until end of file."""
        while (line := self.read_line(fd)) is not None:
            yield line

    def pending(self, fd: int) -> bytes:
        """Return the bytes already read from ``fd`` but not yet returned."""
        return self._pending.get(self._key(fd), b"")

    def reset(self, fd: int) -> None:
        """Discard any leftover bytes kept for ``fd``."""
        self._pending.pop(self._key(fd), None)


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of ``fd`` using a process-wide reader."""
    return _default_reader.read_line(fd)