"""Reading text one line at a time from file descriptors or binary streams."""

from __future__ import annotations

import os
from typing import BinaryIO, Dict, Iterator, Optional, Union

BUFFER_SIZE = 42
OPEN_MAX = 1028

Source = Union[int, BinaryIO]


class LineReader:
    """Reads lines from a file descriptor or a binary stream.

    Data is pulled ``buffer_size`` bytes at a time; each line is returned with
    its newline, the last line possibly without one.
    """

    def __init__(
        self,
        source: Source,
        buffer_size: int = BUFFER_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(source, int) and not isinstance(source, bool) and source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        self.source = source
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._stash = b""

    def _read_chunk(self) -> bytes:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)
        chunk = self.source.read(self.buffer_size)
        return chunk if chunk else b""

    def read_line(self) -> Optional[str]:
        """The next line, or None once the input is exhausted."""
        try:
            while b"\n" not in self._stash:
                chunk = self._read_chunk()
                if not chunk:
                    break
                self._stash += chunk
        except OSError:
            self._stash = b""
            raise
        if not self._stash:
            return None
        cut = self._stash.find(b"\n")
        if cut == -1:
            line, self._stash = self._stash, b""
        else:
            line, self._stash = self._stash[: cut + 1], self._stash[cut + 1:]
        return line.decode(self.encoding)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


class FdLineReaders:
    """Line readers kept per file descriptor, so several can be read in turn."""

    def __init__(self, buffer_size: int = BUFFER_SIZE, encoding: str = "utf-8") -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._readers: Dict[int, LineReader] = {}

    def read_line(self, fd: int) -> Optional[str]:
        """The next line from ``fd``, or None once it is exhausted."""
        if fd < 0 or fd >= OPEN_MAX:
            raise ValueError(f"file descriptor out of range: {fd}")
        reader = self._readers.get(fd)
        if reader is None:
            reader = LineReader(fd, self.buffer_size, self.encoding)
            self._readers[fd] = reader
        try:
            line = reader.read_line()
        except OSError:
            del self._readers[fd]
            raise
        if line is None:
            del self._readers[fd]
        return line