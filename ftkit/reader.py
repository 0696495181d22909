"""Line-by-line reading from file descriptors and streams."""

from __future__ import annotations

import os
from typing import BinaryIO, Dict, Iterator, Optional, TextIO, Union

BUFFER_SIZE = 10
MAX_FD = 10240

Source = Union[int, BinaryIO, TextIO]


class LineReader:
    """Read newline-terminated lines from a descriptor or a file object.

    Data is read ``buffer_size`` units at a time. Each line keeps its
    trailing newline; the final line of the input may lack one.
    """

    def __init__(
        self,
        source: Source,
        buffer_size: int = BUFFER_SIZE,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._source = source
        self._buffer_size = buffer_size
        self._encoding = encoding
        self._errors = errors
        self._pending = b""

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        data = self._source.read(self._buffer_size) or b""
        if isinstance(data, str):
            data = data.encode(self._encoding, self._errors)
        return data

    def _decode(self, data: bytes) -> str:
        return data.decode(self._encoding, self._errors)

    def readline(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted.

        A read error discards any buffered data and is raised.
        """
        while True:
            index = self._pending.find(b"\n")
            if index >= 0:
                line = self._pending[: index + 1]
                self._pending = self._pending[index + 1:]
                return self._decode(line)
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        line, self._pending = self._pending, b""
        return self._decode(line)

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line from file descriptor ``fd``, or None at its end.

    State is kept per descriptor between calls.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"fd must be an int, not {type(fd).__name__}")
    if not 0 <= fd <= MAX_FD:
        raise ValueError(f"fd must be between 0 and {MAX_FD}, got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.readline()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line