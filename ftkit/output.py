"""Write characters, strings and numbers to a stream or file descriptor.

``stream`` is either a text file object with a ``write`` method or an
integer file descriptor, to which the text is written UTF-8 encoded.
"""

from __future__ import annotations

import os
from typing import Optional, TextIO, Union

Stream = Union[TextIO, int]


def _write(stream: Stream, text: str) -> None:
    if isinstance(stream, bool):
        raise TypeError("stream must be a file object or a file descriptor")
    if isinstance(stream, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def putchar_fd(c: str, stream: Stream) -> None:
    """Write the single character ``c``."""
    if not isinstance(c, str):
        raise TypeError(f"expected a one-character string, not {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _write(stream, c)


def putstr_fd(s: Optional[str], stream: Stream) -> None:
    """Write ``s``; a missing string writes nothing."""
    if s is None:
        return
    _write(stream, s)


def putendl_fd(s: Optional[str], stream: Stream) -> None:
    """Write ``s`` followed by a newline."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: Stream) -> None:
    """Write the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    _write(stream, str(n))