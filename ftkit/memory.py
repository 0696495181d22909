"""Byte-buffer primitives: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

import sys
from typing import Optional, Union

Readable = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: Readable) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(
                f"length {length} exceeds buffer size {len(buffer)}"
            )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` truncated to a byte."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the product does not fit in the address space.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > sys.maxsize // count:
        raise OverflowError(f"{count} * {size} bytes is too large")
    return bytearray(count * size)


def memchr(data: Readable, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` in the first ``length`` bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Readable, second: Readable, length: int) -> int:
    """Compare the first ``length`` bytes as unsigned values.

    Returns the difference of the first differing bytes, or 0 if equal.
    """
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: Readable, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` into the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(
    buffer: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    end = max(dst_offset, src_offset) + length
    if end > len(buffer):
        raise ValueError(f"region ends at {end}, beyond buffer size {len(buffer)}")
    buffer[dst_offset:dst_offset + length] = bytes(
        buffer[src_offset:src_offset + length]
    )
    return buffer