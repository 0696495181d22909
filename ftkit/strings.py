"""C-style string inspection, comparison, bounded copying and number conversion.

Positions are returned as indices into the string rather than pointers. A
missing match is ``None``. Functions that fill a fixed-size destination
return the new string together with the length the C function reports.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from ftkit.chars import is_digit

CharLike = Union[str, int]

_WHITESPACE = " \f\n\r\t\v"
_LONG_MAX = 9223372036854775807
_ULONG_MASK = (1 << 64) - 1
_NUL = "\0"


def _as_char(c: CharLike) -> str:
    """Turn a character or a code point into a one-character string.

    Integers are truncated to a byte, as a cast to ``char`` would do.
    """
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, not bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a one-character string or an int, not {type(c).__name__}")


def _to_int32(value: int) -> int:
    """Wrap an integer into the range of a 32-bit signed int."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def strlen(s: Optional[str]) -> int:
    """Length of ``s``; a missing string has length 0."""
    return 0 if s is None else len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _as_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the code-point difference of the first mismatch, or 0. Two
    missing strings compare equal; one missing string compares as -1.
    """
    if s1 is None and s2 is None:
        return 0
    if s1 is None or s2 is None:
        return -1
    for a, b in zip(s1[:n].ljust(n, _NUL), s2[:n].ljust(n, _NUL)):
        if a == _NUL and b == _NUL:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` when it lies wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied string and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return src[: max(size - 1, 0)], len(src)


def strlcat(dst: Optional[str], src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the concatenation tried to
    create. When ``size`` does not exceed the length of ``dst`` nothing is
    appended and the reported length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if dst is None:
        if size:
            raise TypeError("a missing destination can only be given with size 0")
        dst = ""
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strdup(s: Optional[str]) -> str:
    """Return a copy of ``s``; a missing string copies as empty."""
    return "" if s is None else str(s)


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and sign.

    Parsing stops at the first non-digit. Values reaching the 64-bit signed
    limit give -1 (positive) or 0 (negative); other results wrap to a 32-bit
    signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = (10 * value + ord(ch) - ord("0")) & _ULONG_MASK
        if value >= _LONG_MAX:
            return -1 if sign == 1 else 0
    return _to_int32(value * sign)


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    return str(n)