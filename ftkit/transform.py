"""String slicing, joining, trimming, splitting and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end gives an empty string; a missing string gives None.
    """
    if s is None:
        return None
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None when either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``.

    A missing charset returns a copy of ``s``; a missing string gives None.
    """
    if s is None:
        return None
    if charset is None:
        return str(s)
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if not isinstance(sep, str):
        raise TypeError(f"separator must be a string, not {type(sep).__name__}")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if s is None:
        return None
    return [part for part in s.split(sep) if part]


def strmapi(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for every character of ``s``.

    Without a function the result is a copy of ``s``.
    """
    if s is None:
        return None
    if func is None:
        return str(s)
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``func(index, char)`` on every character of ``chars`` in place.

    A character returned by ``func`` replaces the one at that index; a
    return of None leaves it as it is.
    """
    if chars is None or func is None:
        return
    for index in range(len(chars)):
        replacement = func(index, chars[index])
        if replacement is not None:
            chars[index] = replacement