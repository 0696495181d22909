"""Character, byte-buffer, string, linked-list, scope-tracking, line-reading and printf-style formatting helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "output",
    "transform",
    "lists",
    "memscope",
    "reader",
    "formatting",
]