"""printf-style formatting with the conversions c, s, p, d, i, u, x, X and %.

The flags ``-``, ``0``, ``#``, ``+``, space and ``.`` are understood
together with a field width and a precision. An unknown conversion
character is dropped together with its flags and consumes no argument.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterator, Optional, TextIO, Tuple, Union

from ftkit.chars import is_digit
from ftkit.output import putstr_fd
from ftkit.strings import atoi

_FLAG_CHARS = "0- #+."
_CONVERSIONS = "cspdiuxX%"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = (1 << 64) - 1

Stream = Union[TextIO, int]


@dataclass
class FormatFlags:
    """Flags, width and precision parsed from one conversion specification."""

    alternate: bool = False
    precision: bool = False
    plus: bool = False
    space: bool = False
    minus: bool = False
    zero: bool = False
    left_padding: bool = False
    width: int = 0
    precision_size: int = 0


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _skip_digits(text: str, index: int) -> int:
    while (ch := _char_at(text, index)) and is_digit(ch):
        index += 1
    return index


def parse_flags(spec: str) -> Tuple[FormatFlags, int]:
    """Parse the specification that starts at the ``%`` of ``spec``.

    Returns the flags and the index in ``spec`` of the conversion character.
    """
    if not spec.startswith("%"):
        raise ValueError(f"a conversion specification starts with '%', got {spec!r}")
    flags = FormatFlags()
    index = 1
    while (ch := _char_at(spec, index)) and ch in _FLAG_CHARS:
        if ch == "0":
            flags.zero = True
        elif ch == "-":
            flags.minus = True
        elif ch == "#":
            flags.alternate = True
        elif ch == "+":
            flags.plus = True
        elif ch == " ":
            flags.space = True
        else:
            flags.precision = True
            index += 1
            break
        index += 1
    if flags.precision:
        flags.precision_size = atoi(spec[index:])
    else:
        flags.width = atoi(spec[index:])
    index = _skip_digits(spec, index)
    if not flags.minus and not flags.zero and flags.width > 0:
        flags.left_padding = True
    if _char_at(spec, index) == "." and not flags.precision:
        flags.precision = True
        index += 1
        flags.precision_size = atoi(spec[index:])
        index = _skip_digits(spec, index)
    return flags, index


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _require_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an int, not {type(value).__name__}")
    return value


class _Renderer:
    """Accumulates formatted output."""

    def __init__(self) -> None:
        self._parts: list = []

    def text(self) -> str:
        return "".join(self._parts)

    def emit(self, text: str) -> int:
        self._parts.append(text)
        return len(text)

    def pad(self, fill: str, size: int, printed_len: int) -> int:
        count = size - printed_len
        if count <= 0:
            return 0
        return self.emit(fill * count)

    # flag handling

    def minus_pad(self, flags: Optional[FormatFlags], printed_len: int) -> int:
        if flags is not None and flags.minus:
            return self.pad(" ", flags.width, printed_len)
        return 0

    def zero_pad(
        self,
        flags: Optional[FormatFlags],
        printed_len: int,
        number_precision: bool,
        digits_len: int,
    ) -> int:
        if flags is None:
            return 0
        if flags.zero and not flags.minus and not number_precision:
            return self.pad("0", flags.width, printed_len)
        if number_precision:
            return self.pad("0", flags.precision_size, digits_len)
        return 0

    def sign_prefix(
        self, flags: Optional[FormatFlags], value: int, unsigned: bool
    ) -> int:
        if flags is None or unsigned or value < 0:
            return 0
        if flags.plus:
            return self.emit("+")
        if flags.space:
            return self.emit(" ")
        return 0

    def left_pad(
        self,
        flags: Optional[FormatFlags],
        printed_len: int,
        number_precision: bool,
    ) -> int:
        if flags is None:
            return 0
        if flags.left_padding and not number_precision:
            return self.pad(" ", flags.width, printed_len)
        if number_precision and not flags.minus:
            return self.pad(" ", flags.width, printed_len)
        return 0

    def precision_offset(
        self,
        flags: Optional[FormatFlags],
        printable_len: int,
        printable_mod: int,
        precision_mod: int,
    ) -> int:
        if flags is None:
            return 0
        if printable_len > flags.precision_size or not flags.precision:
            return self.left_pad(flags, printable_len + printable_mod, flags.precision)
        return self.left_pad(
            flags, flags.precision_size + precision_mod, flags.precision
        )

    # conversions

    def char(self, ch: str, flags: Optional[FormatFlags]) -> int:
        printed = 1 + self.left_pad(flags, 1, False)
        self.emit(ch)
        return printed + self.minus_pad(flags, 1)

    def string(self, text: Optional[str], flags: Optional[FormatFlags]) -> int:
        if text is None:
            text = "(null)"
        printed = 0
        if flags is not None:
            if flags.precision_size > len(text) or not flags.precision:
                printed = self.left_pad(flags, len(text), False)
            else:
                printed = self.left_pad(flags, flags.precision_size, False)
        if flags is not None and flags.precision:
            text = text[: max(flags.precision_size, 0)]
        printed += self.emit(text)
        return printed + self.minus_pad(flags, printed)

    def pointer(self, address: int, flags: FormatFlags) -> int:
        digits = format(address, "x")
        printed = self.left_pad(flags, len(digits) + 2, False)
        printed += self.emit("0x") + self.emit(digits)
        return printed + self.minus_pad(flags, printed)

    def number(self, value: int, flags: FormatFlags, unsigned: bool) -> int:
        signed_prefix = int(not unsigned and value >= 0 and (flags.plus or flags.space))
        hidden = flags.precision and value == 0 and flags.precision_size == 0
        decimal_len = len(str(value)) + signed_prefix - int(hidden)
        printed = self.precision_offset(
            flags, decimal_len, 0, int(value < 0) + signed_prefix
        )
        printed += self.sign_prefix(flags, value, unsigned)
        if value < 0:
            printed += self.emit("-")
            value = -value
        printed += self.zero_pad(flags, decimal_len, flags.precision, len(str(value)))
        if not hidden:
            printed += self.emit(str(value))
        return printed + self.minus_pad(flags, printed)

    def hexadecimal(self, value: int, upper: bool, flags: FormatFlags) -> int:
        digits = format(value, "X" if upper else "x")
        hidden = flags.precision and value == 0 and flags.precision_size == 0
        prefix = 2 if flags.alternate and value != 0 else 0
        hex_len = len(digits) - int(hidden) + prefix
        printed = self.precision_offset(flags, len(digits), prefix - int(hidden), prefix)
        if prefix:
            printed += self.emit("0X" if upper else "0x")
        printed += self.zero_pad(flags, hex_len, flags.precision, len(digits))
        if not hidden:
            printed += self.emit(digits)
        return printed + self.minus_pad(flags, printed)

    def percent(self, flags: FormatFlags) -> int:
        printed = self.zero_pad(flags, 1, False, 0)
        return printed + self.char("%", flags)

    def convert(self, conversion: str, flags: FormatFlags, args: Iterator[Any]) -> None:
        if not conversion or conversion not in _CONVERSIONS:
            return
        if conversion == "%":
            self.percent(flags)
            return
        try:
            arg = next(args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        if conversion == "c":
            if isinstance(arg, str):
                if len(arg) != 1:
                    raise ValueError(f"%c needs a single character, got {arg!r}")
                ch = arg
            else:
                ch = chr(_require_int(arg, conversion) & 0xFF)
            self.char(ch, flags)
        elif conversion == "s":
            if arg is not None and not isinstance(arg, str):
                raise TypeError(f"%s needs a str, not {type(arg).__name__}")
            self.string(arg, flags)
        elif conversion == "p":
            if arg is None:
                address = 0
            elif isinstance(arg, int):
                address = arg & _ULONG_MASK
            else:
                address = id(arg)
            self.pointer(address, flags)
        elif conversion in "di":
            self.number(_to_int32(_require_int(arg, conversion)), flags, False)
        elif conversion == "u":
            self.number(_require_int(arg, conversion) & _UINT_MASK, flags, True)
        else:
            value = _require_int(arg, conversion) & _UINT_MASK
            self.hexadecimal(value, conversion == "X", flags)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, not {type(fmt).__name__}")
    renderer = _Renderer()
    remaining = iter(args)
    index = 0
    while index < len(fmt):
        if fmt[index] == "%":
            flags, offset = parse_flags(fmt[index:])
            index += offset
            renderer.convert(_char_at(fmt, index), flags, remaining)
            index += 1
            continue
        renderer.emit(fmt[index])
        index += 1
    return renderer.text()


def printf(fmt: str, *args: Any, stream: Optional[Stream] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    putstr_fd(text, sys.stdout if stream is None else stream)
    return len(text)