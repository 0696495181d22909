import io
import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _drain(read_end):
    """Read everything from a pipe's read end, close it and decode it."""
    chunks = []
    try:
        while True:
            chunk = os.read(read_end, 4096)
            if not chunk:
                break
            chunks.append(chunk)
    finally:
        os.close(read_end)
    return b"".join(chunks).decode("utf-8")


@given(st.characters(min_codepoint=1, max_codepoint=0x10FFFF, blacklist_categories=("Cs",)))
def test_putchar_writes_character(c):
    buffer = io.StringIO()
    putchar_fd(c, buffer)
    assert buffer.getvalue() == c


def test_putchar_rejects_multiple_characters():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putchar_rejects_non_string():
    with pytest.raises(TypeError):
        putchar_fd(65, io.StringIO())


@given(st.text())
def test_putstr_writes_string(s):
    buffer = io.StringIO()
    putstr_fd(s, buffer)
    assert buffer.getvalue() == s


def test_putstr_missing_writes_nothing():
    buffer = io.StringIO()
    putstr_fd(None, buffer)
    assert buffer.getvalue() == ""


@given(st.text())
def test_putendl_appends_newline(s):
    buffer = io.StringIO()
    putendl_fd(s, buffer)
    assert buffer.getvalue() == s + "\n"


def test_putendl_missing_writes_only_newline():
    buffer = io.StringIO()
    putendl_fd(None, buffer)
    assert buffer.getvalue() == "\n"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_putnbr_round_trip(n):
    buffer = io.StringIO()
    putnbr_fd(n, buffer)
    assert int(buffer.getvalue()) == n


def test_putnbr_minimum_int():
    buffer = io.StringIO()
    putnbr_fd(-2147483648, buffer)
    assert buffer.getvalue() == "-2147483648"


def test_putnbr_rejects_float():
    with pytest.raises(TypeError):
        putnbr_fd(1.0, io.StringIO())


def test_writes_to_file_descriptor():
    read_end, write_end = os.pipe()
    putstr_fd("hello fd", write_end)
    os.close(write_end)
    assert _drain(read_end) == "hello fd"

    read_end, write_end = os.pipe()
    putendl_fd("line", write_end)
    os.close(write_end)
    assert _drain(read_end) == "line\n"

    read_end, write_end = os.pipe()
    putchar_fd("x", write_end)
    os.close(write_end)
    assert _drain(read_end) == "x"

    read_end, write_end = os.pipe()
    putnbr_fd(-12345, write_end)
    os.close(write_end)
    assert _drain(read_end) == "-12345"


def test_sequence_of_writes_accumulates():
    buffer = io.StringIO()
    putstr_fd("value=", buffer)
    putnbr_fd(7, buffer)
    putchar_fd(";", buffer)
    putendl_fd(None, buffer)
    assert buffer.getvalue() == "value=7;\n"