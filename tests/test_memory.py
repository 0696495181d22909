import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


@given(st.binary(min_size=1, max_size=64), st.integers(-512, 512), st.data())
def test_memset_fills_prefix_only(data, value, draw):
    length = draw.draw(st.integers(0, len(data)))
    buffer = bytearray(data)
    result = memset(buffer, value, length)
    assert result is buffer
    assert all(b == value & 0xFF for b in buffer[:length])
    assert buffer[length:] == data[length:]


def test_memset_truncates_value_to_byte():
    buffer = bytearray(3)
    memset(buffer, -1, 3)
    assert buffer == b"\xff\xff\xff"


def test_bzero_clears_prefix():
    buffer = bytearray(b"abcdef")
    bzero(buffer, 4)
    assert buffer == b"\x00\x00\x00\x00ef"


def test_memset_length_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


@given(st.integers(0, 50), st.integers(0, 50))
def test_calloc_is_zeroed(count, size):
    buffer = calloc(count, size)
    assert len(buffer) == count * size
    assert not any(buffer)


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**62, 2**62)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    assert memchr(b"hello", ord("l"), 5) == 2
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"\xff", -1, 1) == 0


@given(st.binary(max_size=64), st.integers(0, 255))
def test_memchr_agrees_with_find(data, value):
    found = memchr(data, value, len(data))
    if value in data:
        assert found == data.index(value)
    else:
        assert found is None


@given(st.binary(max_size=32))
def test_memcmp_equal_is_zero(data):
    assert memcmp(data, bytes(data), len(data)) == 0


@given(st.binary(max_size=32), st.binary(max_size=32))
def test_memcmp_sign_matches_ordering(a, b):
    n = min(len(a), len(b))
    result = memcmp(a, b, n)
    if a[:n] == b[:n]:
        assert result == 0
    else:
        assert (result < 0) == (a[:n] < b[:n])
        assert memcmp(b, a, n) == -result


def test_memcmp_is_unsigned():
    assert memcmp(b"\x80", b"\x00", 1) == 0x80
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_length_too_long():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


@given(st.binary(max_size=32), st.data())
def test_memcpy_copies_prefix(src, draw):
    dst = bytearray(draw.draw(st.binary(min_size=len(src), max_size=len(src) + 8)))
    tail = bytes(dst[len(src):])
    length = draw.draw(st.integers(0, len(src)))
    original_rest = bytes(dst[length:])
    result = memcpy(dst, src, length)
    assert result is dst
    assert dst[:length] == src[:length]
    assert dst[length:] == original_rest
    assert dst.endswith(tail)


def test_memcpy_negative_length():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"abcd", -1)


def test_memmove_overlapping_forward():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 2, 0, 4)
    assert buffer == b"ababcd"


def test_memmove_overlapping_backward():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 0, 2, 4)
    assert buffer == b"cdefef"


@given(st.binary(min_size=1, max_size=40), st.data())
def test_memmove_matches_copy_of_source(data, draw):
    size = len(data)
    length = draw.draw(st.integers(0, size))
    src = draw.draw(st.integers(0, size - length))
    dst = draw.draw(st.integers(0, size - length))
    buffer = bytearray(data)
    memmove(buffer, dst, src, length)
    assert buffer[dst:dst + length] == data[src:src + length]
    assert len(buffer) == size


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)