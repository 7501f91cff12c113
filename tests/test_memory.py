import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.text.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)

DATA = st.binary(min_size=1, max_size=32)


@given(DATA, st.data())
def test_bzero_zeroes_prefix_only(data, draw):
    n = draw.draw(st.integers(0, len(data)))
    buf = bytearray(data)
    result = bzero(buf, n)
    assert result is buf
    assert all(b == 0 for b in buf[:n])
    assert buf[n:] == data[n:]


def test_bzero_rejects_overlong_count():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_memset_uses_low_byte():
    buf = bytearray(b"xyz")
    memset(buf, 0x141, 2)
    assert buf == bytearray(b"AAz")


@given(DATA, st.integers(0, 255), st.data())
def test_memset_fills(data, value, draw):
    n = draw.draw(st.integers(0, len(data)))
    buf = memset(bytearray(data), value, n)
    assert buf[:n] == bytes([value]) * n
    assert buf[n:] == data[n:]


@given(DATA, st.data())
def test_memcpy_copies_prefix(src, draw):
    dest = bytearray(len(src))
    n = draw.draw(st.integers(0, len(src)))
    memcpy(dest, src, n)
    assert dest[:n] == src[:n]
    assert all(b == 0 for b in dest[n:])


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


@given(DATA, st.data())
def test_memmove_matches_original_region(data, draw):
    n = draw.draw(st.integers(0, len(data)))
    src_offset = draw.draw(st.integers(0, len(data) - n))
    dest_offset = draw.draw(st.integers(0, len(data) - n))
    buf = bytearray(data)
    memmove(buf, dest_offset, src_offset, n)
    assert buf[dest_offset : dest_offset + n] == data[src_offset : src_offset + n]
    assert len(buf) == len(data)


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_and_respects_limit():
    assert memchr(b"hello", ord("l"), 5) == 2
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"hello", ord("h") + 256, 5) == 0


@given(DATA, st.data())
def test_memchr_result_points_at_value(data, draw):
    value = draw.draw(st.sampled_from(list(data)))
    index = memchr(data, value, len(data))
    assert index is not None
    assert data[index] == value
    assert value not in data[:index]


@given(DATA)
def test_memcmp_equal_is_zero(data):
    assert memcmp(data, bytes(data), len(data)) == 0


@given(DATA, DATA)
def test_memcmp_sign_matches_ordering(a, b):
    n = min(len(a), len(b))
    result = memcmp(a, b, n)
    assert (result > 0) == (a[:n] > b[:n])
    assert (result < 0) == (a[:n] < b[:n])
    assert memcmp(b, a, n) == -result


@given(st.integers(0, 16), st.integers(0, 16))
def test_calloc_is_zeroed(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert not any(buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)