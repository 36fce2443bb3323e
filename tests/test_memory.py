import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset, realloc


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf == b"xxxxx world"


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytes([0x41]) * 3


def test_memset_zero_count_changes_nothing():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == b"abc"


def test_memset_rejects_overrun():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    assert bzero(buf, 4) is None
    assert buf == b"\0\0\0\0ef"


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 3)
    assert result is dest
    assert dest == b"abc..."


def test_memcpy_both_none_returns_none():
    assert memcpy(None, None, 4) is None


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 4)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert data.index(b"n") == index


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_finds_nul_byte():
    data = b"ab\0cd"
    assert memchr(data, 0, len(data)) == data.index(b"\0")


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_calloc_is_zero_filled():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_realloc_grow_keeps_contents():
    grown = realloc(b"abc", 6)
    assert grown[:3] == b"abc"
    assert len(grown) == 6


def test_realloc_shrink_truncates():
    assert realloc(b"abcdef", 2) == b"ab"


def test_realloc_zero_returns_none():
    assert realloc(b"abc", 0) is None


def test_realloc_from_nothing():
    buf = realloc(None, 5)
    assert buf == bytearray(5)