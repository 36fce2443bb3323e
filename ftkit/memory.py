"""Byte-buffer helpers: filling, copying, searching, comparing, resizing."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer of {length} bytes")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first *n* bytes of *buf* to ``value & 0xFF``; return *buf*."""
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buf* in place."""
    memset(buf, 0, n)


def memcpy(dest: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy *n* bytes from the start of *src* into the start of *dest*.

    Returns *dest*; when both buffers are None, returns None.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes within *buf* from offset *src* to offset *dest*.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns *buf*.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c & 0xFF`` in the first *n* bytes."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: bytes, s2: bytes, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch."""
    _check_count(n, len(s1), len(s2))
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def realloc(data: Optional[bytes], new_size: int) -> Optional[bytearray]:
    """Return a new buffer of *new_size* bytes holding the start of *data*.

    Bytes beyond the old contents are zero. A new size of 0 releases the
    buffer and returns None.
    """
    if new_size < 0:
        raise ValueError("new size must not be negative")
    if new_size == 0:
        return None
    result = bytearray(new_size)
    if data:
        keep = min(len(data), new_size)
        result[:keep] = data[:keep]
    return result