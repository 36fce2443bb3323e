"""String searching, comparison and bounded copying.

Positions are returned as indices into the string, or None when nothing
is found. Where the classic routines treat the terminating NUL as part of
the string, searching for ``"\\0"`` (or code 0) finds the position just
past the last character.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, Optional

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return *c*, a character code or one-character string, as a string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return chr(c)


def _check_size(n: int, what: str = "size") -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def strlen(s: Optional[str]) -> int:
    """Length of *s*; None counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str, c: int | str) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or None.

    Searching for NUL yields ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or None.

    Searching for NUL yields ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strchrlen(s: Optional[str], c: int | str) -> int:
    """Number of characters of *s* before the first *c*, or its whole length."""
    ch = _char(c)
    if not s:
        return 0
    index = s.find(ch)
    return len(s) if index < 0 else index


def _compare(s1: str, s2: str) -> int:
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the code difference at the first mismatch.

    A string that ends first compares as if followed by NUL.
    """
    return _compare(s1, s2)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than *n* characters."""
    _check_size(n, "count")
    return _compare(s1[:n], s2[:n])


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of *little* in *big* where the match lies within the first *length* chars.

    An empty *little* is found at index 0.
    """
    _check_size(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of *needle* in *haystack*, or None.

    An empty *needle* is found at index 0.
    """
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of *src*, which exceeds the copy when it was truncated.
    """
    _check_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting text and the length the full concatenation would
    have. When *size* does not exceed the length of *dst*, nothing is
    appended and the returned length is ``size + len(src)``.
    """
    _check_size(size)
    dst_len = min(len(dst), size)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def getenv(name: Optional[str], env: Optional[Iterable[str]]) -> Optional[str]:
    """Value of *name* in a sequence of ``NAME=VALUE`` entries, or None."""
    if name is None or env is None:
        return None
    prefix = name + "="
    for entry in env:
        if entry.startswith(prefix):
            return entry[len(prefix):]
    return None