"""String building and reshaping: duplicating, slicing, joining, trimming,
splitting, mapping and character removal."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def _check_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def strdup(s: Optional[str]) -> Optional[str]:
    """Return a copy of *s*; None gives None."""
    if s is None:
        return None
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most *length* characters of *s* from index *start*.

    A start at or past the end of *s* gives an empty string; None gives None.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate *s1* and *s2*; a None operand counts as empty."""
    return (s1 or "") + (s2 or "")


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip every character found in *charset* from both ends of *s*.

    None for either argument gives None.
    """
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.lstrip(charset).rstrip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the single character *sep*, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """Build a string from ``func(index, char)`` for every character of *s*."""
    if s is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    s: MutableSequence[str],
    func: Callable[[int, MutableSequence[str]], None],
) -> None:
    """Call ``func(index, s)`` for every position of the mutable buffer *s*.

    The callback may rewrite ``s[index]`` in place.
    """
    if isinstance(s, str):
        raise TypeError("striteri needs a mutable sequence of characters, not str")
    for index in range(len(s)):
        func(index, s)


def strdelchar(s: Optional[str], chars: Optional[str]) -> Optional[str]:
    """Return *s* without any of the characters in *chars*.

    None for either argument gives None.
    """
    if s is None or chars is None:
        return None
    remove = set(chars)
    return "".join(char for char in s if char not in remove)