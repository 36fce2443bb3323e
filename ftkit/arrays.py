"""Helpers for string arrays that end at the first None entry."""

from __future__ import annotations

from itertools import takewhile
from typing import Optional, Sequence


def _live(items: Sequence[Optional[str]]) -> list[str]:
    return list(takewhile(lambda item: item is not None, items))


def arrlen(items: Optional[Sequence[Optional[str]]]) -> int:
    """Number of entries before the first None; -1 when *items* is None."""
    if items is None:
        return -1
    return len(_live(items))


def arrdup(items: Optional[Sequence[Optional[str]]]) -> Optional[list[str]]:
    """Return a new list of the entries before the first None.

    None gives None.
    """
    if items is None:
        return None
    return _live(items)


def resize(
    items: Optional[Sequence[Optional[str]]], new_size: int
) -> Optional[list[Optional[str]]]:
    """Return a list of *new_size* slots keeping the leading entries of *items*.

    Slots beyond the old contents are None. A new size of 0 releases the
    array and returns None.
    """
    if new_size < 0:
        raise ValueError(f"new size must not be negative, got {new_size}")
    if new_size == 0:
        return None
    kept = list(items or [])[:new_size]
    return kept + [None] * (new_size - len(kept))