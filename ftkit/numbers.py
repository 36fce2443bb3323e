"""Integer parsing, formatting and an integer square-root helper."""

from __future__ import annotations

import math

_SPACE = " \t\n\v\f\r"


def atoi(s: str) -> int:
    """Parse a leading decimal integer from *s*.

    Leading blanks (space, tab, newline, vertical tab, form feed and
    carriage return) are skipped. One optional ``+`` or ``-`` sign is
    accepted. Digits are read up to the first non-digit. Text with no
    digits gives 0.
    """
    text = s.lstrip(_SPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for char in text:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of the integer *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return f"{n:d}"


def int_sqrt(nb: int) -> int:
    """Return the largest ``m`` with ``m < nb // m``.

    Equivalently, the largest ``m`` with ``m * (m + 1) <= nb``. This is
    one less than the exact root for perfect squares. Values of *nb* not
    above zero give 0.
    """
    if nb <= 0:
        return 0
    root = math.isqrt(nb)
    while root > 0 and root * (root + 1) > nb:
        root -= 1
    return root