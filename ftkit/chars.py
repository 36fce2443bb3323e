"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a
one-character string. Classification is strictly ASCII: characters
outside the 7-bit range are never letters or digits here.
"""

from __future__ import annotations

from typing import overload


def _code(c: int | str) -> int:
    """Return the integer code for *c*, a code or one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return c


def _in(code: int, low: str, high: str) -> bool:
    return ord(low) <= code <= ord(high)


def is_digit(c: int | str) -> bool:
    """True if *c* is an ASCII decimal digit."""
    return _in(_code(c), "0", "9")


def is_alpha(c: int | str) -> bool:
    """True if *c* is an ASCII letter."""
    code = _code(c)
    return _in(code, "a", "z") or _in(code, "A", "Z")


def is_alnum(c: int | str) -> bool:
    """True if *c* is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True if *c* lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True if *c* is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


@overload
def to_lower(c: str) -> str: ...


@overload
def to_lower(c: int) -> int: ...


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _in(code, "A", "Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code