"""Minimal printf-style formatting and writers for text streams."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_UINT_MASK = 0xFFFFFFFF


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return _NULL_STRING if value is None else str(value)
    if spec == "p":
        return _NULL_POINTER if not value else f"0x{value:x}"
    if spec in "diu":
        return f"{int(value):d}"
    if spec == "x":
        return f"{int(value) & _UINT_MASK:x}"
    return f"{int(value) & _UINT_MASK:X}"


def format_printf(fmt: str, *args: Any) -> str:
    """Render *fmt* with the conversions ``%c %s %p %d %i %u %x %X %%``.

    ``%s`` of None renders ``(null)``; ``%p`` of None or 0 renders ``(nil)``.
    ``%x`` and ``%X`` treat the value as a 32-bit unsigned integer. Any
    other conversion renders nothing and uses no argument. A format that
    ends in a lone ``%`` raises ValueError.
    """
    pieces: list[str] = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        pieces.append(_convert(spec, arg_iter))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character *c* to *stream*."""
    stream.write(_as_char(c))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write *s* to *stream*."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write *s* followed by a newline to *stream*."""
    stream.write(s + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of *n* to *stream*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    stream.write(f"{n:d}")


def _stream_or_stdout(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream