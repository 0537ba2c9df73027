"""Formatted output with a small, fixed set of conversions.

Supported conversions:

* ``%c`` a character, given as a one-character str or a byte code
* ``%s`` a string; None prints as ``(null)``
* ``%p`` a pointer-like value in hex; None or 0 prints as ``(nil)``
* ``%d`` and ``%i`` a signed 32-bit integer
* ``%u`` an unsigned 32-bit integer
* ``%x`` and ``%X`` an unsigned 32-bit integer in lower or upper hex

Any other character after ``%`` is printed as itself, so ``%%`` gives
``%``. A run of digits and ``-`` right after ``%`` is read as a field
width. Only ``%d`` and ``%i`` use it: a positive width pads with spaces
on the left, a negative one pads on the right.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator, List, Optional, TextIO

from ftlib.numbers import atoi, itoa, uitoa_base

_BASE10 = "0123456789"
_BASE16 = "0123456789abcdef"
_BASE16_UPPER = "0123456789ABCDEF"
_POINTER_MASK = 2**64 - 1

_SPEC = re.compile(r"%([0-9-]*)(.?)", re.DOTALL)


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return chr(value & 0xFF)
    raise TypeError(f"%c expects an int or a one-character str, got {type(value).__name__}")


def _unsigned(value: Any, base: str) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return uitoa_base(value, base)


def _signed(value: Any, width: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%d expects an int, got {type(value).__name__}")
    text = itoa(value)
    if width > 0:
        return text.rjust(width)
    if width < 0:
        return text.ljust(-width)
    return text


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    if not address:
        return "(nil)"
    return "0x" + format(address, "x")


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _convert(conversion: str, width: int, args: Iterator[Any]) -> str:
    if conversion == "c":
        return _char(_next_arg(args, conversion))
    if conversion in ("d", "i"):
        return _signed(_next_arg(args, conversion), width)
    if conversion == "u":
        return _unsigned(_next_arg(args, conversion), _BASE10)
    if conversion == "p":
        return _pointer(_next_arg(args, conversion))
    if conversion == "s":
        return _string(_next_arg(args, conversion))
    if conversion == "x":
        return _unsigned(_next_arg(args, conversion), _BASE16)
    if conversion == "X":
        return _unsigned(_next_arg(args, conversion), _BASE16_UPPER)
    return conversion


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order."""
    remaining = iter(args)
    pieces: List[str] = []
    position = 0
    for match in _SPEC.finditer(fmt):
        pieces.append(fmt[position:match.start()])
        width_text, conversion = match.groups()
        if not conversion:
            raise ValueError("format string ends in an incomplete conversion")
        width = atoi(width_text) if width_text else 0
        pieces.append(_convert(conversion, width, remaining))
        position = match.end()
    pieces.append(fmt[position:])
    return "".join(pieces)


def dprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream`` and return its length."""
    text = format_string(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    return dprintf(_stdout(), fmt, *args)


def _stdout() -> TextIO:
    stream: Optional[TextIO] = sys.stdout
    if stream is None:
        raise OSError("standard output is not available")
    return stream