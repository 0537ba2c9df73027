"""Writing characters, strings and numbers to text streams.

Every function writes to ``stream``, standard output by default, and
returns the number of characters written.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftlib.numbers import INT_MAX, INT_MIN, itoa, uitoa_base

CharLike = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> int:
    """Write a single character, given as a one-character str or a byte code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _target(stream).write(ch)
    return 1


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s``; None writes nothing."""
    if s is None:
        return 0
    _target(stream).write(s)
    return len(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s`` followed by a newline."""
    written = put_str(s, stream)
    _target(stream).write("\n")
    return written + 1


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write a 32-bit signed integer in decimal."""
    return put_str(itoa(n), stream)


def put_nbr_base(nb: int, base: str, stream: Optional[TextIO] = None) -> int:
    """Write a 32-bit signed integer using the digits in ``base``."""
    if not INT_MIN <= nb <= INT_MAX:
        raise OverflowError(f"{nb} does not fit in a 32-bit signed int")
    sign = "-" if nb < 0 else ""
    return put_str(sign + uitoa_base(abs(nb), base), stream)