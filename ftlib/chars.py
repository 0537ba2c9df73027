"""Character classification and case conversion for the ASCII range.

Every function accepts either an integer code or a one-character string.
The predicates return ``bool``. The case converters return a value of the
same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """Return True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 122 and not 91 <= code <= 96


def isdigit(c: CharLike) -> bool:
    """Return True for ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def isalnum(c: CharLike) -> bool:
    """Return True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """Return True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """Return True for printable ASCII characters, space included."""
    return 32 <= _code(c) < 127


def toupper(c: CharLike) -> CharLike:
    """Convert an ASCII lowercase letter to uppercase; leave others alone."""
    code = _code(c)
    if 97 <= code <= 122:
        return _same_kind(c, code - 32)
    return c


def tolower(c: CharLike) -> CharLike:
    """Convert an ASCII uppercase letter to lowercase; leave others alone."""
    code = _code(c)
    if 65 <= code <= 90:
        return _same_kind(c, code + 32)
    return c