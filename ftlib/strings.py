"""String helpers with the semantics of their C counterparts.

Positions are returned as indices rather than pointers: a search that
finds nothing returns ``None``. Functions that wrote into a caller's
buffer return the resulting string instead. The end of a string behaves
like the C terminator, so searching for ``"\\0"`` finds ``len(s)``.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

CharLike = Union[int, str]
_Seq = TypeVar("_Seq", bound=MutableSequence)


def _char(c: CharLike) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, which the
    caller compares with ``size`` to detect truncation.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` so that the result fits in ``size - 1`` characters.

    Returns the resulting text and the length the concatenation tried to
    create. When ``dst`` already fills ``size``, it is returned unchanged
    together with ``size + len(src)``.
    """
    _check_size("size", size)
    if size == 0 or len(dst) > size - 1:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        index = s.find(ch)
        return len(s) if index == -1 else index
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    _check_size("n", n)
    for i in range(n):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the difference of the first mismatch, or 0."""
    i = 0
    while True:
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b or a == 0:
            return a - b
        i += 1


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` inside the first ``length`` characters of ``big``.

    Returns the index of the match, 0 for an empty ``little``, or None.
    """
    _check_size("length", length)
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index == -1 else index


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``."""
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: Union[str, _Seq], f: Callable[[int, MutableSequence], None]) -> Union[str, _Seq]:
    """Call ``f(index, chars)`` for every position, letting ``f`` change ``chars[index]``.

    A mutable sequence is changed in place and returned. A ``str`` is
    worked on as a list of characters and the resulting string returned.
    """
    if isinstance(s, str):
        chars = list(s)
        for i in range(len(chars)):
            f(i, chars)
        return "".join(chars)
    for i in range(len(s)):
        f(i, s)
    return s