"""Splitting strings on a delimiter character, optionally honouring quotes."""

from __future__ import annotations

from typing import List, Optional, Union

CharLike = Union[int, str]

_QUOTES = ("'", '"')


def _delimiter(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single delimiter character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def split(s: Optional[str], c: CharLike) -> List[str]:
    """Return the non-empty runs of ``s`` separated by the character ``c``.

    Consecutive, leading and trailing delimiters produce no empty words.
    A ``None`` string yields an empty list.
    """
    delimiter = _delimiter(c)
    if not s:
        return []
    return [word for word in s.split(delimiter) if word]


def _count_quoted_words(s: str, delimiter: str) -> int:
    quote = ""
    in_word = False
    count = 0
    for ch in s:
        if ch in _QUOTES:
            if quote == ch:
                quote = ""
            elif not quote:
                quote = ch
        if quote or ch != delimiter:
            if not in_word:
                in_word = True
                count += 1
        else:
            in_word = False
    return count


def split_quotes(s: Optional[str], c: CharLike) -> List[str]:
    """Split ``s`` on ``c`` while keeping quoted sections together.

    A word that starts with a single or double quote runs up to the
    matching quote, which is dropped along with the opening one; the
    delimiter inside it is kept. An unterminated quote runs to the end
    of the string. Quotes in the middle of a word stay in the word.
    """
    delimiter = _delimiter(c)
    if not s:
        return []
    length = len(s)
    words: List[str] = []
    start = 0
    for _ in range(_count_quoted_words(s, delimiter)):
        stop_char = delimiter
        while start < length and s[start] == delimiter:
            start += 1
        if start < length and s[start] in _QUOTES:
            stop_char = s[start]
            start += 1
        if start >= length:
            words.append("")
            start = length + 1
            continue
        end = s.find(stop_char, start)
        if end == -1:
            end = length
        words.append(s[start:end])
        start = end + 1
    return words