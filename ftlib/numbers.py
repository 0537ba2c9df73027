"""Integer parsing and formatting with C ``int``/``unsigned int`` semantics."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MASK = 2**32 - 1

_WHITESPACE = frozenset(chr(c) for c in (9, 10, 11, 12, 13, 32))


def _wrap_int32(value: int) -> int:
    value &= UINT_MASK
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer; stops at the first non-digit.

    Leading whitespace and one optional sign are accepted. Text without
    digits yields 0. Values wrap around like a 32-bit signed int.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)


def nbdigits_base(nbr: int, base_len: int) -> int:
    """Return how many digits ``nbr`` takes when written in base ``base_len``."""
    if base_len < 2:
        raise ValueError(f"base length must be at least 2, got {base_len}")
    if nbr < 0:
        raise ValueError(f"number must not be negative, got {nbr}")
    count = 1
    while nbr >= base_len:
        nbr //= base_len
        count += 1
    return count


def uitoa_base(nbr: int, base: str) -> str:
    """Write ``nbr`` as an unsigned 32-bit value using the digits in ``base``."""
    base_size = len(base)
    if base_size < 2:
        raise ValueError(f"base must have at least 2 digits, got {base!r}")
    nbr &= UINT_MASK
    digits = []
    for _ in range(nbdigits_base(nbr, base_size)):
        nbr, rest = divmod(nbr, base_size)
        digits.append(base[rest])
    return "".join(reversed(digits))