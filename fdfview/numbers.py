"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \n\t\r\v\f"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and a single sign are accepted, and parsing stops at
    the first non-digit. A value outside the 32-bit signed range gives 0,
    as does text with no digits.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    limit = INT_MAX if sign == 1 else -INT_MIN
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        if value > limit:
            return 0
    return sign * value


def itoa(n: int) -> str:
    """Render an integer as decimal text, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)