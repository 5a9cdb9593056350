"""Conversions between C ``int`` values and decimal strings."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_SPACES = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way atoi(3) does.

    Leading whitespace is skipped, one sign is accepted, and parsing stops
    at the first non-digit. Values that overflow a 32-bit int saturate to
    INT_MAX or INT_MIN.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and text[pos] in _DIGITS:
        value = value * 10 + (ord(text[pos]) - ord("0"))
        if value > INT_MAX:
            return INT_MAX if sign == 1 else INT_MIN
        pos += 1
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit int."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)