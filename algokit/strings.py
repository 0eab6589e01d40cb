"""String parsing helpers: C-style integer parsing and Roman numerals."""

from itertools import takewhile, zip_longest

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DIGITS = frozenset("0123456789")

_ROMAN = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def my_atoi(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to 32-bit range.

    Only spaces are skipped at the start; parsing stops at the first non-digit.
    """
    text = s.lstrip(" ")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    result = 0
    for char in takewhile(lambda c: c in _DIGITS, text):
        result = result * 10 + int(char)
        if result > INT_MAX:
            return INT_MAX if sign == 1 else INT_MIN
    return sign * result


def roman_value(symbol: str) -> int:
    """Return the value of one Roman numeral symbol, or 0 if it is not one."""
    return _ROMAN.get(symbol, 0)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    values = [roman_value(char) for char in s]
    return sum(
        -current if current < following else current
        for current, following in zip_longest(values, values[1:], fillvalue=0)
    )