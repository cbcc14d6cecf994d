"""Integer puzzles: palindromes, digit reversal, Roman numerals and parsing."""

from __future__ import annotations

import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_ATOI_PATTERN = re.compile(r" *([+-]?)([0-9]*)")


def is_palindrome(x: int) -> bool:
    """Whether the decimal digits of x read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def reverse_int(x: int) -> int:
    """Reverse the decimal digits of x, keeping its sign; 0 if the result leaves 32 bits."""
    reversed_abs = int(str(abs(x))[::-1])
    if reversed_abs > INT32_MAX:
        return 0
    return reversed_abs if x >= 0 else -reversed_abs


def int_to_roman(num: int) -> str:
    """Write num in Roman numerals; numbers below 1 give an empty string."""
    if num <= 0:
        return ""
    parts = []
    for value, symbol in _ROMAN_TABLE:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Read a Roman numeral; ValueError on characters that are not numerals."""
    try:
        values = [_ROMAN_VALUES[char] for char in s]
    except KeyError as error:
        raise ValueError(f"not a Roman numeral: {error.args[0]!r}") from None
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def my_atoi(text: str) -> int:
    """Parse a leading signed integer after spaces, clamped to 32 bits; 0 if none."""
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return max(INT32_MIN, min(INT32_MAX, value))