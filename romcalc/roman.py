"""Roman numeral codec.

Parsing accepts the compact grammar X*(IX|IV|V?I{0,3}) and values up to
MAX_OPERAND. Formatting is table-driven per decimal digit and covers
0..MAX_ROMAN.
"""

from __future__ import annotations

import re

from romcalc.errors import InvalidNumeralError, OutOfRangeError

# Largest operand the calculator accepts, in either notation.
MAX_OPERAND = 10
# Largest value the digit tables can express.
MAX_ROMAN = 3999

_NUMERAL_RE = re.compile(r"X*(IX|IV|V?I{0,3})")

_VALUES: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_THOUSANDS = ("", "M", "MM", "MMM")


def roman_to_int(numeral: str) -> int:
    """Parse a Roman numeral into an integer.

    Each symbol is subtracted when it is smaller than its right neighbour
    and added otherwise.

    Args:
        numeral: Roman numeral such as "IX" or "VII".

    Returns:
        The integer value, 1..MAX_OPERAND.

    Raises:
        InvalidNumeralError: Empty input or not matching the grammar.
        OutOfRangeError: Value above MAX_OPERAND (e.g. "XI").
    """
    if not numeral or not _NUMERAL_RE.fullmatch(numeral):
        raise InvalidNumeralError(f"Invalid Roman numeral: {numeral!r}")

    total = 0
    for i, symbol in enumerate(numeral):
        value = _VALUES[symbol]
        if i + 1 < len(numeral) and value < _VALUES[numeral[i + 1]]:
            total -= value
        else:
            total += value

    if total > MAX_OPERAND:
        raise OutOfRangeError(
            f"Calculator accepts only numbers no more than {MAX_OPERAND}, got {numeral} ({total})"
        )
    return total


def int_to_roman(n: int) -> str:
    """Format an integer in 0..MAX_ROMAN as a Roman numeral ("" for 0)."""
    if n < 0 or n > MAX_ROMAN:
        raise OutOfRangeError(f"Cannot express {n} as a Roman numeral (0..{MAX_ROMAN})")
    return (
        _THOUSANDS[n // 1000]
        + _HUNDREDS[(n % 1000) // 100]
        + _TENS[(n % 100) // 10]
        + _ONES[n % 10]
    )
