"""Tests for notation detection and tokenization."""

import pytest

from romcalc.errors import InvalidNumeralError, MalformedTokenError, OutOfRangeError
from romcalc.lexer import arabic_to_int, detect_notation, tokenize
from romcalc.models import Notation, NumberToken, OperatorKind, OperatorToken

PLUS = OperatorToken(OperatorKind.PLUS)
MINUS = OperatorToken(OperatorKind.MINUS)
TIMES = OperatorToken(OperatorKind.MULTIPLY)
DIVIDE = OperatorToken(OperatorKind.DIVIDE)


# --- Notation detection ---

@pytest.mark.parametrize("expression,expected", [
    ("1 + 2", Notation.ARABIC),
    ("V + I", Notation.ROMAN),
    ("V + 1", Notation.ARABIC),
    ("IX0", Notation.ARABIC),
    ("", Notation.ROMAN),
])
def test_detect_notation(expression, expected):
    assert detect_notation(expression) == expected


# --- Arabic tokens ---

def test_tokenize_arabic():
    tokens = tokenize("2 + 3 * 4", Notation.ARABIC)
    assert tokens == [NumberToken(2), PLUS, NumberToken(3), TIMES, NumberToken(4)]


def test_tokenize_without_spaces():
    tokens = tokenize("10-3/2", Notation.ARABIC)
    assert tokens == [NumberToken(10), MINUS, NumberToken(3), DIVIDE, NumberToken(2)]


def test_tokenize_mixed_whitespace():
    tokens = tokenize("  7\t*\n 2  ", Notation.ARABIC)
    assert tokens == [NumberToken(7), TIMES, NumberToken(2)]


def test_tokenize_empty():
    assert tokenize("   ", Notation.ARABIC) == []


def test_operators_are_never_unary():
    """A leading minus is its own operator token, not a sign."""
    assert tokenize("-5", Notation.ARABIC) == [MINUS, NumberToken(5)]


def test_tokenize_zero_is_accepted():
    assert tokenize("5 / 0", Notation.ARABIC) == [NumberToken(5), DIVIDE, NumberToken(0)]


@pytest.mark.parametrize("expression", ["5a + 1", "2.5 * 2", "1 ^ 2", "(1) + 2"])
def test_tokenize_arabic_malformed(expression):
    with pytest.raises(MalformedTokenError):
        tokenize(expression, Notation.ARABIC)


def test_tokenize_arabic_above_ten():
    with pytest.raises(OutOfRangeError):
        tokenize("11 + 1", Notation.ARABIC)


def test_arabic_to_int():
    assert arabic_to_int("10") == 10
    assert arabic_to_int("007") == 7


# --- Roman tokens ---

def test_tokenize_roman():
    tokens = tokenize("IX - IV*II", Notation.ROMAN)
    assert tokens == [NumberToken(9), MINUS, NumberToken(4), TIMES, NumberToken(2)]


def test_tokenize_roman_invalid():
    with pytest.raises(InvalidNumeralError):
        tokenize("V + IIII", Notation.ROMAN)


def test_tokenize_roman_above_ten():
    with pytest.raises(OutOfRangeError):
        tokenize("XI + I", Notation.ROMAN)
