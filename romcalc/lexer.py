"""Lexer: split an expression string into NumberToken / OperatorToken.

Whitespace separates tokens and is dropped. Each of + - * / is always a
one-character operator token. Every other run of characters is a numeral
parsed by the codec for the expression's notation.
"""

from __future__ import annotations

import re

from romcalc.errors import MalformedTokenError, OutOfRangeError
from romcalc.models import Notation, NumberToken, OperatorKind, OperatorToken, Token
from romcalc.roman import MAX_OPERAND, roman_to_int

# Capturing group keeps the operator characters in re.split() output.
_SPLIT_RE = re.compile(r"(\s+|[-+*/])")
_ARABIC_RE = re.compile(r"[0-9]+")
_DIGIT_RE = re.compile(r"[0-9]")

_OPERATOR_CHARS = frozenset(kind.value for kind in OperatorKind)


def detect_notation(expression: str) -> Notation:
    """Arabic if the expression contains any decimal digit, Roman otherwise."""
    if _DIGIT_RE.search(expression):
        return Notation.ARABIC
    return Notation.ROMAN


def arabic_to_int(numeral: str) -> int:
    """Parse a plain base-10 numeral, 0..MAX_OPERAND."""
    if not _ARABIC_RE.fullmatch(numeral):
        raise MalformedTokenError(f"Unexpected token: {numeral!r}")
    value = int(numeral)
    if value > MAX_OPERAND:
        raise OutOfRangeError(
            f"Calculator accepts only numbers no more than {MAX_OPERAND}, got {value}"
        )
    return value


def tokenize(expression: str, notation: Notation) -> list[Token]:
    """Split an expression into tokens.

    Args:
        expression: Infix expression, e.g. "2 + 3 * 2" or "V + I".
        notation: Codec used for every numeral in the expression.

    Returns:
        Tokens in source order.

    Raises:
        MalformedTokenError: A numeral the selected codec cannot parse
            (InvalidNumeralError for Roman input).
        OutOfRangeError: A numeral above MAX_OPERAND.
    """
    parse = roman_to_int if notation == Notation.ROMAN else arabic_to_int

    tokens: list[Token] = []
    for part in _SPLIT_RE.split(expression):
        if not part or part.isspace():
            continue
        if part in _OPERATOR_CHARS:
            tokens.append(OperatorToken(OperatorKind(part)))
            continue
        tokens.append(NumberToken(parse(part)))
    return tokens
