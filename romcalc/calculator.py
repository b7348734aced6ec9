"""Calculator facade — detect notation → tokenize → postfix → evaluate → format.

Notation is derived fresh from each input and passed explicitly through
every stage; nothing is kept between calls, so calculate() is reentrant.
"""

from __future__ import annotations

from romcalc.errors import NonPositiveResultError
from romcalc.lexer import detect_notation, tokenize
from romcalc.models import Evaluation, Notation
from romcalc.postfix import evaluate, to_postfix
from romcalc.roman import int_to_roman


def format_result(value: int, notation: Notation) -> str:
    """Format an evaluated integer in the expression's notation.

    Raises:
        NonPositiveResultError: Roman notation and value < 1.
        OutOfRangeError: Roman notation and value above MAX_ROMAN.
    """
    if notation == Notation.ROMAN:
        if value < 1:
            raise NonPositiveResultError(f"Can't calculate non-positive roman values: {value}")
        return int_to_roman(value)
    return str(value)


def explain(expression: str) -> Evaluation:
    """Run the full pipeline and keep every intermediate stage."""
    notation = detect_notation(expression)
    tokens = tokenize(expression, notation)
    postfix = to_postfix(tokens)
    value = evaluate(postfix)
    return Evaluation(
        expression=expression,
        notation=notation,
        tokens=tokens,
        postfix=postfix,
        value=value,
        result=format_result(value, notation),
    )


def calculate(expression: str) -> str:
    """Evaluate an all-Arabic or all-Roman expression, e.g. "V + I" → "VI"."""
    return explain(expression).result
