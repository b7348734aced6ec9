"""Infix → postfix conversion (shunting-yard) and postfix evaluation.

Operators are binary and left-associative; * and / bind tighter than + and -.

Example:
    2 + 3 * 2   →   2 3 2 * +   →   8
"""

from __future__ import annotations

from typing import Sequence

from romcalc.errors import DivisionByZeroError, MalformedExpressionError, UnexpectedTokenError
from romcalc.models import NumberToken, OperatorKind, OperatorToken, Token

PRIORITY: dict[OperatorKind, int] = {
    OperatorKind.PLUS: 1,
    OperatorKind.MINUS: 1,
    OperatorKind.MULTIPLY: 2,
    OperatorKind.DIVIDE: 2,
}


def operator_priority(token: OperatorToken) -> int:
    """Binding strength of an operator; higher binds tighter."""
    priority = PRIORITY.get(token.kind)
    if priority is None:
        raise UnexpectedTokenError(f"Unexpected token: {token!r}")
    return priority


def to_postfix(tokens: Sequence[Token]) -> list[Token]:
    """Reorder infix tokens into postfix (Reverse Polish) order.

    Before pushing an operator, every stacked operator of greater or equal
    priority moves to the output, so equal priorities resolve left to right.
    """
    output: list[Token] = []
    stack: list[OperatorToken] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            output.append(token)
        elif isinstance(token, OperatorToken):
            priority = operator_priority(token)
            while stack and operator_priority(stack[-1]) >= priority:
                output.append(stack.pop())
            stack.append(token)
        else:
            raise UnexpectedTokenError(f"Unexpected token: {token!r}")

    # Remaining operators leave in pop order
    output.extend(reversed(stack))
    return output


def _truncating_div(lhs: int, rhs: int) -> int:
    """Integer division rounding toward zero (-7 / 2 == -3)."""
    if rhs == 0:
        raise DivisionByZeroError(f"Division by zero: {lhs} / {rhs}")
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _apply(kind: OperatorKind, lhs: int, rhs: int) -> int:
    if kind == OperatorKind.PLUS:
        return lhs + rhs
    if kind == OperatorKind.MINUS:
        return lhs - rhs
    if kind == OperatorKind.MULTIPLY:
        return lhs * rhs
    if kind == OperatorKind.DIVIDE:
        return _truncating_div(lhs, rhs)
    raise UnexpectedTokenError(f"Unexpected operator: {kind!r}")


def evaluate(postfix: Sequence[Token]) -> int:
    """Evaluate a postfix token sequence with an operand stack.

    Raises:
        DivisionByZeroError: A / with a zero right-hand side.
        MalformedExpressionError: Too many operators (stack underflow),
            too many operands, or no tokens at all.
    """
    stack: list[int] = []

    for token in postfix:
        if isinstance(token, NumberToken):
            stack.append(token.value)
            continue
        if not isinstance(token, OperatorToken):
            raise UnexpectedTokenError(f"Unexpected token: {token!r}")
        if len(stack) < 2:
            raise MalformedExpressionError(f"Insufficient operands for {token.kind.value!r}")
        rhs = stack.pop()
        lhs = stack.pop()
        stack.append(_apply(token.kind, lhs, rhs))

    if not stack:
        raise MalformedExpressionError("Empty expression")
    if len(stack) > 1:
        raise MalformedExpressionError(
            f"Stack has {len(stack)} values after evaluation, expected 1"
        )
    return stack[0]
