"""Data models for the romcalc expression calculator.

Notation and OperatorKind enums, NumberToken / OperatorToken, Evaluation:
all the typed structures that flow through lexer → postfix → calculator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Union

from romcalc.roman import MAX_ROMAN, int_to_roman


class Notation(str, Enum):
    """Numeral system used by one expression."""

    ARABIC = "arabic"
    ROMAN = "roman"


class OperatorKind(str, Enum):
    """Supported binary operators, keyed by their source character."""

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


@dataclass(frozen=True)
class NumberToken:
    """An integer operand."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OperatorToken:
    """A binary operator."""

    kind: OperatorKind

    def __str__(self) -> str:
        return self.kind.value


Token = Union[NumberToken, OperatorToken]


def render_tokens(tokens: Iterable[Token], notation: Notation = Notation.ARABIC) -> str:
    """Render tokens space-separated, numbers shown in the given notation.

    Roman rendering is only attempted for positive numbers; anything the
    codec cannot express falls back to the decimal form.
    """
    parts = []
    for token in tokens:
        if isinstance(token, NumberToken) and notation == Notation.ROMAN and 0 < token.value <= MAX_ROMAN:
            parts.append(int_to_roman(token.value))
        else:
            parts.append(str(token))
    return " ".join(parts)


@dataclass
class Evaluation:
    """Complete record of a single calculate() call."""

    expression: str
    notation: Notation
    tokens: list[Token] = field(default_factory=list)
    postfix: list[Token] = field(default_factory=list)
    value: int = 0
    result: str = ""

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "expression": self.expression,
            "notation": self.notation.value,
            "tokens": render_tokens(self.tokens, self.notation),
            "postfix": render_tokens(self.postfix, self.notation),
            "value": self.value,
            "result": self.result,
        }
