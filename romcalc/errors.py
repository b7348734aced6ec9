"""Error types raised by romcalc.

Every failure aborts the whole calculate() call; nothing is recovered
internally. All kinds share CalculatorError so callers can catch one base.
"""


class CalculatorError(ValueError):
    """Base class for every calculator failure."""


class MalformedTokenError(CalculatorError):
    """A substring is neither an operator nor a parseable numeral."""


class InvalidNumeralError(MalformedTokenError):
    """A Roman numeral does not match the accepted grammar."""


class OutOfRangeError(CalculatorError):
    """A numeral or result falls outside the supported range."""


class UnexpectedTokenError(CalculatorError):
    """A token the converter has no priority for."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Postfix evaluation divided by zero."""


class MalformedExpressionError(CalculatorError):
    """Operand and operator counts do not balance."""


class NonPositiveResultError(CalculatorError):
    """A Roman-notation result is below 1 and has no Roman form."""
