"""romcalc — integer calculator for Arabic or Roman numeral expressions.

Tokenizes an infix expression, reorders it to postfix with the
shunting-yard algorithm, evaluates it on an operand stack and formats the
result back in the expression's own notation.

Usage:
    python -m romcalc eval "2 + 3 * 2"        # 8
    python -m romcalc eval "V + I"            # VI
    python -m romcalc rpn "10 - 3 - 2"        # 10 3 - 2 -
    python -m romcalc roman IX                # 9
    python -m romcalc batch expressions.txt   # Table of results
"""

from romcalc.calculator import calculate, explain

__all__ = ["calculate", "explain"]
