# =============================================================================
# core/expression/evaluator.py - Postfix Evaluator
# =============================================================================
# Stack machine over a postfix token sequence. Operands are popped as b
# (most recent) then a, and combined as "a op b" so that subtraction and
# division keep their source operand order.
#
# Every value pushed is finite; a step that overflows a double is rejected.
# =============================================================================

from __future__ import annotations

import math
import operator
from typing import Callable

from core.expression.errors import ExpressionError
from core.expression.types import Symbol, Token

_BINARY_OPS: dict[Symbol, Callable[[float, float], float]] = {
    Symbol.PLUS: operator.add,
    Symbol.MINUS: operator.sub,
    Symbol.STAR: operator.mul,
    Symbol.SLASH: operator.truediv,
}


def evaluate(postfix: list[Token]) -> float:
    """
    Compute the value of a postfix token sequence.

    Raises:
        ExpressionError: MALFORMED_EXPRESSION when an operator lacks operands,
            a parenthesis is present, or the stack does not end with exactly
            one value; DIVISION_BY_ZERO when dividing by exactly zero;
            NUMERIC_OVERFLOW when any step leaves the range of a double
    """
    stack: list[float] = []

    for token in postfix:
        if token.is_number:
            stack.append(token.value)
            continue

        if len(stack) < 2 or token.symbol.is_paren:
            raise ExpressionError.malformed()

        b = stack.pop()
        a = stack.pop()

        if token.symbol is Symbol.SLASH and b == 0:
            raise ExpressionError.division_by_zero()

        try:
            value = _BINARY_OPS[token.symbol](a, b)
        except OverflowError:
            raise ExpressionError.overflow() from None
        if not math.isfinite(value):
            raise ExpressionError.overflow()

        stack.append(value)

    if len(stack) != 1:
        raise ExpressionError.malformed()

    return stack[0]
