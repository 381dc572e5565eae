# =============================================================================
# core/expression - Arithmetic Expression Pipeline
# =============================================================================
# Evaluates infix arithmetic (+ - * /, parentheses, unary minus at the start
# or after "(", decimal literals) in three strictly sequential stages:
#
#   text -> tokenize() -> to_postfix() -> evaluate() -> float
#
# The first failing stage raises ExpressionError and nothing else runs.
# No state survives between calls, so calculate() is safe to call from any
# number of threads or requests at once.
#
# Usage:
#   from core.expression import calculate, ExpressionError
#
#   calculate("(2 + 3) * 4")   # 20.0
# =============================================================================

import logging

from core.expression.errors import ErrorKind, ExpressionError
from core.expression.evaluator import evaluate
from core.expression.postfix import to_postfix
from core.expression.tokenizer import tokenize
from core.expression.types import Symbol, Token, TokenKind, render

logger = logging.getLogger(__name__)


def calculate(expression: str) -> float:
    """
    Evaluate an arithmetic expression.

    Raises:
        ExpressionError: If the expression is not valid
    """
    tokens = tokenize(expression)
    postfix = to_postfix(tokens)
    logger.debug(f"Postfix: {render(postfix)}")
    return evaluate(postfix)


__all__ = [
    "calculate",
    "tokenize",
    "to_postfix",
    "evaluate",
    "render",
    "ErrorKind",
    "ExpressionError",
    "Symbol",
    "Token",
    "TokenKind",
]
