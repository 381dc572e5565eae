# =============================================================================
# core/expression/tokenizer.py - Expression Tokenizer
# =============================================================================
# Turns raw expression text into an ordered list of tokens.
#
# Unary minus is normalised into subtraction from an implicit zero, but only
# at the very start of the expression and directly after "(":
#   "-5"     -> "0-5"
#   "(-5)"   -> "(0-5)"
# A minus anywhere else (e.g. "2*-3") is left as a binary operator.
# =============================================================================

from __future__ import annotations

from core.expression.errors import ExpressionError
from core.expression.types import SYMBOL_CHARS, Token


def strip_whitespace(expression: str) -> str:
    """Remove every whitespace character, not just spaces."""
    return "".join(ch for ch in expression if not ch.isspace())


def normalize_unary_minus(expression: str) -> str:
    if expression.startswith("-"):
        expression = "0" + expression
    return expression.replace("(-", "(0-")


def _is_number_char(ch: str) -> bool:
    return "0" <= ch <= "9" or ch == "."


def tokenize(expression: str) -> list[Token]:
    """
    Split an infix expression into number and symbol tokens.

    Args:
        expression: Raw expression text, whitespace allowed anywhere

    Returns:
        Tokens in source order

    Raises:
        ExpressionError: EMPTY_EXPRESSION, INVALID_NUMBER or
            UNSUPPORTED_CHARACTER
    """
    expr = strip_whitespace(expression)
    if not expr:
        raise ExpressionError.empty()

    expr = normalize_unary_minus(expr)

    tokens: list[Token] = []
    pending: list[str] = []

    for ch in expr:
        if _is_number_char(ch):
            pending.append(ch)
        elif ch in SYMBOL_CHARS:
            if pending:
                tokens.append(Token.number("".join(pending)))
                pending.clear()
            tokens.append(Token.of(ch))
        else:
            raise ExpressionError.unsupported_character(ch)

    if pending:
        tokens.append(Token.number("".join(pending)))

    return tokens
