# =============================================================================
# core/expression/postfix.py - Infix to Postfix Conversion
# =============================================================================
# Shunting-yard: reorders infix tokens into Reverse Polish order so that a
# single stack pass evaluates them with the usual precedence rules.
#
#   2 + 3 * 4      ->  2 3 4 * +
#   ( 2 + 3 ) * 4  ->  2 3 + 4 *
#   8 - 3 - 2      ->  8 3 - 2 -     (left-associative)
# =============================================================================

from __future__ import annotations

from core.expression.errors import ExpressionError
from core.expression.types import Symbol, Token


def to_postfix(tokens: list[Token]) -> list[Token]:
    """
    Convert an infix token sequence to postfix order.

    Parentheses are consumed and never appear in the output.

    Raises:
        ExpressionError: UNBALANCED_PARENTHESES on a ")" with no open "("
            or a "(" that is never closed
    """
    output: list[Token] = []
    stack: list[Symbol] = []

    for token in tokens:
        if token.is_number:
            output.append(token)
            continue

        symbol = token.symbol
        if symbol is Symbol.LPAREN:
            stack.append(symbol)

        elif symbol is Symbol.RPAREN:
            while stack and stack[-1] is not Symbol.LPAREN:
                output.append(Token.of(stack.pop()))
            if not stack:
                raise ExpressionError.unbalanced_parentheses()
            stack.pop()

        else:
            # Equal priority pops first: left-to-right for + - * /
            while (
                stack
                and stack[-1] is not Symbol.LPAREN
                and stack[-1].priority >= symbol.priority
            ):
                output.append(Token.of(stack.pop()))
            stack.append(symbol)

    while stack:
        symbol = stack.pop()
        if symbol is Symbol.LPAREN:
            raise ExpressionError.unbalanced_parentheses()
        output.append(Token.of(symbol))

    return output
