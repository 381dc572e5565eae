# =============================================================================
# core/expression/types.py - Token Types
# =============================================================================
# A token is either a numeric literal or one of six symbols. The kind tag
# lives on the token itself so there is no separate "is number" flag.
# =============================================================================

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from core.expression.errors import ExpressionError


# =============================================================================
# Enums
# =============================================================================

class Symbol(str, Enum):
    """Operator and parenthesis symbols recognised by the tokenizer."""
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"

    @property
    def priority(self) -> int:
        """Binding strength; higher binds tighter. Parens rank 0."""
        return _PRIORITY.get(self, 0)

    @property
    def is_paren(self) -> bool:
        return self in (Symbol.LPAREN, Symbol.RPAREN)


_PRIORITY = {
    Symbol.PLUS: 1,
    Symbol.MINUS: 1,
    Symbol.STAR: 2,
    Symbol.SLASH: 2,
}

SYMBOL_CHARS = frozenset(s.value for s in Symbol)


class TokenKind(str, Enum):
    NUMBER = "number"
    SYMBOL = "symbol"


# =============================================================================
# Token
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit of an arithmetic expression.

    Examples:
        Token.number("3.5")   # kind=NUMBER, text="3.5", value=3.5
        Token.of(Symbol.STAR) # kind=SYMBOL, symbol=Symbol.STAR
    """
    kind: TokenKind
    symbol: Symbol | None = None
    text: str | None = None
    value: float | None = None

    @classmethod
    def number(cls, literal: str) -> "Token":
        """Build a number token, rejecting literals that are not base-10 floats."""
        # float() alone would also take "inf", "1e3" and "1_0"
        if not literal or literal.strip("0123456789."):
            raise ExpressionError.invalid_number(literal)
        try:
            value = float(literal)
        except ValueError:
            raise ExpressionError.invalid_number(literal) from None
        # Literals too large for a double parse to inf
        if not math.isfinite(value):
            raise ExpressionError.invalid_number(literal)
        return cls(kind=TokenKind.NUMBER, text=literal, value=value)

    @classmethod
    def of(cls, symbol: Symbol | str) -> "Token":
        return cls(kind=TokenKind.SYMBOL, symbol=Symbol(symbol))

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    def __str__(self) -> str:
        if self.is_number:
            return self.text
        return self.symbol.value


def render(tokens: list[Token]) -> str:
    """Join tokens with single spaces, e.g. "2 3 4 * +"."""
    return " ".join(str(t) for t in tokens)
