# =============================================================================
# core/expression/errors.py - Expression Error Taxonomy
# =============================================================================
# Every failure the pipeline can report about caller input has a kind here.
# The transport layer switches on ErrorKind, never on message text.
# =============================================================================

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Validation error kinds raised by the expression pipeline."""
    EMPTY_EXPRESSION = "empty_expression"
    INVALID_NUMBER = "invalid_number"
    UNSUPPORTED_CHARACTER = "unsupported_character"
    UNBALANCED_PARENTHESES = "unbalanced_parentheses"
    MALFORMED_EXPRESSION = "malformed_expression"
    DIVISION_BY_ZERO = "division_by_zero"
    NUMERIC_OVERFLOW = "numeric_overflow"


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_EXPRESSION: "empty expression",
    ErrorKind.INVALID_NUMBER: "invalid number",
    ErrorKind.UNSUPPORTED_CHARACTER: "unsupported character",
    ErrorKind.UNBALANCED_PARENTHESES: "unbalanced parentheses",
    ErrorKind.MALFORMED_EXPRESSION: "malformed expression",
    ErrorKind.DIVISION_BY_ZERO: "division by zero",
    ErrorKind.NUMERIC_OVERFLOW: "result out of range",
}


class ExpressionError(Exception):
    """
    Raised when an expression cannot be evaluated because the input is bad.

    Attributes:
        kind: Which validation rule failed
        detail: The offending literal or character, when there is one
    """

    def __init__(self, kind: ErrorKind, detail: str | None = None):
        self.kind = kind
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        base = _MESSAGES[self.kind]
        if self.detail is not None:
            return f"{base}: {self.detail}"
        return base

    def __repr__(self) -> str:
        return f"ExpressionError(kind={self.kind.name}, detail={self.detail!r})"

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "ExpressionError":
        return cls(ErrorKind.EMPTY_EXPRESSION)

    @classmethod
    def invalid_number(cls, literal: str) -> "ExpressionError":
        return cls(ErrorKind.INVALID_NUMBER, literal)

    @classmethod
    def unsupported_character(cls, char: str) -> "ExpressionError":
        return cls(ErrorKind.UNSUPPORTED_CHARACTER, char)

    @classmethod
    def unbalanced_parentheses(cls) -> "ExpressionError":
        return cls(ErrorKind.UNBALANCED_PARENTHESES)

    @classmethod
    def malformed(cls) -> "ExpressionError":
        return cls(ErrorKind.MALFORMED_EXPRESSION)

    @classmethod
    def division_by_zero(cls) -> "ExpressionError":
        return cls(ErrorKind.DIVISION_BY_ZERO)

    @classmethod
    def overflow(cls) -> "ExpressionError":
        return cls(ErrorKind.NUMERIC_OVERFLOW)
