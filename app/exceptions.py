# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors tell the caller how to fix the expression, not just what failed.
#
# Response classes:
# - 422 "Expression is not valid": every ErrorKind, oversize input, bad body
# - 500 "Internal server error": anything else
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from core.expression import ErrorKind

logger = logging.getLogger(__name__)

INVALID_EXPRESSION = "Expression is not valid"
INTERNAL_ERROR = "Internal server error"


class CalcServiceException(Exception):
    """
    Base exception for the Calc API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CALC_ERROR",
        status_code: int = 500,
        error: str = INTERNAL_ERROR,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.error = error
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.error,
            "code": self.code,
            "detail": self.message,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Expression Exceptions
# =============================================================================

_SUGGESTIONS: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_EXPRESSION: "Send a non-empty expression such as \"2 + 2\"",
    ErrorKind.INVALID_NUMBER: "Numbers may contain at most one decimal point",
    ErrorKind.UNSUPPORTED_CHARACTER: "Use only digits, '.', + - * / and parentheses",
    ErrorKind.UNBALANCED_PARENTHESES: "Check that every '(' has a matching ')'",
    ErrorKind.MALFORMED_EXPRESSION: (
        "Check that every operator has a number on both sides; "
        "a minus sign is only treated as negation at the start or right after '('"
    ),
    ErrorKind.DIVISION_BY_ZERO: "Make sure no divisor evaluates to zero",
    ErrorKind.NUMERIC_OVERFLOW: "Keep every intermediate value within double-precision range (about 1.8e308)",
}


class InvalidExpressionError(CalcServiceException):
    """Raised when the expression pipeline rejects caller input."""

    def __init__(self, kind: ErrorKind, message: str, detail: str | None = None):
        details: dict[str, Any] = {"kind": kind.value}
        if detail is not None:
            details["value"] = detail
        super().__init__(
            message=message,
            code=kind.name,
            status_code=422,
            error=INVALID_EXPRESSION,
            suggestion=_SUGGESTIONS.get(kind),
            details=details,
        )
        self.kind = kind


class ExpressionTooLongError(CalcServiceException):
    """Raised when an expression exceeds MAX_EXPRESSION_LENGTH."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            message=f"Expression too long: {length} characters (max: {max_length})",
            code="EXPRESSION_TOO_LONG",
            status_code=422,
            error=INVALID_EXPRESSION,
            suggestion=f"Send an expression of at most {max_length} characters",
            details={"length": length, "max_length": max_length},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def calc_exception_handler(
    request: Request,
    exc: CalcServiceException
) -> JSONResponse:
    """
    Convert CalcServiceException to JSON response.

    Returns structured error with:
    - error: Response class ("Expression is not valid" / "Internal server error")
    - code: Machine-readable error code
    - detail: Human-readable message
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request body validation errors (missing or non-string expression).
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": INVALID_EXPRESSION,
            "code": "VALIDATION_ERROR",
            "detail": str(exc),
        }
    )


async def internal_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": INTERNAL_ERROR,
            "code": "INTERNAL_ERROR",
        }
    )
