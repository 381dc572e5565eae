# =============================================================================
# core/models/calculation.py - Calculation Schemas
# =============================================================================
# These models define the API contract for expression evaluation:
# - CalculateRequest: Client sends a raw expression ("(2+3)*4")
# - CalculateResponse: Either the numeric result or an error, never both
# - CalculateErrorResponse: Body returned for rejected expressions
# - CalculationOutcome: Service-level record of one evaluation
#
# Flow:
# 1. Client POSTs CalculateRequest to /api/v1/calculate
# 2. CalculationService runs the expression pipeline -> CalculationOutcome
# 3. Router returns CalculateResponse (200) or CalculateErrorResponse (422)
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, model_validator

from core.expression import ErrorKind


class CalculateRequest(BaseModel):
    """
    Schema for submitting an expression.

    The expression is passed through untouched; whitespace stripping and all
    validation happen in the expression pipeline so that an empty string is
    reported as EMPTY_EXPRESSION rather than as a schema error.

    Example:
        {"expression": "2 + 3 * 4"}
    """

    expression: str = Field(
        ...,
        description="Arithmetic expression using + - * / and parentheses",
        examples=["(2 + 3) * 4", "-5 + 2", "7.5 / 2.5"],
    )


class CalculateResponse(BaseModel):
    """
    Result of a calculation.

    Exactly one of `result` and `error` is set.

    Example (success):
        {"result": 14.0}

    Example (failure):
        {"error": "Expression is not valid"}
    """

    result: float | None = Field(
        default=None,
        allow_inf_nan=False,
        description="Computed value"
    )

    error: str | None = Field(
        default=None,
        description="Error message if the expression was rejected"
    )

    @model_validator(mode="after")
    def check_exactly_one(self) -> "CalculateResponse":
        if (self.result is None) == (self.error is None):
            raise ValueError("exactly one of 'result' or 'error' must be set")
        return self


class CalculateErrorResponse(BaseModel):
    """
    Body returned with 422 and 500 responses.

    Example:
        {
            "error": "Expression is not valid",
            "code": "DIVISION_BY_ZERO",
            "detail": "division by zero",
            "suggestion": "Make sure no divisor evaluates to zero"
        }
    """
    error: str
    code: str
    detail: str | None = None
    suggestion: str | None = None
    details: dict[str, Any] | None = None


class CalculationOutcome(BaseModel):
    """
    What happened when one expression was evaluated.

    Validation failures are data here, not exceptions: `error_kind` and
    `error_detail` are set and `result` is None.
    """

    expression: str
    result: float | None = Field(default=None, allow_inf_nan=False)
    error_kind: ErrorKind | None = None
    error_detail: str | None = None
    error_message: str | None = None
    duration_ms: float = Field(default=0.0, ge=0.0)

    @property
    def succeeded(self) -> bool:
        return self.error_kind is None
