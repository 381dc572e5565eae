# =============================================================================
# app/routers/calculate.py - Calculation Endpoint
# =============================================================================
# POST /api/v1/calculate evaluates one arithmetic expression.
#
#   200 {"result": 14.0}
#   422 {"error": "Expression is not valid", "code": "DIVISION_BY_ZERO", ...}
#   500 {"error": "Internal server error", "code": "INTERNAL_ERROR"}
# =============================================================================

import logging

from fastapi import APIRouter, Request

from app.config import settings
from app.exceptions import ExpressionTooLongError, InvalidExpressionError
from core.models.calculation import (
    CalculateErrorResponse,
    CalculateRequest,
    CalculateResponse,
)
from core.services import CalculationService, new_request_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    response_model_exclude_none=True,
    responses={
        422: {"model": CalculateErrorResponse, "description": "Expression is not valid"},
        500: {"model": CalculateErrorResponse, "description": "Internal server error"},
    },
)
async def calculate_expression(body: CalculateRequest, request: Request):
    """
    Evaluate an arithmetic expression.

    Supports + - * /, parentheses, decimal numbers and a leading minus
    (at the start of the expression or right after "(").
    Operator precedence is the usual one: * and / bind tighter than + and -,
    equal precedence evaluates left to right.

    Example:
        POST /api/v1/calculate {"expression": "(2 + 3) * 4"}  ->  {"result": 20.0}
    """
    request_id = getattr(request.state, "request_id", None) or new_request_id()

    max_length = settings.MAX_EXPRESSION_LENGTH
    if len(body.expression) > max_length:
        logger.warning(
            f"[{request_id}] Rejected expression of {len(body.expression)} characters"
        )
        raise ExpressionTooLongError(len(body.expression), max_length)

    outcome = CalculationService.calculate(body.expression, request_id=request_id)

    if not outcome.succeeded:
        raise InvalidExpressionError(
            kind=outcome.error_kind,
            message=outcome.error_message,
            detail=outcome.error_detail,
        )

    return CalculateResponse(result=outcome.result)
