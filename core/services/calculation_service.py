# =============================================================================
# core/services/calculation_service.py - Calculation Business Logic
# =============================================================================
# Runs the expression pipeline for one request, with request-scoped logging
# and timing. Validation failures come back as data on CalculationOutcome;
# anything else is a defect and propagates to the caller.
# =============================================================================

import logging
import time
from uuid import uuid4

from core.expression import ExpressionError, calculate
from core.models.calculation import CalculationOutcome

logger = logging.getLogger(__name__)


def new_request_id() -> str:
    """Short random identifier used to correlate log lines for one request."""
    return uuid4().hex[:12]


class CalculationService:
    """
    Service for evaluating expressions.

    Stateless: every call builds and discards its own tokens and stacks.
    """

    @staticmethod
    def calculate(expression: str, request_id: str | None = None) -> CalculationOutcome:
        """
        Evaluate an expression and describe the outcome.

        Args:
            expression: Raw expression text
            request_id: Correlation ID for log lines (generated if omitted)

        Returns:
            CalculationOutcome with either `result` or `error_kind` set

        Raises:
            Exception: Anything other than ExpressionError, unchanged
        """
        request_id = request_id or new_request_id()
        logger.info(f"[{request_id}] Received expression: {expression!r}")

        start = time.perf_counter()
        try:
            result = calculate(expression)

        except ExpressionError as e:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.warning(f"[{request_id}] Validation error ({e.kind.name}): {e}")
            return CalculationOutcome(
                expression=expression,
                error_kind=e.kind,
                error_detail=e.detail,
                error_message=str(e),
                duration_ms=duration_ms,
            )

        except Exception:
            logger.exception(f"[{request_id}] Internal error while evaluating {expression!r}")
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"[{request_id}] Evaluated in {duration_ms:.3f}ms. Result: {result}"
        )
        return CalculationOutcome(
            expression=expression,
            result=result,
            duration_ms=duration_ms,
        )
