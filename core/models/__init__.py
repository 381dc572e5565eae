# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - calculation.py: Calculate request/response and service outcome schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .calculation import (
    CalculateErrorResponse,
    CalculateRequest,
    CalculateResponse,
    CalculationOutcome,
)

__all__ = [
    "CalculateErrorResponse",
    "CalculateRequest",
    "CalculateResponse",
    "CalculationOutcome",
]
