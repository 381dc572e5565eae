# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .calculation_service import CalculationService, new_request_id

__all__ = [
    "CalculationService",
    "new_request_id",
]
