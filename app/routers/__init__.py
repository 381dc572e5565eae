# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - calculate.py: Expression evaluation endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import calculate

__all__ = [
    "health",
    "calculate",
]
