# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - expression/: Tokenizer, shunting-yard converter and postfix evaluator
# - models/: Pydantic schemas for the calculation contract
# - services/: Calculation service (pipeline + logging + timing)
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable from scripts and the API alike.
# =============================================================================
