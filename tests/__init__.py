# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Calc API:
# - test_tokenizer.py, test_postfix.py, test_evaluator.py: pipeline stages
# - test_calculator.py: end-to-end pipeline behaviour
# - test_models.py, test_calculation_service.py, test_config.py: support layers
# - test_api.py: HTTP endpoints
# - test_calc_interactive.py: terminal script
#
# Run tests with: pytest
# =============================================================================
