# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up a predictable environment before any app imports
# - Provides an HTTP test client for the FastAPI app
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """HTTP client bound to the FastAPI app."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lenient_client():
    """
    Client that turns unhandled server errors into 500 responses
    instead of re-raising them in the test.
    """
    from app.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def precedence_cases():
    """Expressions paired with their conventionally evaluated values."""
    return [
        ("2+3*4", 14.0),
        ("(2+3)*4", 20.0),
        ("8-3-2", 3.0),
        ("16/4/2", 2.0),
        ("2*3+4*5", 26.0),
        ("10-4/2", 8.0),
        ("1+2-3+4", 4.0),
        ("((1+2)*(3+4))", 21.0),
    ]
