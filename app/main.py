# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Calc API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 8080
#   python -m app.main
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import settings
from app.exceptions import (
    CalcServiceException,
    calc_exception_handler,
    internal_exception_handler,
    validation_exception_handler,
)
from app.routers import calculate, health
from core.services import new_request_id

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Nothing to connect to; just records startup and shutdown.
    """
    logger.info(f"Starting Calc API in {settings.ENVIRONMENT} mode")
    logger.info(f"Max expression length: {settings.MAX_EXPRESSION_LENGTH}")

    yield

    logger.info("Shutting down Calc API")


# Create FastAPI application
app = FastAPI(
    title="Calc API",
    description="""
## Arithmetic Expression Evaluation

Send an infix expression, get back its value.

### Supported syntax

| Element | Example |
|---------|---------|
| Numbers | `3`, `2.5`, `.5` |
| Operators | `+ - * /` (usual precedence, left-associative) |
| Parentheses | `(2 + 3) * 4` |
| Negation | `-5 + 2`, `(-5 + 2)` (start of input or right after `(`) |

### Quick Start

```bash
curl -X POST http://localhost:8080/api/v1/calculate \\
  -H "Content-Type: application/json" \\
  -d '{"expression": "(2 + 3) * 4"}'
# {"result": 20.0}
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Calculate",
            "description": "Evaluate arithmetic expressions",
        },
        {
            "name": "Health",
            "description": "API health checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """
    Tag each request with an ID and log its arrival, status and duration.

    A caller-supplied X-Request-ID is reused; otherwise one is generated.
    The ID is echoed back in the response headers.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
    request.state.request_id = request_id

    start = time.perf_counter()
    logger.info(f"[{request_id}] Received {request.method} {request.url.path}")

    response = await call_next(request)

    duration_ms = (time.perf_counter() - start) * 1000
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        f"[{request_id}] Completed with {response.status_code} in {duration_ms:.2f}ms"
    )
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(CalcServiceException, calc_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, internal_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Calculation endpoint
app.include_router(
    calculate.router,
    prefix="/api/v1",
    tags=["Calculate"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Calc API",
        "version": __version__,
        "docs": "/docs",
        "calculate": "/api/v1/calculate",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
