"""
Checkout Orchestrator - Main FastAPI Application.

REST API layer exposing cart checkout and order lookup
on top of the checkout service and its collaborators.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging
import time

from checkout import __version__
from checkout.infrastructure.logging import configure_logging
from checkout.settings import get_app_settings
from api.routes import checkouts, health, orders


configure_logging(get_app_settings().checkout.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# STARTUP/SHUTDOWN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run on application startup and shutdown."""
    logger.info("Checkout API starting up...")
    logger.info("Swagger UI available at: /docs")
    yield
    logger.info("Checkout API shutting down...")


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Checkout Orchestrator API",
    description="""
    Cart checkout with tiered discounts.

    Features:
    - Single-charge checkout with premium discount
    - Order persistence after successful payment
    - Best-effort approval email
    - Order lookup
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"-> {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"<- {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# GLOBAL EXCEPTION HANDLER
# =============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "path": request.url.path
        }
    )


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(
    health.router,
    tags=["Health"]
)

app.include_router(
    checkouts.router,
    prefix="/api/v1/checkout",
    tags=["Checkout"]
)

app.include_router(
    orders.router,
    prefix="/api/v1/orders",
    tags=["Orders"]
)


# =============================================================================
# ROOT ENDPOINT
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": "Checkout Orchestrator API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }
