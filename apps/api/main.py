"""
Order Service - Main FastAPI Application.

REST API layer over the order workflow: order listing, status changes,
order creation and the monthly profit report.
"""
from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.api.routes import health, orders
from core.domain.exceptions import OrderRuleViolation, ReferenceDataMissingError
from core.infrastructure.database.config import close_database, get_session_factory, init_database
from core.infrastructure.database.seed import seed_order_statuses
from core.infrastructure.logging import configure_logging
from core.settings import get_app_settings


settings = get_app_settings()

# Setup logging
configure_logging(settings.service.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# STARTUP/SHUTDOWN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and reference data on startup, release the engine on shutdown."""
    logger.info(f"🚀 {settings.service.app_name} starting up ({settings.service.environment})")
    await init_database()
    if settings.service.seed_reference_data:
        await seed_order_statuses(get_session_factory())
    logger.info("📚 Swagger UI available at: /docs")

    yield

    await close_database()
    logger.info(f"👋 {settings.service.app_name} shutting down...")


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title=settings.service.app_name,
    description="Order management API: orders, statuses and monthly profit.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.service.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed ids and bodies as 400 with the offending fields."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Request validation failed",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(OrderRuleViolation)
async def order_rule_violation_handler(request: Request, exc: OrderRuleViolation) -> JSONResponse:
    """Duplicate or unknown products in a creation request."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=exc.to_payload(),
    )


@app.exception_handler(ReferenceDataMissingError)
async def reference_data_missing_handler(
    request: Request, exc: ReferenceDataMissingError
) -> JSONResponse:
    """Missing reference data is a deployment problem, not a client error."""
    logger.critical(f"Reference data missing: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Service is misconfigured", "detail": str(exc)},
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError exceptions.

    Args:
        request: FastAPI request
        exc: ValueError exception

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(health.router, tags=["Health"])
app.include_router(orders.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
