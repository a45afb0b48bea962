"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from sqlalchemy import text

from booking_fixtures.core.config import settings
from booking_fixtures.core.structured_logging import configure_logging
from booking_fixtures.db.session import engine

configure_logging()
logger = logging.getLogger(__name__)

# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="Booking Fixtures API",
    description="Synthetic data endpoints for scheduling app end-to-end tests",
    version=settings.VERSION,
    docs_url="/docs" if settings.ENV == "dev" else None,
    redoc_url="/redoc" if settings.ENV == "dev" else None,
)

# ============================================================================
# Routers
# ============================================================================

# Dev router (ONLY mounted in dev mode)
if settings.ENV == "dev":
    from booking_fixtures.routers import dev
    app.include_router(dev.router, prefix="/api/auth", tags=["dev"])
    logger.info("Dev fixture endpoints mounted at /api/auth")


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
def health():
    """
    Health check endpoint.

    Verifies database connectivity and returns environment info.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return {"status": "ok", "env": settings.ENV, "version": settings.VERSION}
