"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api.telegram_updates import router as telegram_router
from app.api.webhooks import limiter
from app.api.webhooks import router as webhook_router
from app.core.config import settings
from app.core.logging import logger, setup_logging

SERVICE_NAME = "linear-telegram-relay"

# Configure logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    # Startup
    logger.info(
        "application_starting",
        environment=settings.environment,
        verify_source_ip=settings.linear_verify_source_ip,
    )
    logger.info("application_ready", webhook_path="/webhooks/linear")

    yield

    # Shutdown
    logger.info("application_stopped")


# Create FastAPI app
app = FastAPI(
    title="Linear Telegram Relay",
    description="Linear webhook notifications in a Telegram chat",
    version="1.0.0",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Include routers
app.include_router(webhook_router)
app.include_router(telegram_router)


@app.get("/health")
async def health_check() -> dict[str, Any]:
    """
    Health check endpoint.

    Returns:
        dict: Health status, current time and service name
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": SERVICE_NAME,
    }


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Linear Telegram Relay"}
