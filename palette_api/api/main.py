"""Palette API - Main FastAPI Application.

This module builds the FastAPI application for the palette service.
It includes:
- The request pipeline (CORS, rate limiting, request logging, metrics)
- Health, readiness, and Prometheus metrics endpoints
- Palette HTML/JSON endpoints and the failure-injection route
- Exception handlers mapping the error taxonomy to JSON responses

Usage:
    # Run with uvicorn
    uvicorn palette_api.api.main:app

    # Or through the entry point
    python main.py
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Callable, Optional

import structlog
from fastapi import FastAPI

from palette_api import __version__
from palette_api.api.errors import register_exception_handlers
from palette_api.api.middleware import (
    CORSHeadersMiddleware,
    MetricsMiddleware,
    RateLimitMiddleware,
    RequestLoggingMiddleware,
)
from palette_api.api.routes import health_router, metrics_router, palette_router
from palette_api.config.settings import Settings, get_settings
from palette_api.core.rate_limiter import InMemoryRateLimiter, RateLimiter
from palette_api.monitoring.metrics import MetricsRegistry

logger = structlog.get_logger(__name__)

API_TITLE = "Color Palette API"
API_DESCRIPTION = """
## Progressive Delivery Demo

Generates color palettes whose theme depends on the deployed version label:
`v1` renders warm tones, `v2` cool tones, so a canary rollout is visible at a glance.

- `/` visual palette, `/api` JSON palette, `POST /palette` seeded palette
- `/health`, `/ready`, `/metrics` for orchestration and monitoring (never rate limited)
- `/error` always fails, for exercising automated rollback
"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    The server stops accepting connections and drains in-flight requests
    before the shutdown half runs.
    """
    settings: Settings = app.state.settings
    logger.info(
        "application_starting",
        version=settings.app_version,
        environment=settings.app_env,
        port=settings.port,
    )
    logger.info(
        "application_started",
        ui=f"http://localhost:{settings.port}/",
        api=f"http://localhost:{settings.port}/api",
        metrics=f"http://localhost:{settings.port}/metrics",
        health=f"http://localhost:{settings.port}/health",
    )

    yield

    logger.info("application_stopped", version=settings.app_version)


def create_app(
    settings: Optional[Settings] = None,
    metrics: Optional[MetricsRegistry] = None,
    rate_limiter: Optional[RateLimiter] = None,
    clock: Callable[[], float] = time.monotonic,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings (uses get_settings() if not provided)
        metrics: Metrics registry (a fresh one if not provided)
        rate_limiter: Rate limiter (a fresh in-memory one if not provided)
        clock: Monotonic clock used for uptime

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    metrics = metrics or MetricsRegistry()
    rate_limiter = rate_limiter or InMemoryRateLimiter()

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
    )

    app.state.settings = settings
    app.state.metrics = metrics
    app.state.rate_limiter = rate_limiter
    app.state.clock = clock
    app.state.started_at = clock()

    # Last added runs first, so stages are added innermost to outermost
    app.add_middleware(MetricsMiddleware, metrics=metrics)
    app.add_middleware(RequestLoggingMiddleware)
    if settings.rate_limit_max_requests > 0:
        app.add_middleware(
            RateLimitMiddleware,
            limiter=rate_limiter,
            limit=settings.rate_limit_max_requests,
            window=settings.rate_limit_window_seconds,
            trust_forwarded_for=settings.trust_forwarded_for,
        )
    else:
        logger.warning("rate_limiting_disabled", environment=settings.app_env)
    app.add_middleware(CORSHeadersMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(palette_router)

    return app


# Create app instance
app = create_app()
