"""FastAPI dependency injection providers.

Services are owned by the application instance (app.state) rather than
module globals, so each app built by create_app() is isolated.
"""

from fastapi import Request

from palette_api.config.settings import Settings
from palette_api.monitoring.metrics import MetricsRegistry


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_metrics(request: Request) -> MetricsRegistry:
    """Metrics registry owned by the application."""
    return request.app.state.metrics


def get_uptime_seconds(request: Request) -> float:
    """Seconds since the application was created."""
    return max(0.0, request.app.state.clock() - request.app.state.started_at)
