"""API route modules."""

from palette_api.api.routes.health import router as health_router
from palette_api.api.routes.metrics import router as metrics_router
from palette_api.api.routes.palette import router as palette_router

__all__ = [
    "health_router",
    "metrics_router",
    "palette_router",
]
