"""Request metrics middleware.

Records request count and duration on the injected MetricsRegistry once
the response is produced. The route label is the matched route template,
falling back to the raw path for unmatched requests.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from palette_api.monitoring.metrics import MetricsRegistry


def _route_label(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class MetricsMiddleware(BaseHTTPMiddleware):
    """Innermost middleware stage, directly in front of route dispatch."""

    def __init__(self, app: ASGIApp, metrics: MetricsRegistry):
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next):
        with self.metrics.track_request(request.method, request.url.path) as ctx:
            response = await call_next(request)
            ctx["status_code"] = response.status_code
            ctx["route"] = _route_label(request)
        return response
