"""Request logging middleware."""

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request that passed rate limiting."""

    async def dispatch(self, request: Request, call_next):
        logger.info(
            "request_received",
            method=request.method,
            path=request.url.path,
        )
        return await call_next(request)
