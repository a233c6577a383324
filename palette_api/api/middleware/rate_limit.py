"""Rate limiting middleware for FastAPI.

Applies the injected sliding-window rate limiter to incoming requests.

Usage:
    from palette_api.api.middleware import RateLimitMiddleware

    app = FastAPI()
    app.add_middleware(RateLimitMiddleware, limiter=InMemoryRateLimiter(), limit=100, window=60)

Health, readiness, and metrics endpoints are excluded from rate limiting.
"""

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from palette_api.core.exceptions import RateLimitError
from palette_api.core.rate_limiter import RateLimiter, RateLimitResult

logger = structlog.get_logger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Middleware to apply rate limiting to API requests.

    Features:
    - Per-client sliding window (X-Forwarded-For only when trusted)
    - Skips rate limiting for monitoring endpoints
    - Returns 429 with Retry-After header when limit exceeded
    - Adds X-RateLimit-* headers to allowed responses
    """

    # Endpoints excluded from rate limiting (orchestration and monitoring)
    EXCLUDED_PATHS = {
        "/health",
        "/ready",
        "/metrics",
    }

    # 100 requests per minute per client
    DEFAULT_LIMIT = 100
    DEFAULT_WINDOW = 60  # seconds

    def __init__(
        self,
        app: ASGIApp,
        limiter: RateLimiter,
        limit: int = DEFAULT_LIMIT,
        window: int = DEFAULT_WINDOW,
        trust_forwarded_for: bool = False,
    ):
        """
        Initialize rate limit middleware.

        Args:
            app: The ASGI application
            limiter: Rate limiter holding the window state
            limit: Maximum requests allowed in window (default: 100)
            window: Time window in seconds (default: 60)
            trust_forwarded_for: Key clients by X-Forwarded-For. Only enable
                behind a proxy that overwrites the header.
        """
        super().__init__(app)
        self.limiter = limiter
        self.limit = limit
        self.window = window
        self.trust_forwarded_for = trust_forwarded_for

    def _get_client_identifier(self, request: Request) -> str:
        """
        Get unique identifier for the client.

        Uses the peer address unless X-Forwarded-For is explicitly trusted.
        """
        forwarded = request.headers.get("X-Forwarded-For") if self.trust_forwarded_for else None
        if forwarded:
            # First hop is the original client
            client_ip = forwarded.split(",")[0].strip()
        else:
            client_ip = request.client.host if request.client else "unknown"

        return f"api_requests:{client_ip}"

    def _limited_response(self, result: RateLimitResult) -> JSONResponse:
        exc = RateLimitError(retry_after=result.retry_after or self.window)
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content={"error": exc.message},
            headers={
                "Retry-After": str(max(1, int(exc.retry_after))),
                "X-RateLimit-Limit": str(self.limit),
                "X-RateLimit-Remaining": "0",
                "X-RateLimit-Reset": str(int(result.reset_at)),
            },
        )

    async def dispatch(self, request: Request, call_next):
        """Process request through rate limiting."""
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        identifier = self._get_client_identifier(request)

        try:
            result = await self.limiter.is_allowed(
                identifier=identifier,
                limit=self.limit,
                window=self.window,
            )
        except Exception as e:
            # If rate limiting fails, allow the request through
            logger.error(
                "rate_limit_check_failed",
                error=str(e),
                client=identifier,
                message="Allowing request due to rate limit error",
            )
            return await call_next(request)

        if not result.allowed:
            logger.warning(
                "rate_limit_exceeded",
                client=identifier,
                path=request.url.path,
                retry_after=result.retry_after,
            )
            return self._limited_response(result)

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(self.limit)
        response.headers["X-RateLimit-Remaining"] = str(result.remaining)
        response.headers["X-RateLimit-Reset"] = str(int(result.reset_at))

        return response
