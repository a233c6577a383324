"""
Core infrastructure modules for the Palette API.

Provides common utilities used across the application:
- exceptions: Error taxonomy mapped to HTTP status codes
- rate_limiter: In-memory sliding window rate limiter
- logging: structlog configuration
"""

from palette_api.core.exceptions import (
    PaletteAPIError,
    ValidationError,
    NotFoundError,
    RateLimitError,
    InternalError,
)

from palette_api.core.rate_limiter import (
    InMemoryRateLimiter,
    RateLimiter,
    RateLimitResult,
)

from palette_api.core.logging import configure_logging

__all__ = [
    # Exceptions
    "PaletteAPIError",
    "ValidationError",
    "NotFoundError",
    "RateLimitError",
    "InternalError",
    # Rate limiting
    "InMemoryRateLimiter",
    "RateLimiter",
    "RateLimitResult",
    # Logging
    "configure_logging",
]
