"""Middleware package for the Palette API.

The request pipeline, outermost first:
CORS -> rate limit -> request logging -> metrics -> route dispatch.
"""

from palette_api.api.middleware.cors import CORS_HEADERS, CORSHeadersMiddleware
from palette_api.api.middleware.logging import RequestLoggingMiddleware
from palette_api.api.middleware.metrics import MetricsMiddleware
from palette_api.api.middleware.rate_limit import RateLimitMiddleware

__all__ = [
    "CORS_HEADERS",
    "CORSHeadersMiddleware",
    "RequestLoggingMiddleware",
    "MetricsMiddleware",
    "RateLimitMiddleware",
]
