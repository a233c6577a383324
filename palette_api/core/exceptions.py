"""
Core exception hierarchy for the Palette API.

Each exception carries the HTTP status code it maps to, so the API layer
can turn any of them into a JSON error response without a lookup table.
"""

from typing import Any, Optional


# =============================================================================
# Base Exception
# =============================================================================


class PaletteAPIError(Exception):
    """Base exception for all Palette API errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Request Errors
# =============================================================================


class ValidationError(PaletteAPIError):
    """Raised when client input is rejected."""

    status_code = 400


class NotFoundError(PaletteAPIError):
    """Raised when no route matches the requested path."""

    status_code = 404

    def __init__(self, path: str):
        self.path = path
        super().__init__("Not Found", {"path": path})


class RateLimitError(PaletteAPIError):
    """Raised when a client exceeds its request quota."""

    status_code = 429

    def __init__(self, retry_after: float):
        self.retry_after = retry_after
        super().__init__(
            "Too many requests, please try again later.",
            {"retry_after": retry_after},
        )


# =============================================================================
# Server Errors
# =============================================================================


class InternalError(PaletteAPIError):
    """Raised when palette generation or metrics serialization fails."""

    status_code = 500
