"""Pydantic models for API requests and responses.

Wire names are camelCase (seedColor, runtimeVersion, uptimeSeconds); the
Python attributes are snake_case with aliases.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Requests
# =============================================================================


class PaletteRequest(BaseModel):
    """Request body for POST /palette."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    seed_color: Any = Field(
        None,
        alias="seedColor",
        description="Optional seed color, echoed back in the response. Only strings are screened",
        json_schema_extra={"example": "#FF5733"},
    )


# =============================================================================
# Health Responses
# =============================================================================


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: Literal["healthy"] = "healthy"
    version: str = Field(..., description="Deployed version label")
    timestamp: datetime = Field(..., description="Server time (UTC)")


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: Literal["ready"] = "ready"
    version: str = Field(..., description="Deployed version label")


class VersionResponse(BaseModel):
    """Build and runtime information."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = Field(..., description="Deployed version label")
    runtime_version: str = Field(
        ..., alias="runtimeVersion", description="Python interpreter version"
    )
    uptime_seconds: float = Field(
        ..., alias="uptimeSeconds", ge=0, description="Seconds since startup"
    )


# =============================================================================
# Palette Responses
# =============================================================================


class PaletteAPIResponse(BaseModel):
    """Response for GET /api."""

    version: str
    palette: list[str] = Field(..., min_length=5, max_length=5)
    timestamp: datetime
    message: str
    theme: Literal["warm", "cool"]


class PaletteResponse(BaseModel):
    """Response for POST /palette."""

    model_config = ConfigDict(populate_by_name=True)

    version: str
    palette: list[str] = Field(..., min_length=5, max_length=5)
    seed_color: Any = Field(..., alias="seedColor")
    timestamp: datetime


# =============================================================================
# Errors
# =============================================================================


class ErrorResponse(BaseModel):
    """Error body. Every error carries the version label."""

    error: str = Field(..., description="Error summary")
    version: str = Field(..., description="Deployed version label")
    message: Optional[str] = Field(None, description="Additional detail")
    stack: Optional[str] = Field(None, description="Stack trace (development only)")


class NotFoundResponse(BaseModel):
    """Body for unmatched routes."""

    error: Literal["Not Found"] = "Not Found"
    path: str
    version: str
    message: str = "The requested resource does not exist"
