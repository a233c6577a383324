"""Health and readiness checks.

Both endpoints answer unconditionally: the service has no downstream
dependencies, so being able to respond at all means it is live and ready.
HEAD is accepted alongside GET for load balancers and uptime checkers.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from palette_api.api.dependencies import get_app_settings
from palette_api.api.models import HealthResponse, ReadyResponse
from palette_api.config.settings import Settings

router = APIRouter(tags=["Health"])


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    response_model=HealthResponse,
    summary="Liveness Check",
    description="Liveness check for container orchestration. Never rate limited.",
)
async def health_check(
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    return HealthResponse(
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc),
    )


@router.api_route(
    "/ready",
    methods=["GET", "HEAD"],
    response_model=ReadyResponse,
    summary="Readiness Check",
    description="Readiness check for container orchestration. Never rate limited.",
)
async def readiness(
    settings: Settings = Depends(get_app_settings),
) -> ReadyResponse:
    return ReadyResponse(version=settings.app_version)
