"""Palette endpoints.

- GET /          HTML page with a fresh palette
- GET /api       JSON palette
- POST /palette  JSON palette with an optional, validated seed color
- GET /version   version and runtime information
- GET /error     deliberate failure for rollback testing
"""

import json
import platform
from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from palette_api.api.dependencies import get_app_settings, get_metrics, get_uptime_seconds
from palette_api.api.models import (
    ErrorResponse,
    PaletteAPIResponse,
    PaletteRequest,
    PaletteResponse,
    VersionResponse,
)
from palette_api.config.settings import Settings
from palette_api.core.exceptions import InternalError, ValidationError
from palette_api.monitoring.metrics import MetricsRegistry
from palette_api.palette import (
    generate_palette,
    render_palette_page,
    theme_for,
    unsafe_color_validation,
)

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Palette"])

ROLLBACK_TEST_ERROR = "Intentional error for testing rollback"


def _generate(version: str, metrics: MetricsRegistry) -> list[str]:
    """Generate a palette and count it."""
    try:
        palette = generate_palette(version)
    except Exception as e:
        logger.error("palette_generation_failed", version=version, error=str(e))
        raise InternalError("Failed to generate palette") from e

    metrics.record_palette(version)
    return palette


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
    summary="Palette Page",
    description="Visual palette for the deployed version.",
)
async def palette_page(
    settings: Settings = Depends(get_app_settings),
    metrics: MetricsRegistry = Depends(get_metrics),
) -> HTMLResponse:
    palette = _generate(settings.app_version, metrics)
    try:
        html = render_palette_page(palette, settings.app_version)
    except Exception as e:
        logger.error("palette_render_failed", error=str(e))
        raise InternalError("Failed to generate palette") from e
    return HTMLResponse(content=html, status_code=status.HTTP_200_OK)


@router.api_route(
    "/api",
    methods=["GET", "HEAD"],
    response_model=PaletteAPIResponse,
    summary="Generate Palette",
)
async def palette_api(
    settings: Settings = Depends(get_app_settings),
    metrics: MetricsRegistry = Depends(get_metrics),
) -> PaletteAPIResponse:
    version = settings.app_version
    return PaletteAPIResponse(
        version=version,
        palette=_generate(version, metrics),
        timestamp=datetime.now(timezone.utc),
        message=f"Palette generated by {version}",
        theme=theme_for(version),
    )


async def read_palette_request(request: Request) -> PaletteRequest:
    """
    Parse the POST /palette body.

    Only JSON bodies are read; anything else counts as no seed. A body that
    claims to be JSON but does not parse is a client error.
    """
    raw = await request.body()
    content_type = request.headers.get("content-type", "")
    if not raw or "json" not in content_type:
        return PaletteRequest()

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ValidationError("Invalid input: malformed request body") from e

    if not isinstance(data, dict):
        return PaletteRequest()
    return PaletteRequest.model_validate(data)


@router.post(
    "/palette",
    response_model=PaletteResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Generate Palette From Seed",
    description="String seed colors are checked against a blocklist before generation.",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": PaletteRequest.model_json_schema()}},
            "required": False,
        }
    },
)
async def create_palette(
    payload: PaletteRequest = Depends(read_palette_request),
    settings: Settings = Depends(get_app_settings),
    metrics: MetricsRegistry = Depends(get_metrics),
) -> PaletteResponse:
    seed_color = payload.seed_color

    # Non-string seeds skip the blocklist and are echoed as sent
    if seed_color and isinstance(seed_color, str):
        unsafe_color_validation(seed_color)

    return PaletteResponse(
        version=settings.app_version,
        palette=_generate(settings.app_version, metrics),
        seed_color=seed_color or "random",
        timestamp=datetime.now(timezone.utc),
    )


@router.api_route(
    "/version",
    methods=["GET", "HEAD"],
    response_model=VersionResponse,
    summary="Version Info",
)
async def version_info(
    settings: Settings = Depends(get_app_settings),
    uptime: float = Depends(get_uptime_seconds),
) -> VersionResponse:
    return VersionResponse(
        version=settings.app_version,
        runtime_version=platform.python_version(),
        uptime_seconds=uptime,
    )


@router.api_route(
    "/error",
    methods=["GET", "HEAD"],
    responses={500: {"model": ErrorResponse}},
    summary="Failure Injection",
    description="Always fails. Used to exercise automated rollback.",
)
async def simulate_error(
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    body = ErrorResponse(error=ROLLBACK_TEST_ERROR, version=settings.app_version)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(mode="json", exclude_none=True),
    )
