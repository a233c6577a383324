"""Prometheus metrics endpoint."""

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from palette_api.api.dependencies import get_metrics
from palette_api.core.exceptions import InternalError
from palette_api.monitoring.metrics import MetricsRegistry

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Monitoring"])


@router.api_route(
    "/metrics",
    methods=["GET", "HEAD"],
    summary="Prometheus Metrics",
    description="Metrics snapshot in the Prometheus text exposition format.",
    response_class=Response,
)
async def metrics_endpoint(
    metrics: MetricsRegistry = Depends(get_metrics),
) -> Response:
    try:
        content = metrics.render()
    except Exception as e:
        logger.error("metrics_generation_failed", error=str(e))
        raise InternalError("Failed to generate metrics") from e

    return Response(content=content, media_type=metrics.content_type)
