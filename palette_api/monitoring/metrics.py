"""
Prometheus metrics for the Palette API.

Metrics live in an explicitly owned CollectorRegistry rather than the
prometheus_client global registry, so every application instance (and
every test) gets its own counters.

Usage:
    metrics = MetricsRegistry()

    with metrics.track_request("GET", "/api") as ctx:
        response = await call_next(request)
        ctx["status_code"] = response.status_code

    metrics.record_palette("v1")
    body = metrics.render()
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

REQUEST_DURATION_BUCKETS = [0.1, 0.3, 0.5, 0.7, 1.0, 1.5, 2.0, 5.0]


class MetricsRegistry:
    """Owns the service's Prometheus collectors."""

    content_type = CONTENT_TYPE_LATEST

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        include_default_collectors: bool = True,
    ) -> None:
        self.registry = registry or CollectorRegistry()

        if include_default_collectors:
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)
            GCCollector(registry=self.registry)

        # =====================================================================
        # Metric Definitions
        # =====================================================================

        self.http_request_duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests in seconds",
            ["method", "route", "status_code"],
            buckets=REQUEST_DURATION_BUCKETS,
            registry=self.registry,
        )

        self.http_requests_total = Counter(
            "http_requests_total",
            "Total number of HTTP requests",
            ["method", "route", "status_code"],
            registry=self.registry,
        )

        self.palettes_generated = Counter(
            "color_palettes_generated_total",
            "Total number of color palettes generated",
            ["version"],
            registry=self.registry,
        )

    # =========================================================================
    # Recording
    # =========================================================================

    def observe_request(
        self,
        method: str,
        route: str,
        status_code: int | str,
        duration: float,
    ) -> None:
        """Record one completed HTTP request."""
        labels = {
            "method": method,
            "route": route,
            "status_code": str(status_code),
        }
        self.http_request_duration.labels(**labels).observe(duration)
        self.http_requests_total.labels(**labels).inc()

    @contextmanager
    def track_request(
        self,
        method: str,
        route: str,
    ) -> Generator[dict, None, None]:
        """
        Context manager to track request duration and status.

        The caller may set ctx["route"] once the route template is known.
        """
        start_time = time.perf_counter()
        context = {"status_code": "500", "route": route}  # Default to error
        try:
            yield context
        finally:
            self.observe_request(
                method,
                context.get("route") or route,
                context.get("status_code", "500"),
                time.perf_counter() - start_time,
            )

    def record_palette(self, version: str) -> None:
        """Count one generated palette."""
        self.palettes_generated.labels(version=version).inc()

    # =========================================================================
    # Exposition
    # =========================================================================

    def render(self) -> bytes:
        """Serialize the registry in the Prometheus text format."""
        return generate_latest(self.registry)
