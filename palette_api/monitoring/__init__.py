"""
Monitoring and observability for the Palette API.

Usage:
    from palette_api.monitoring import MetricsRegistry

    metrics = MetricsRegistry()
    metrics.record_palette("v1")
"""

from palette_api.monitoring.metrics import (
    REQUEST_DURATION_BUCKETS,
    MetricsRegistry,
)

__all__ = [
    "REQUEST_DURATION_BUCKETS",
    "MetricsRegistry",
]
