"""Unit tests for the metrics registry."""

import pytest

from palette_api.monitoring.metrics import MetricsRegistry


class TestMetricsRegistry:
    """Tests for MetricsRegistry with an isolated CollectorRegistry."""

    @pytest.fixture
    def metrics(self):
        return MetricsRegistry(include_default_collectors=False)

    def _value(self, metrics, name, labels):
        return metrics.registry.get_sample_value(name, labels)

    def test_registries_are_isolated(self):
        """Two registries never share counters."""
        first = MetricsRegistry(include_default_collectors=False)
        second = MetricsRegistry(include_default_collectors=False)

        first.record_palette("v1")

        assert self._value(first, "color_palettes_generated_total", {"version": "v1"}) == 1.0
        assert self._value(second, "color_palettes_generated_total", {"version": "v1"}) is None

    def test_record_palette_counts_per_version(self, metrics):
        metrics.record_palette("v1")
        metrics.record_palette("v1")
        metrics.record_palette("v2")

        assert self._value(metrics, "color_palettes_generated_total", {"version": "v1"}) == 2.0
        assert self._value(metrics, "color_palettes_generated_total", {"version": "v2"}) == 1.0

    def test_track_request_records_status_and_route(self, metrics):
        """The context's status code and route end up as labels."""
        with metrics.track_request("GET", "/raw/path") as ctx:
            ctx["status_code"] = 200
            ctx["route"] = "/api"

        labels = {"method": "GET", "route": "/api", "status_code": "200"}
        assert self._value(metrics, "http_requests_total", labels) == 1.0
        assert self._value(metrics, "http_request_duration_seconds_count", labels) == 1.0

    def test_track_request_defaults_to_500_on_error(self, metrics):
        """An exception inside the block is recorded as a 500."""
        with pytest.raises(RuntimeError):
            with metrics.track_request("POST", "/palette"):
                raise RuntimeError("boom")

        labels = {"method": "POST", "route": "/palette", "status_code": "500"}
        assert self._value(metrics, "http_requests_total", labels) == 1.0

    def test_render_exposes_metric_families(self, metrics):
        """Text exposition names all three service metrics."""
        text = metrics.render().decode()

        assert "http_request_duration_seconds" in text
        assert "http_requests_total" in text
        assert "color_palettes_generated_total" in text

    def test_histogram_buckets(self, metrics):
        metrics.observe_request("GET", "/api", 200, 0.2)

        text = metrics.render().decode()
        assert 'le="0.3"' in text
        assert 'le="5.0"' in text

    def test_default_collectors_included(self):
        """Process/runtime metrics are registered by default."""
        text = MetricsRegistry().render().decode()

        assert "python_info" in text
