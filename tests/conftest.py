"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- settings: Settings isolated from the environment and .env
- metrics: Fresh metrics registry
- limiter: Fresh in-memory rate limiter
- app / client: Application built from the fixtures above
"""

import re

import pytest
from fastapi.testclient import TestClient

from palette_api.api.main import create_app
from palette_api.config.settings import Settings
from palette_api.core.rate_limiter import InMemoryRateLimiter
from palette_api.monitoring.metrics import MetricsRegistry

HSL_PATTERN = re.compile(r"^hsl\((\d+), (\d+\.\d)%, (\d+\.\d)%\)$")


def make_settings(**overrides) -> Settings:
    """Build settings that ignore the .env file."""
    values = {"app_env": "test", "app_version": "v1"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    """Test settings with the v1 version label."""
    return make_settings()


@pytest.fixture
def metrics() -> MetricsRegistry:
    """Fresh metrics registry for each test."""
    return MetricsRegistry()


@pytest.fixture
def limiter() -> InMemoryRateLimiter:
    """Fresh rate limiter for each test."""
    return InMemoryRateLimiter()


@pytest.fixture
def app(settings, metrics, limiter):
    """Application wired to the per-test fixtures."""
    return create_app(settings=settings, metrics=metrics, rate_limiter=limiter)


@pytest.fixture
def client(app):
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
