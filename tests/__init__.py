"""
Palette API Test Suite.

- unit/: palette generation, validation, rate limiter, metrics, settings
- integration/: HTTP contract tests against a fresh app per test
- load/: Locust load profile (not collected by pytest)
- conftest.py: Shared fixtures and test configuration

Run tests with: pytest
Run with coverage: pytest --cov=palette_api
"""
