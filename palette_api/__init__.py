"""
Palette API - color palette service for progressive delivery demos.

This package contains:
- api: FastAPI application, routes, and request pipeline
- palette: palette generation, seed validation, and HTML rendering
- monitoring: Prometheus metrics registry
- core: error taxonomy, rate limiter, and logging setup
- config: Pydantic settings
"""

__version__ = "1.0.0"
