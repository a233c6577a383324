"""
Palette API FastAPI Application.

- main: application factory and default app instance
- routes/: endpoint definitions (health, metrics, palette)
- middleware/: request pipeline stages
- models: Pydantic request/response models
- errors: exception handlers
- dependencies: dependency injection providers

Example:
    from palette_api.api import create_app

    app = create_app()
"""

from palette_api.api.main import app, create_app

__all__ = ["app", "create_app"]
