"""
Configuration Management.

Configuration sources (in order of precedence):
1. Environment variables
2. .env file
3. Default values

Example:
    from palette_api.config import get_settings

    settings = get_settings()
    port = settings.port
    version = settings.app_version
"""

from palette_api.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
