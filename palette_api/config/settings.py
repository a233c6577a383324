"""
Application Settings.

Centralized configuration using Pydantic Settings with environment variable loading.
All settings are validated at startup - invalid values will raise an error.

Production Mode:
    When app_env="production", additional validations apply:
    - rate limiting cannot be disabled (rate_limit_max_requests must be positive)
    - error responses never include exception detail or stack traces
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------
    api_host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, ge=1, le=65535, description="Listening port")
    shutdown_timeout_seconds: int = Field(
        default=10,
        ge=0,
        description="Grace period for in-flight requests before forced exit",
    )

    # -------------------------------------------------------------------------
    # Release
    # -------------------------------------------------------------------------
    app_version: str = Field(
        default="v1",
        description="Version label selecting the palette theme (v1=warm, v2=cool)",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_env: Literal["development", "test", "staging", "production"] = Field(
        default="production",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    rate_limit_max_requests: int = Field(
        default=100,
        ge=0,
        description="Maximum requests per client within the window (0 disables limiting)",
    )
    rate_limit_window_seconds: int = Field(
        default=60,
        ge=1,
        description="Sliding window length in seconds",
    )
    trust_forwarded_for: bool = Field(
        default=False,
        description="Key clients by X-Forwarded-For (only behind a proxy that overwrites it)",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env == "development"

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production settings are safe."""
        if self.app_env == "production" and self.rate_limit_max_requests == 0:
            raise ValueError(
                "Production configuration errors: rate_limit_max_requests must be positive"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()
