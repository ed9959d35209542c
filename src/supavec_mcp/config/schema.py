"""Pydantic models for supavec-mcp configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

SUPAVEC_BASE_URL = "https://api.supavec.com"
DEFAULT_API_KEY_ENV = "SUPAVEC_API_KEY"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ApiConfig(BaseModel):
    """Supavec API access."""

    api_key: str | None = None
    api_key_env: str = DEFAULT_API_KEY_ENV
    base_url: str = SUPAVEC_BASE_URL


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize to upper case and reject unknown level names."""
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"Log level must be one of: {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return level


class SupavecConfig(BaseModel):
    """Top-level configuration for supavec-mcp."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
