"""Configuration loading and validation."""

from supavec_mcp.config.loader import load_config, require_api_key
from supavec_mcp.config.schema import (
    SUPAVEC_BASE_URL,
    ApiConfig,
    LoggingConfig,
    SupavecConfig,
)

__all__ = [
    "SUPAVEC_BASE_URL",
    "ApiConfig",
    "LoggingConfig",
    "SupavecConfig",
    "load_config",
    "require_api_key",
]
