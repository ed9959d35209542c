"""Core errors shared across supavec-mcp."""

from supavec_mcp.core.errors import (
    ConfigError,
    InvalidArgumentsError,
    SupavecError,
    ToolError,
    ToolNotFoundError,
)

__all__ = [
    "ConfigError",
    "InvalidArgumentsError",
    "SupavecError",
    "ToolError",
    "ToolNotFoundError",
]
