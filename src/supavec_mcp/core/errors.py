"""Exception hierarchy for supavec-mcp.

Every module imports from here. The hierarchy is:

    SupavecError
    ├── ConfigError
    └── ToolError(tool_name)
        ├── ToolNotFoundError
        └── InvalidArgumentsError

Upstream HTTP failures are not exceptions: the upstream client turns
them into :class:`~supavec_mcp.upstream.client.Failure` values that the
dispatcher renders as ordinary tool output.
"""

from __future__ import annotations


class SupavecError(Exception):
    """Base exception for all supavec-mcp errors."""


# ─── Configuration Errors ─────────────────────────────────────


class ConfigError(SupavecError):
    """Invalid or incomplete configuration."""


# ─── Tool Errors ──────────────────────────────────────────────


class ToolError(SupavecError):
    """Base for errors a tool call reports through the protocol error channel."""

    def __init__(self, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        super().__init__(message)


class ToolNotFoundError(ToolError):
    """The requested tool is not in the advertised catalogue."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(tool_name, f"Tool not found: {tool_name}")


class InvalidArgumentsError(ToolError):
    """Tool arguments do not satisfy the tool's parameter schema."""

    def __init__(self, tool_name: str, message: str) -> None:
        self.detail = message
        super().__init__(tool_name, f"Invalid arguments for {tool_name}: {message}")
