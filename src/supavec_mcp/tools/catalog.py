"""The Supavec tool catalogue."""

from __future__ import annotations

from supavec_mcp.tools.base import Parameter, ParameterKind, ToolDescriptor
from supavec_mcp.tools.registry import ToolRegistry

FETCH_EMBEDDINGS = ToolDescriptor(
    name="fetch-embeddings",
    description="Fetch embeddings for a file by ID and query",
    parameters=(
        Parameter(
            name="file_id",
            kind=ParameterKind.STRING,
            description="ID of the file to get embeddings for",
            required=True,
        ),
        Parameter(
            name="query",
            kind=ParameterKind.STRING,
            description="Query to search for in the file",
            required=True,
        ),
    ),
)

LIST_USER_FILES = ToolDescriptor(
    name="list-user-files",
    description="List all files uploaded to Supavec for the current user",
    parameters=(
        Parameter(
            name="limit",
            kind=ParameterKind.NUMBER,
            description="Number of files to fetch (default: 10)",
            default=10,
        ),
        Parameter(
            name="offset",
            kind=ParameterKind.NUMBER,
            description="Offset for pagination (default: 0)",
            default=0,
        ),
        Parameter(
            name="order_dir",
            kind=ParameterKind.ENUM,
            description="Order direction for results",
            default="desc",
            allowed_values=("desc", "asc"),
        ),
    ),
)


def default_registry() -> ToolRegistry:
    """Build the registry advertised by the server."""
    registry = ToolRegistry()
    registry.register(FETCH_EMBEDDINGS)
    registry.register(LIST_USER_FILES)
    return registry
