"""supavec-mcp - MCP server for the Supavec API."""

__version__ = "0.1.0"
