"""MCP server exposing the Supavec tools over stdio."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from supavec_mcp import __version__
from supavec_mcp.config.loader import require_api_key
from supavec_mcp.tools.base import ToolCall
from supavec_mcp.tools.dispatcher import Dispatcher
from supavec_mcp.upstream.client import UpstreamClient

if TYPE_CHECKING:
    from supavec_mcp.config.schema import SupavecConfig
    from supavec_mcp.tools.base import ContentBlock, ToolDescriptor

logger = logging.getLogger(__name__)

SERVER_NAME = "supavec"


def _to_tool(descriptor: ToolDescriptor) -> Tool:
    return Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema(),
    )


def _to_text_content(block: ContentBlock) -> TextContent:
    extra: dict[str, Any] = {}
    if block.mime_type:
        extra["mimeType"] = block.mime_type
    return TextContent(type="text", text=block.text, **extra)


def create_server(dispatcher: Dispatcher) -> Server:
    """Build an MCP server whose tools are served by *dispatcher*."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
    async def list_tools() -> list[Tool]:
        """List available MCP tools."""
        return [_to_tool(d) for d in dispatcher.list_catalogue()]

    @server.call_tool()  # type: ignore[untyped-decorator]
    async def call_tool(name: str, arguments: dict | None) -> list[TextContent]:  # type: ignore[type-arg]
        """Handle tool calls.

        Tool errors propagate; the SDK reports them to the client as an
        error result.
        """
        call = ToolCall(name=name, arguments=arguments or {})
        result = await dispatcher.invoke(call)
        return [_to_text_content(block) for block in result.content]

    return server


async def run_server(config: SupavecConfig) -> None:
    """Start the MCP server on stdio."""
    client = UpstreamClient(require_api_key(config), base_url=config.api.base_url)
    server = create_server(Dispatcher(client))
    logger.info("Supavec MCP server %s running on stdio", __version__)
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await client.aclose()
