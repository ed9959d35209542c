"""End-to-end tool calls over an in-memory MCP session.

A real MCP client talks to the server built by ``create_server``; the
Supavec API is the in-process fake.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from mcp.client.session import ClientSession
from mcp.shared.memory import create_connected_server_and_client_session

from supavec_mcp.mcp.server import create_server
from supavec_mcp.tools.dispatcher import Dispatcher
from supavec_mcp.upstream.client import UpstreamClient
from tests.fixtures.responses import EMBEDDINGS_RESPONSE
from tests.fixtures.supavec import FakeSupavec, make_client


@asynccontextmanager
async def _session(client: UpstreamClient) -> AsyncIterator[ClientSession]:
    """Connected MCP client session for a server backed by *client*."""
    server = create_server(Dispatcher(client))
    async with create_connected_server_and_client_session(server) as session:
        yield session


class TestCatalogue:
    async def test_list_tools(self, upstream: UpstreamClient) -> None:
        async with _session(upstream) as session:
            result = await session.list_tools()
        assert [t.name for t in result.tools] == [
            "fetch-embeddings",
            "list-user-files",
        ]

    async def test_list_tools_twice(self, upstream: UpstreamClient) -> None:
        async with _session(upstream) as session:
            first = await session.list_tools()
            second = await session.list_tools()
        assert [t.name for t in first.tools] == [t.name for t in second.tools]
        assert first.tools[1].inputSchema == second.tools[1].inputSchema


class TestFetchEmbeddings:
    async def test_search(self, upstream: UpstreamClient) -> None:
        async with _session(upstream) as session:
            result = await session.call_tool(
                "fetch-embeddings", {"file_id": "file-123", "query": "embeddings"}
            )
        assert not result.isError
        text = json.loads(result.content[0].text)
        assert text.split("\n") == [
            d["content"] for d in EMBEDDINGS_RESPONSE["documents"]
        ]

    async def test_file_not_found(self, upstream: UpstreamClient) -> None:
        async with _session(upstream) as session:
            result = await session.call_tool(
                "fetch-embeddings", {"file_id": "file-not-found", "query": "test"}
            )
        assert not result.isError
        assert result.content[0].text.startswith(
            "Failed to retrieve embeddings for file-not-found: "
            "Failed to fetch data: status 404"
        )


class TestListUserFiles:
    async def test_default_page(
        self, upstream: UpstreamClient, fake_supavec: FakeSupavec
    ) -> None:
        async with _session(upstream) as session:
            result = await session.call_tool("list-user-files", {})
        data = json.loads(result.content[0].text)
        assert data["success"] is True
        assert data["count"] == 3
        assert fake_supavec.bodies == [
            {"pagination": {"limit": 10, "offset": 0}, "order_dir": "desc"}
        ]

    async def test_offset_beyond_end(self, upstream: UpstreamClient) -> None:
        async with _session(upstream) as session:
            result = await session.call_tool("list-user-files", {"offset": 100})
        data = json.loads(result.content[0].text)
        assert data["results"] == []
        assert data["count"] == 0


class TestErrors:
    async def test_unknown_tool(
        self, upstream: UpstreamClient, fake_supavec: FakeSupavec
    ) -> None:
        async with _session(upstream) as session:
            result = await session.call_tool("search-the-web", {"query": "x"})
        assert result.isError
        assert "Tool not found" in result.content[0].text
        assert fake_supavec.requests == []

    async def test_bad_api_key(self, fake_supavec: FakeSupavec) -> None:
        async with (
            make_client(fake_supavec.handle, api_key="invalid-key") as client,
            _session(client) as session,
        ):
            result = await session.call_tool("list-user-files", {})
        assert not result.isError
        assert result.content[0].text.startswith(
            "Failed to retrieve user files: Failed to fetch data: status 401"
        )

    async def test_upstream_unreachable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Name or service not known", request=request)

        async with make_client(handler) as client, _session(client) as session:
            result = await session.call_tool(
                "fetch-embeddings", {"file_id": "file-123", "query": "q"}
            )
        assert result.content[0].text == (
            "Failed to retrieve embeddings for file-123: "
            "Failed to fetch data: Name or service not known"
        )
