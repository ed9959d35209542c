"""Shared test fixtures for supavec-mcp."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest

from supavec_mcp.tools.dispatcher import Dispatcher
from supavec_mcp.upstream.client import UpstreamClient
from tests.fixtures.supavec import API_KEY, BASE_URL, FakeSupavec


@pytest.fixture
def fake_supavec() -> FakeSupavec:
    """Fake Supavec API that records the requests it receives."""
    return FakeSupavec()


@pytest.fixture
async def upstream(fake_supavec: FakeSupavec) -> AsyncIterator[UpstreamClient]:
    """UpstreamClient wired to the fake Supavec API."""
    async with UpstreamClient(
        API_KEY, base_url=BASE_URL, transport=fake_supavec.transport()
    ) as client:
        yield client


@pytest.fixture
def dispatcher(upstream: UpstreamClient) -> Dispatcher:
    return Dispatcher(upstream)
