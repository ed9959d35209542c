"""Tests for tool registry and the default catalogue."""

from __future__ import annotations

import pytest

from supavec_mcp.core.errors import ToolNotFoundError
from supavec_mcp.tools.base import ToolDescriptor
from supavec_mcp.tools.catalog import default_registry
from supavec_mcp.tools.registry import ToolRegistry

_PING = ToolDescriptor(name="ping", description="Ping")
_ECHO = ToolDescriptor(name="echo", description="Echo")


# ── Registration ────────────────────────────────────────────────────


class TestRegistration:
    def test_register_and_get(self) -> None:
        reg = ToolRegistry()
        reg.register(_PING)
        assert reg.get("ping") is _PING

    def test_duplicate_registration_raises(self) -> None:
        reg = ToolRegistry()
        reg.register(_PING)
        with pytest.raises(ValueError, match=r"already registered"):
            reg.register(_PING)

    def test_get_missing_raises(self) -> None:
        reg = ToolRegistry()
        with pytest.raises(ToolNotFoundError, match=r"not found"):
            reg.get("nonexistent")

    def test_contains(self) -> None:
        reg = ToolRegistry()
        reg.register(_PING)
        assert "ping" in reg
        assert "nonexistent" not in reg

    def test_len(self) -> None:
        reg = ToolRegistry()
        assert len(reg) == 0
        reg.register(_PING)
        assert len(reg) == 1


# ── Listing ─────────────────────────────────────────────────────────


class TestListing:
    def test_insertion_order(self) -> None:
        reg = ToolRegistry()
        reg.register(_PING)
        reg.register(_ECHO)
        assert reg.list_names() == ["ping", "echo"]
        assert reg.list_descriptors() == [_PING, _ECHO]

    def test_listing_returns_copy(self) -> None:
        reg = ToolRegistry()
        reg.register(_PING)
        reg.list_descriptors().clear()
        assert len(reg) == 1


class TestDefaultRegistry:
    def test_tool_names(self) -> None:
        assert default_registry().list_names() == [
            "fetch-embeddings",
            "list-user-files",
        ]

    def test_listing_is_stable(self) -> None:
        reg = default_registry()
        assert reg.list_descriptors() == reg.list_descriptors()

    def test_descriptions(self) -> None:
        reg = default_registry()
        assert "embeddings" in reg.get("fetch-embeddings").description.lower()
        assert "files" in reg.get("list-user-files").description.lower()
