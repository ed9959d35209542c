"""Tool registry: the ordered catalogue of available tools.

Provides registration, lookup and listing of :class:`ToolDescriptor`
values.  Listing order is registration order, and it is the order
advertised to protocol clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from supavec_mcp.core.errors import ToolNotFoundError

if TYPE_CHECKING:
    from supavec_mcp.tools.base import ToolDescriptor


class ToolRegistry:
    """Registry for tool descriptors."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor) -> None:
        """Register a tool descriptor.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """
        if descriptor.name in self._tools:
            msg = f"Tool already registered: {descriptor.name}"
            raise ValueError(msg)
        self._tools[descriptor.name] = descriptor

    def get(self, name: str) -> ToolDescriptor:
        """Get a tool descriptor by name.

        Raises:
            ToolNotFoundError: If the tool is not registered.
        """
        if name not in self._tools:
            raise ToolNotFoundError(name)
        return self._tools[name]

    def list_descriptors(self) -> list[ToolDescriptor]:
        """Return all descriptors in registration order."""
        return list(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def list_names(self) -> list[str]:
        """Return names of all registered tools."""
        return list(self._tools.keys())
