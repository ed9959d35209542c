"""Tool data types.

Declarative parameter schemas, tool descriptors, tool calls and the
content-block results handed back to the protocol layer.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from typing import Any

JSON_MIME_TYPE = "application/json"


class ParameterKind(enum.Enum):
    """Declared kind of a tool parameter."""

    STRING = "string"
    NUMBER = "number"
    ENUM = "enum"


@dataclass(frozen=True, slots=True)
class Parameter:
    """One declared tool parameter.

    A required parameter never has a default.  Optional parameters
    without a default are left out of the validated arguments so the
    upstream default applies.
    """

    name: str
    kind: ParameterKind
    description: str
    required: bool = False
    default: Any = None
    allowed_values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.required and self.default is not None:
            msg = f"Required parameter {self.name!r} cannot have a default"
            raise ValueError(msg)
        if self.kind is ParameterKind.ENUM:
            if not self.allowed_values:
                msg = f"Enum parameter {self.name!r} needs allowed_values"
                raise ValueError(msg)
            if self.default is not None and self.default not in self.allowed_values:
                msg = (
                    f"Default {self.default!r} for {self.name!r} "
                    f"is not one of {list(self.allowed_values)}"
                )
                raise ValueError(msg)
        elif self.allowed_values:
            msg = f"Only enum parameters take allowed_values ({self.name!r})"
            raise ValueError(msg)

    def json_schema(self) -> dict[str, Any]:
        """JSON Schema fragment for this parameter."""
        if self.kind is ParameterKind.NUMBER:
            schema: dict[str, Any] = {"type": "number"}
        else:
            schema = {"type": "string"}
        schema["description"] = self.description
        if self.kind is ParameterKind.ENUM:
            schema["enum"] = list(self.allowed_values)
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """Name, description and parameter contract of a tool."""

    name: str
    description: str
    parameters: tuple[Parameter, ...] = ()

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema object advertised to protocol clients."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }


@dataclass(frozen=True, slots=True)
class ToolCall:
    """A tool invocation received from the protocol layer."""

    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ContentBlock:
    """A single piece of tool output."""

    text: str
    mime_type: str | None = None
    kind: str = "text"


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Result of a tool call: an ordered sequence of content blocks."""

    content: tuple[ContentBlock, ...]

    @classmethod
    def text(cls, text: str) -> ToolResult:
        """Single plain-text block."""
        return cls(content=(ContentBlock(text=text),))

    @classmethod
    def json(cls, value: Any) -> ToolResult:
        """Single block holding *value* JSON-encoded."""
        encoded = json.dumps(value, indent=2, ensure_ascii=False)
        return cls(content=(ContentBlock(text=encoded, mime_type=JSON_MIME_TYPE),))
