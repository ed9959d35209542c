"""Argument validation against a tool's declared parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from supavec_mcp.core.errors import InvalidArgumentsError
from supavec_mcp.tools.base import ParameterKind

if TYPE_CHECKING:
    from supavec_mcp.tools.base import Parameter, ToolDescriptor


def _check_kind(tool_name: str, param: Parameter, value: Any) -> None:
    if param.kind is ParameterKind.STRING:
        if not isinstance(value, str):
            msg = f"'{param.name}' must be a string"
            raise InvalidArgumentsError(tool_name, msg)
    elif param.kind is ParameterKind.NUMBER:
        # bool is an int subclass; a JSON true/false is not a number.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"'{param.name}' must be a number"
            raise InvalidArgumentsError(tool_name, msg)
    elif value not in param.allowed_values:
        allowed = ", ".join(param.allowed_values)
        msg = f"'{param.name}' must be one of: {allowed}"
        raise InvalidArgumentsError(tool_name, msg)


def validate_arguments(
    descriptor: ToolDescriptor,
    arguments: dict[str, Any] | None,
) -> dict[str, Any]:
    """Check *arguments* against *descriptor* and apply defaults.

    A value of ``None`` counts as absent.  Undeclared arguments are
    dropped.  Values are never coerced.

    Returns:
        The validated arguments, defaults filled in.

    Raises:
        InvalidArgumentsError: On a missing required parameter or a
            value of the wrong kind.
    """
    arguments = arguments or {}
    validated: dict[str, Any] = {}
    for param in descriptor.parameters:
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                msg = f"missing required parameter '{param.name}'"
                raise InvalidArgumentsError(descriptor.name, msg)
            if param.default is not None:
                validated[param.name] = param.default
            continue
        _check_kind(descriptor.name, param, value)
        validated[param.name] = value
    return validated
