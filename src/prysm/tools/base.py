"""Tool definitions for exposing builder operations to agents."""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from typing import Any, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel

_JSON_TYPES: dict[type, dict[str, Any]] = {
    str: {"type": "string"},
    int: {"type": "integer"},
    float: {"type": "number"},
    bool: {"type": "boolean"},
    list: {"type": "array"},
    dict: {"type": "object"},
    type(None): {"type": "null"},
}


class ToolDefinition(BaseModel):
    """An operation described for agent consumption.

    Compatible with OpenAI and Anthropic tool formats.
    """

    name: str
    description: str
    parameters: dict[str, Any]
    function: Callable[..., Any] | None = None

    model_config = {"arbitrary_types_allowed": True}

    def to_openai_format(self) -> dict[str, Any]:
        """Convert to OpenAI function calling format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    def to_anthropic_format(self) -> dict[str, Any]:
        """Convert to Anthropic tool format."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.parameters,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }


def python_type_to_json_schema(python_type: Any) -> dict[str, Any]:
    """Convert a Python annotation to a JSON Schema fragment.

    Optional annotations (``X | None``) collapse to the schema of ``X``.
    Enum subclasses of str become string enums.
    """
    origin = get_origin(python_type)

    if origin in (Union, types.UnionType):
        members = [a for a in get_args(python_type) if a is not type(None)]
        if len(members) == 1:
            return python_type_to_json_schema(members[0])
        return {"anyOf": [python_type_to_json_schema(a) for a in members]}

    if origin is list:
        args = get_args(python_type)
        if args:
            return {"type": "array", "items": python_type_to_json_schema(args[0])}
        return {"type": "array"}

    if origin is dict:
        return {"type": "object"}

    if inspect.isclass(python_type) and issubclass(python_type, str) and python_type is not str:
        # StrEnum
        return {"type": "string", "enum": [str(m) for m in python_type]}  # type: ignore[attr-defined]

    return dict(_JSON_TYPES.get(python_type, {"type": "string"}))


def function_to_tool_definition(
    func: Callable[..., Any],
    name: str | None = None,
    description: str | None = None,
) -> ToolDefinition:
    """Build a ToolDefinition from a function's signature and docstring.

    Args:
        func: Function to expose
        name: Override function name
        description: Override description (defaults to the docstring)

    Returns:
        ToolDefinition wrapping the function
    """
    tool_name = name or func.__name__
    tool_description = description or inspect.getdoc(func) or f"Execute {tool_name}"

    sig = inspect.signature(func)
    hints = get_type_hints(func)

    properties: dict[str, Any] = {}
    required: list[str] = []

    for param_name, param in sig.parameters.items():
        if param_name == "self":
            continue

        param_schema = python_type_to_json_schema(hints.get(param_name, str))
        if param.default is inspect.Parameter.empty:
            required.append(param_name)
        elif param.default is not None:
            param_schema["default"] = param.default

        properties[param_name] = param_schema

    parameters: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        parameters["required"] = required

    return ToolDefinition(
        name=tool_name,
        description=tool_description.strip(),
        parameters=parameters,
        function=func,
    )
