"""Tools for agent integrations."""

from prysm.tools.base import ToolDefinition, function_to_tool_definition
from prysm.tools.registry import ToolRegistry

__all__ = [
    "ToolDefinition",
    "ToolRegistry",
    "function_to_tool_definition",
]
