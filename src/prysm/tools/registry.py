"""Tool registry for agent access to a schema builder."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from prysm.core.types import RelationKind
from prysm.exceptions import ModelNotFoundError
from prysm.schema.builder import SchemaBuilder
from prysm.tools.base import ToolDefinition, function_to_tool_definition


class ToolRegistry:
    """Registry of builder operations exported as agent tools.

    Every tool acts on the builder passed in, so an agent session and its
    caller share one schema.
    """

    def __init__(self, builder: SchemaBuilder) -> None:
        """Initialize tool registry.

        Args:
            builder: Builder the tools operate on
        """
        self._builder = builder
        self._tools: dict[str, ToolDefinition] = {}
        self._register_default_tools()

    def _register_default_tools(self) -> None:
        """Register the default Prysm tools."""
        self.register(
            name="prysm_describe",
            description="Get all models with their fields and relations. "
            "Use this first to see what has been declared so far.",
            func=self._tool_describe,
        )
        self.register(
            name="prysm_describe_model",
            description="Get the fields and relations of one model. "
            "Returns an error listing available models if it does not exist.",
            func=self._tool_describe_model,
        )
        self.register(
            name="prysm_create_model",
            description="Create a model if it does not exist yet (safe to call multiple times).",
            func=self._tool_create_model,
        )
        self.register(
            name="prysm_add_field",
            description="Add a field to a model, creating the model if needed. "
            "Types: Int, String, String[], Boolean, Date, Float, Json. "
            "Defaults: cuid(), uid(), now().",
            func=self._tool_add_field,
        )
        self.register(
            name="prysm_set_primary_key",
            description="Mark an existing field as the model's primary key. "
            "Add the field first; fails with the list of available fields otherwise.",
            func=self._tool_set_primary_key,
        )
        self.register(
            name="prysm_add_relation",
            description="Add a relation from one model to another. For ManyToOne and "
            "OneToOne, declare a '<relation>Id' field on the owning model or pass foreign_key.",
            func=self._tool_add_relation,
        )
        self.register(
            name="prysm_generate_schema",
            description="Render all declared models as a Prisma schema document.",
            func=self._builder.generate_schema,
        )
        self.register(
            name="prysm_reset",
            description="Discard all declared models and start over.",
            func=self._tool_reset,
        )

    def _tool_describe(self) -> dict[str, Any]:
        """Describe the whole schema (tool wrapper)."""
        return self._builder.describe()

    def _tool_describe_model(self, model_name: str) -> dict[str, Any]:
        """Describe a single model (tool wrapper)."""
        model = self._builder.get_model(model_name)
        if model is None:
            raise ModelNotFoundError(model_name, self._builder.list_models())
        return model.model_dump()

    def _tool_create_model(self, model_name: str) -> dict[str, Any]:
        """Create a model (tool wrapper).

        Args:
            model_name: Model name (PascalCase recommended)
        """
        self._builder.create_model(model_name)
        return self._tool_describe_model(model_name)

    def _tool_add_field(
        self,
        model_name: str,
        field_name: str,
        field_type: str,
        default: str | None = None,
        is_unique: bool = False,
    ) -> dict[str, Any]:
        """Add a field (tool wrapper).

        Args:
            model_name: Owning model
            field_name: Field name (camelCase recommended)
            field_type: Int, String, String[], Boolean, Date, Float or Json
            default: cuid(), uid() or now()
            is_unique: Whether values must be unique
        """
        self._builder.add_field(model_name, field_name, field_type, default, is_unique)
        return self._tool_describe_model(model_name)

    def _tool_set_primary_key(self, model_name: str, field_name: str) -> dict[str, Any]:
        """Set the primary key (tool wrapper)."""
        self._builder.set_primary_key(model_name, field_name)
        return self._tool_describe_model(model_name)

    def _tool_add_relation(
        self,
        model_name: str,
        relation_name: str,
        kind: RelationKind,
        related_model: str,
        inverse_relation: str | None = None,
        foreign_key: str | None = None,
    ) -> dict[str, Any]:
        """Add a relation (tool wrapper).

        Args:
            model_name: Owning model
            relation_name: Relation field name on the owning model
            kind: OneToMany, ManyToOne, ManyToMany or OneToOne
            related_model: Target model (may be declared later)
            inverse_relation: Relation name on the target model
            foreign_key: Backing field name for ManyToOne/OneToOne
        """
        self._builder.add_relation(
            model_name, relation_name, kind, related_model, inverse_relation, foreign_key
        )
        return self._tool_describe_model(model_name)

    def _tool_reset(self) -> dict[str, Any]:
        """Reset the builder (tool wrapper)."""
        self._builder.reset()
        return {"success": True, "models": []}

    def register(
        self,
        name: str,
        func: Callable[..., Any],
        description: str | None = None,
    ) -> ToolDefinition:
        """Register a tool.

        Args:
            name: Tool name
            func: Function to call
            description: Tool description

        Returns:
            Created ToolDefinition
        """
        tool = function_to_tool_definition(func, name=name, description=description)
        self._tools[name] = tool
        return tool

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name, or None if it is not registered."""
        return self._tools.get(name)

    def list_tools(self) -> list[str]:
        """List registered tool names in registration order."""
        return list(self._tools.keys())

    def get_all(self) -> list[ToolDefinition]:
        """Get all registered tool definitions."""
        return list(self._tools.values())

    def call(self, name: str, **kwargs: Any) -> Any:
        """Invoke a registered tool by name.

        Raises:
            KeyError: If no tool has this name
        """
        tool = self._tools.get(name)
        if tool is None or tool.function is None:
            raise KeyError(f"Unknown tool '{name}'. Available tools: {', '.join(self._tools)}")
        return tool.function(**kwargs)

    def to_openai_format(self) -> list[dict[str, Any]]:
        """Export all tools in OpenAI function calling format."""
        return [tool.to_openai_format() for tool in self._tools.values()]

    def to_anthropic_format(self) -> list[dict[str, Any]]:
        """Export all tools in Anthropic format."""
        return [tool.to_anthropic_format() for tool in self._tools.values()]
