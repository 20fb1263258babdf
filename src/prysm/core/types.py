"""Core types for Prysm.

The schema is a tree of mutable pydantic models. All types are
JSON-serializable so the schema can be handed to agents as-is.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class FieldType(StrEnum):
    """Field type labels accepted by the builder."""

    INT = "Int"
    STRING = "String"
    STRING_LIST = "String[]"
    BOOLEAN = "Boolean"
    DATE = "Date"
    FLOAT = "Float"
    JSON = "Json"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid field type labels."""
        return [t.value for t in cls]


# Field type label -> Prisma scalar token
PRISMA_TYPE_MAP: dict[str, str] = {
    FieldType.INT: "Int",
    FieldType.STRING: "String",
    FieldType.STRING_LIST: "String[]",
    FieldType.BOOLEAN: "Boolean",
    FieldType.DATE: "DateTime",
    FieldType.FLOAT: "Float",
    "float": "Float",
    FieldType.JSON: "Json",
}


class DefaultValue(StrEnum):
    """Generator expressions usable as field defaults."""

    CLIENT_GENERATED_ID = "cuid()"
    CUSTOM_ID = "uid()"
    CURRENT_TIMESTAMP = "now()"

    @classmethod
    def values(cls) -> list[str]:
        """Return all default expressions."""
        return [d.value for d in cls]


DEFAULT_VALUE_ALIASES: dict[str, str] = {
    "ClientGeneratedId": DefaultValue.CLIENT_GENERATED_ID,
    "CustomId": DefaultValue.CUSTOM_ID,
    "CurrentTimestamp": DefaultValue.CURRENT_TIMESTAMP,
}


class RelationKind(StrEnum):
    """Cardinality of a relation, seen from the owning model."""

    ONE_TO_MANY = "OneToMany"  # e.g., User -> posts
    MANY_TO_ONE = "ManyToOne"  # e.g., Post -> author
    MANY_TO_MANY = "ManyToMany"  # e.g., Post <-> Tag
    ONE_TO_ONE = "OneToOne"  # e.g., User -> Profile

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid relation kind values."""
        return [k.value for k in cls]


def to_prisma_type(field_type: str) -> str:
    """Map a field type label to its Prisma token.

    Unknown labels are returned unchanged.
    """
    return PRISMA_TYPE_MAP.get(str(field_type), str(field_type))


def to_default_expression(default: str | None) -> str | None:
    """Normalize a default to its generator expression.

    Accepts the expression itself (``"cuid()"``) or its name
    (``"ClientGeneratedId"``). Unknown values are returned unchanged.
    """
    if default is None:
        return None
    value = str(default)
    return str(DEFAULT_VALUE_ALIASES.get(value, value))


class FieldDefinition(BaseModel):
    """A typed attribute of a model."""

    name: str = Field(..., description="Field name, unique within its model")
    type: str = Field(..., description="Prisma scalar token (e.g., 'Int', 'DateTime')")
    is_primary_key: bool = Field(default=False, description="Whether field is the @id")
    is_unique: bool = Field(default=False, description="Whether field values must be unique")
    default: str | None = Field(default=None, description="Default generator expression")


class RelationDefinition(BaseModel):
    """A named association from the owning model to another model."""

    name: str = Field(..., description="Relation field name on the owning model")
    kind: str = Field(..., description="Relation kind (see RelationKind)")
    related_model: str = Field(..., description="Target model name")
    inverse_relation: str = Field(
        default="", description="Name of the relation on the target model (informational)"
    )
    foreign_key: str | None = Field(
        default=None,
        description="Backing field name (inferred as '<name>id' if not provided)",
    )


class ModelDefinition(BaseModel):
    """A named entity of the data model, analogous to a table."""

    name: str
    fields: list[FieldDefinition] = Field(default_factory=list)
    relations: list[RelationDefinition] = Field(default_factory=list)

    def field_names(self) -> list[str]:
        """Return field names in declaration order."""
        return [f.name for f in self.fields]

    def find_field(self, name: str) -> FieldDefinition | None:
        """Return the first field with this exact name, or None."""
        return next((f for f in self.fields if f.name == name), None)

    def primary_key(self) -> FieldDefinition | None:
        """Return the first field marked as primary key, or None."""
        return next((f for f in self.fields if f.is_primary_key), None)


class Schema(BaseModel):
    """Ordered collection of models; the root of the data model."""

    models: list[ModelDefinition] = Field(default_factory=list)

    def model_names(self) -> list[str]:
        """Return model names in declaration order."""
        return [m.name for m in self.models]

    def find_model(self, name: str) -> ModelDefinition | None:
        """Return the model with this name, or None."""
        return next((m for m in self.models if m.name == name), None)
