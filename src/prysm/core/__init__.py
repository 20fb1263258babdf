"""Core types for Prysm."""

from prysm.core.types import (
    DefaultValue,
    FieldDefinition,
    FieldType,
    ModelDefinition,
    RelationDefinition,
    RelationKind,
    Schema,
    to_default_expression,
    to_prisma_type,
)

__all__ = [
    "FieldType",
    "DefaultValue",
    "RelationKind",
    "FieldDefinition",
    "RelationDefinition",
    "ModelDefinition",
    "Schema",
    "to_prisma_type",
    "to_default_expression",
]
