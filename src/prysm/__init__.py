"""Prysm - Programmatic Prisma schema builder.

Describe a relational data model through an imperative API and render it
as a Prisma schema document for schema-driven code generators.

Example:
    from prysm import SchemaBuilder, save_schema

    builder = SchemaBuilder()

    builder.add_field("User", "id", "Int", "cuid()")
    builder.set_primary_key("User", "id")
    builder.add_relation("User", "posts", "OneToMany", "Post", "author")

    builder.add_field("Post", "id", "Int", "cuid()")
    builder.set_primary_key("Post", "id")
    builder.add_field("Post", "authorId", "Int")
    builder.add_relation("Post", "author", "ManyToOne", "User", "posts")

    print(builder.generate_schema())

    # Persist as ./prisma/acme.prisma
    save_schema(builder, "acme")
"""

from prysm.core.types import (
    DefaultValue,
    FieldDefinition,
    FieldType,
    ModelDefinition,
    RelationDefinition,
    RelationKind,
    Schema,
)
from prysm.exceptions import (
    BackingFieldNotFoundError,
    DefinitionError,
    FieldAlreadyExistsError,
    FieldNotFoundError,
    InvalidTenantIdError,
    ModelNotFoundError,
    PrimaryKeyAlreadySetError,
    PrysmError,
)
from prysm.schema import (
    FileSchemaSink,
    PrismaRenderer,
    SchemaBuilder,
    render_schema,
    save_schema,
)
from prysm.tools import ToolDefinition, ToolRegistry

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SchemaBuilder",
    "PrismaRenderer",
    "FileSchemaSink",
    "render_schema",
    "save_schema",
    # Types
    "FieldType",
    "DefaultValue",
    "RelationKind",
    "FieldDefinition",
    "RelationDefinition",
    "ModelDefinition",
    "Schema",
    # Tools
    "ToolDefinition",
    "ToolRegistry",
    # Exceptions
    "PrysmError",
    "ModelNotFoundError",
    "FieldNotFoundError",
    "FieldAlreadyExistsError",
    "PrimaryKeyAlreadySetError",
    "BackingFieldNotFoundError",
    "InvalidTenantIdError",
    "DefinitionError",
]
