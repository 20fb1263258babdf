"""Schema building, rendering and persistence for Prysm."""

from prysm.schema.builder import SchemaBuilder
from prysm.schema.renderer import (
    DATASOURCE_PREAMBLE,
    PrismaRenderer,
    many_to_many_relation_name,
    one_to_one_relation_name,
    render_schema,
)
from prysm.schema.sink import FileSchemaSink, save_schema

__all__ = [
    "SchemaBuilder",
    "PrismaRenderer",
    "DATASOURCE_PREAMBLE",
    "render_schema",
    "many_to_many_relation_name",
    "one_to_one_relation_name",
    "FileSchemaSink",
    "save_schema",
]
