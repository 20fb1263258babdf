"""MCP server for Prysm.

Exposes one process-wide schema builder as MCP tools, so an agent can
declare models step by step and then render or save the schema.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from mcp.server.fastmcp import FastMCP  # type: ignore[import-not-found]

from prysm.cli.context import get_schema_dir
from prysm.schema.builder import SchemaBuilder
from prysm.schema.sink import DEFAULT_SCHEMA_DIR, FileSchemaSink

# Configure logging to stderr (important for stdio transport)
logging.basicConfig(level=logging.INFO, stream=sys.stderr)
logger = logging.getLogger(__name__)

mcp = FastMCP("prysm")

# Set during server startup
_builder: SchemaBuilder | None = None
_sink: FileSchemaSink | None = None


def get_builder() -> SchemaBuilder:
    """Get the session builder."""
    if _builder is None:
        raise RuntimeError("Builder not initialized. Call create_server() first.")
    return _builder


def get_sink() -> FileSchemaSink:
    """Get the document sink."""
    if _sink is None:
        raise RuntimeError("Sink not initialized. Call create_server() first.")
    return _sink


def _describe_model(model_name: str) -> str:
    model = get_builder().get_model(model_name)
    return json.dumps(model.model_dump() if model else {"error": f"Model '{model_name}' not found"})


# === Discovery Tools ===


@mcp.tool()
def prysm_describe() -> str:
    """Get all declared models with their fields and relations.

    Use this first to see what has been declared so far.
    """
    return json.dumps(get_builder().describe())


@mcp.tool()
def prysm_list_models() -> str:
    """List model names in declaration order.

    Returns:
        JSON array of model names.
    """
    return json.dumps(get_builder().list_models())


# === Mutation Tools ===


@mcp.tool()
def prysm_create_model(model_name: str) -> str:
    """Create a model if it does not exist yet (idempotent).

    Args:
        model_name: Model name (PascalCase recommended, e.g., "User", "Post")
    """
    try:
        get_builder().create_model(model_name)
        return _describe_model(model_name)
    except Exception as e:
        return json.dumps({"error": str(e)})


@mcp.tool()
def prysm_add_field(
    model_name: str,
    field_name: str,
    field_type: str,
    default: str | None = None,
    is_unique: bool = False,
) -> str:
    """Add a field to a model, creating the model if needed.

    Args:
        model_name: Owning model
        field_name: Field name (camelCase, e.g., "authorId")
        field_type: One of Int, String, String[], Boolean, Date, Float, Json
        default: Optional default, one of cuid(), uid(), now()
        is_unique: Whether values must be unique
    """
    try:
        get_builder().add_field(model_name, field_name, field_type, default, is_unique)
        return _describe_model(model_name)
    except Exception as e:
        return json.dumps({"error": str(e)})


@mcp.tool()
def prysm_set_primary_key(model_name: str, field_name: str) -> str:
    """Mark an existing field as the model's primary key.

    Returns an error listing the available fields if the field is missing.
    """
    try:
        get_builder().set_primary_key(model_name, field_name)
        return _describe_model(model_name)
    except Exception as e:
        return json.dumps({"error": str(e)})


@mcp.tool()
def prysm_add_relation(
    model_name: str,
    relation_name: str,
    kind: str,
    related_model: str,
    inverse_relation: str | None = None,
    foreign_key: str | None = None,
) -> str:
    """Add a relation from one model to another.

    Args:
        model_name: Owning model
        relation_name: Relation field name (e.g., "author", "posts")
        kind: One of OneToMany, ManyToOne, ManyToMany, OneToOne
        related_model: Target model (may be declared later)
        inverse_relation: Relation name on the target model
        foreign_key: Backing field for ManyToOne/OneToOne (defaults to "<relation_name>Id")
    """
    try:
        get_builder().add_relation(
            model_name, relation_name, kind, related_model, inverse_relation, foreign_key
        )
        return _describe_model(model_name)
    except Exception as e:
        return json.dumps({"error": str(e)})


@mcp.tool()
def prysm_reset() -> str:
    """Discard all declared models."""
    get_builder().reset()
    return json.dumps({"success": True})


# === Output Tools ===


@mcp.tool()
def prysm_generate_schema() -> str:
    """Render all declared models as a Prisma schema document.

    Returns:
        JSON with the schema text under "schema".
    """
    try:
        return json.dumps({"schema": get_builder().generate_schema()})
    except Exception as e:
        return json.dumps({"error": str(e)})


@mcp.tool()
def prysm_save_schema(tenant_id: str) -> str:
    """Render the schema and save it as <schema-dir>/<tenant_id>.prisma.

    Args:
        tenant_id: Tenant identifier used as the file name
    """
    try:
        path = get_sink().save(tenant_id, get_builder().generate_schema())
        return json.dumps({"success": True, "path": str(path)})
    except Exception as e:
        return json.dumps({"error": str(e)})


def create_server(schema_dir: str = DEFAULT_SCHEMA_DIR, strict: bool = False) -> FastMCP:
    """Create and configure the MCP server with a fresh builder.

    Args:
        schema_dir: Directory where tenant schemas are saved
        strict: Enable validated construction on the builder

    Returns:
        Configured FastMCP server instance
    """
    global _builder, _sink
    _builder = SchemaBuilder(strict=strict)
    _sink = FileSchemaSink(schema_dir)
    logger.info(f"Prysm builder initialized, saving schemas to {schema_dir}")
    return mcp


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse server options. The schema dir falls back to PRYSM_SCHEMA_DIR."""
    parser = argparse.ArgumentParser(description="Prysm MCP Server")
    parser.add_argument(
        "--schema-dir",
        "-o",
        default=get_schema_dir(None),
        help="Directory where tenant schemas are saved "
        f"(default: PRYSM_SCHEMA_DIR or {DEFAULT_SCHEMA_DIR})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject duplicate fields and second primary keys",
    )
    return parser.parse_args(argv)


def main() -> None:
    """Entry point for running the MCP server."""
    args = parse_args()
    create_server(args.schema_dir, strict=args.strict)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
