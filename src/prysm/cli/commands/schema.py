"""Schema generation commands."""

from typing import Annotated

import typer

from prysm.cli.context import CLIContext
from prysm.cli.output import OutputFormatter
from prysm.cli.parsing import load_definition, read_json_file
from prysm.exceptions import ModelNotFoundError
from prysm.schema.builder import SchemaBuilder

app = typer.Typer(help="Render and save Prisma schemas from model definitions")

DefinitionFile = Annotated[str, typer.Argument(help="JSON model definition file")]


def _build(cli_ctx: CLIContext, definition_file: str) -> SchemaBuilder:
    return load_definition(read_json_file(definition_file), cli_ctx.new_builder())


@app.command("generate")
def schema_generate(
    ctx: typer.Context,
    definition_file: DefinitionFile,
    tenant: Annotated[
        str | None,
        typer.Option("--tenant", "-t", help="Save to the schema directory for this tenant"),
    ] = None,
) -> None:
    """Render a definition file as a Prisma schema.

    Examples:

        # Print to stdout
        prysm schema generate models.json > schema.prisma

        # Save as ./prisma/acme.prisma
        prysm schema generate models.json --tenant acme
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        builder = _build(cli_ctx, definition_file)
        if tenant:
            path = cli_ctx.get_sink().save(tenant, builder.generate_schema())
            formatter.print_success(
                f"Schema for tenant '{tenant}' saved",
                {"path": str(path), "models": len(builder.list_models())},
            )
        else:
            formatter.print_schema_text(builder.generate_schema())
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)


@app.command("save")
def schema_save(
    ctx: typer.Context,
    definition_file: DefinitionFile,
    tenant: Annotated[str, typer.Argument(help="Tenant identifier (file name)")],
) -> None:
    """Render a definition file and save it for a tenant."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        builder = _build(cli_ctx, definition_file)
        path = cli_ctx.get_sink().save(tenant, builder.generate_schema())
        formatter.print_success(
            f"Schema for tenant '{tenant}' saved",
            {"path": str(path), "models": len(builder.list_models())},
        )
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)


@app.command("describe")
def schema_describe(
    ctx: typer.Context,
    definition_file: DefinitionFile,
    model_name: Annotated[
        str | None,
        typer.Option("--model", "-m", help="Only show this model"),
    ] = None,
) -> None:
    """Show the models, fields and relations of a definition file."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        schema = _build(cli_ctx, definition_file).get_schema()
        models = schema.models
        if model_name:
            models = [m for m in models if m.name == model_name]
            if not models:
                raise ModelNotFoundError(model_name, schema.model_names())
        formatter.print_models(models)
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
