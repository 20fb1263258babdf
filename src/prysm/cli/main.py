"""Prysm CLI - Main entry point."""

from typing import Annotated

import typer

import prysm
from prysm.cli.context import CLIContext, configure_logging, get_schema_dir

app = typer.Typer(
    name="prysm",
    help="Prysm CLI - Build Prisma schemas from model definitions",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    schema_dir: Annotated[
        str | None,
        typer.Option(
            "--schema-dir",
            "-o",
            envvar="PRYSM_SCHEMA_DIR",
            help="Directory where tenant schemas are saved",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON (machine-readable)",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Reject duplicate fields and second primary keys, and fail on missing foreign keys",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log builder activity to stderr"),
    ] = False,
) -> None:
    """Initialize CLI context with global options."""
    configure_logging(verbose)
    ctx.obj = CLIContext(
        schema_dir=get_schema_dir(schema_dir),
        json_output=json_output,
        strict=strict,
    )


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"Prysm v{prysm.__version__}")


from prysm.cli.commands import schema  # noqa: E402

app.add_typer(schema.app, name="schema")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
