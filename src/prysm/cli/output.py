"""Output formatting for CLI commands."""

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from prysm.core.types import ModelDefinition
from prysm.exceptions import PrysmError

console = Console()


class OutputFormatter:
    """Formats output for terminal or JSON mode."""

    def __init__(self, json_mode: bool = False) -> None:
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
        """
        self.json_mode = json_mode

    def print_schema_text(self, text: str) -> None:
        """Print rendered schema text.

        Plain mode prints the raw document so it can be redirected to a file.
        """
        if self.json_mode:
            print(json.dumps({"schema": text}, indent=2))
        else:
            print(text)

    def print_models(self, models: list[ModelDefinition]) -> None:
        """Print models with their fields and relations.

        Args:
            models: Models to display, in declaration order
        """
        if self.json_mode:
            print(json.dumps([m.model_dump() for m in models], indent=2))
            return

        for model in models:
            console.print(f"\n[bold]Model:[/bold] {model.name}")

            if model.fields:
                console.print(f"\n[bold]Fields ({len(model.fields)}):[/bold]")
                fields_table = Table(show_header=True, header_style="bold cyan")
                fields_table.add_column("Name")
                fields_table.add_column("Type")
                fields_table.add_column("Id")
                fields_table.add_column("Unique")
                fields_table.add_column("Default")

                for field in model.fields:
                    fields_table.add_row(
                        field.name,
                        field.type,
                        "✓" if field.is_primary_key else "",
                        "✓" if field.is_unique else "",
                        field.default or "",
                    )
                console.print(fields_table)

            if model.relations:
                console.print(f"\n[bold]Relations ({len(model.relations)}):[/bold]")
                rel_table = Table(show_header=True, header_style="bold cyan")
                rel_table.add_column("Name")
                rel_table.add_column("Kind")
                rel_table.add_column("To Model")
                rel_table.add_column("Inverse")

                for rel in model.relations:
                    rel_table.add_row(rel.name, rel.kind, rel.related_model, rel.inverse_relation)
                console.print(rel_table)

    def print_success(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Print success message.

        Args:
            message: Success message
            details: Optional details to display
        """
        if self.json_mode:
            output = {"success": True, "message": message}
            if details:
                output.update(details)
            print(json.dumps(output, default=str, indent=2))
        else:
            console.print(f"✓ {message}", style="green")
            if details:
                for key, value in details.items():
                    console.print(f"  {key}: {value}", style="dim")

    def print_error(self, error: Exception) -> None:
        """Print error message.

        Args:
            error: Exception to display
        """
        if self.json_mode:
            if isinstance(error, PrysmError):
                print(json.dumps(error.to_dict(), default=str, indent=2))
            else:
                print(json.dumps({"error": str(error)}, indent=2))
        else:
            error_text = str(error)
            if isinstance(error, PrysmError) and error.context:
                context_str = "\n".join(f"{k}: {v}" for k, v in error.context.items())
                error_text = f"{error_text}\n\n{context_str}"

            panel = Panel(
                error_text,
                title="[red]Error[/red]",
                border_style="red",
            )
            console.print(panel)
