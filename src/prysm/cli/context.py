"""CLI context management for shared options and the schema sink."""

import logging
import os
import sys
from dataclasses import dataclass, field

from prysm.schema.builder import SchemaBuilder
from prysm.schema.sink import DEFAULT_SCHEMA_DIR, FileSchemaSink


def get_schema_dir(path: str | None) -> str:
    """Resolve the schema storage root from CLI arg, environment variable, or default.

    Priority:
    1. Explicit path argument
    2. PRYSM_SCHEMA_DIR environment variable
    3. Default: ./prisma
    """
    if path:
        return path
    if env_path := os.getenv("PRYSM_SCHEMA_DIR"):
        return env_path
    return DEFAULT_SCHEMA_DIR


def configure_logging(verbose: bool) -> None:
    """Send debug logs to stderr so stdout stays clean for schema text."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@dataclass
class CLIContext:
    """Shared context for CLI commands."""

    schema_dir: str
    json_output: bool
    strict: bool = False
    _sink: FileSchemaSink | None = field(default=None, init=False, repr=False)

    def new_builder(self) -> SchemaBuilder:
        return SchemaBuilder(strict=self.strict)

    def get_sink(self) -> FileSchemaSink:
        """Get or create the document sink (lazy initialization)."""
        if self._sink is None:
            self._sink = FileSchemaSink(self.schema_dir)
        return self._sink
