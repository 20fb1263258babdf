"""Persistence of rendered schema documents, one file per tenant."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from prysm.exceptions import InvalidTenantIdError

if TYPE_CHECKING:
    from prysm.schema.builder import SchemaBuilder

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_DIR = "./prisma"
SCHEMA_EXTENSION = ".prisma"


class FileSchemaSink:
    """Writes schema documents to ``<root>/<tenant_id><extension>``.

    I/O errors are not handled here and propagate to the caller.
    """

    def __init__(
        self,
        root: str | Path = DEFAULT_SCHEMA_DIR,
        extension: str = SCHEMA_EXTENSION,
    ) -> None:
        """Initialize the sink.

        Args:
            root: Directory holding the documents (created on first save)
            extension: File extension, including the leading dot
        """
        self._root = Path(root)
        self._extension = extension

    @property
    def root(self) -> Path:
        """Storage root directory."""
        return self._root

    def path_for(self, tenant_id: str) -> Path:
        """Return the document path for a tenant.

        Raises:
            InvalidTenantIdError: If the id is empty or would escape the root
        """
        separators = {"/", os.sep, os.altsep or "/"}
        if not tenant_id or ".." in tenant_id or any(s in tenant_id for s in separators):
            raise InvalidTenantIdError(tenant_id)
        return self._root / f"{tenant_id}{self._extension}"

    def save(self, tenant_id: str, text: str) -> Path:
        """Write a rendered document for a tenant, replacing any previous one.

        Returns:
            Path of the written file
        """
        path = self.path_for(tenant_id)
        self._root.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info(f"Saved schema for tenant '{tenant_id}' to {path}")
        return path


def save_schema(
    builder: SchemaBuilder, tenant_id: str, sink: FileSchemaSink | None = None
) -> Path:
    """Render the builder's schema and persist it for a tenant."""
    sink = sink or FileSchemaSink()
    return sink.save(tenant_id, builder.generate_schema())
