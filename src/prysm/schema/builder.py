"""Schema builder: the mutation API for models, fields and relations."""

from __future__ import annotations

import logging
from typing import Any

from prysm.core.types import (
    FieldDefinition,
    ModelDefinition,
    RelationDefinition,
    Schema,
    to_default_expression,
    to_prisma_type,
)
from prysm.exceptions import (
    FieldAlreadyExistsError,
    FieldNotFoundError,
    PrimaryKeyAlreadySetError,
)
from prysm.schema.renderer import PrismaRenderer

logger = logging.getLogger(__name__)


class SchemaBuilder:
    """Accumulates model declarations and renders them as a Prisma schema.

    Models are addressed by name with get-or-create semantics: every mutation
    creates the model it names if it does not exist yet. Insertion order of
    models, fields and relations is preserved and drives output order.

    Example:
        builder = SchemaBuilder()
        builder.add_field("User", "id", "Int", "cuid()")
        builder.set_primary_key("User", "id")
        builder.add_field("User", "name", "String")
        print(builder.generate_schema())
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize an empty builder.

        Args:
            strict: Reject duplicate field names and second primary keys, and
                fail rendering when a relation's backing field is missing
        """
        self._strict = strict
        self._schema = Schema()
        self._renderer = PrismaRenderer(strict=strict)

    @property
    def strict(self) -> bool:
        """Whether validated construction is enabled."""
        return self._strict

    def _get_model(self, model_name: str) -> ModelDefinition:
        """Get a model by name, creating it if missing."""
        model = self._schema.find_model(model_name)
        if model is None:
            model = ModelDefinition(name=model_name)
            self._schema.models.append(model)
            logger.debug(f"Created model '{model_name}'")
        return model

    def create_model(self, model_name: str) -> None:
        """Ensure a model with this name exists. No-op if it already does."""
        self._get_model(model_name)

    def add_field(
        self,
        model_name: str,
        field_name: str,
        field_type: str,
        default: str | None = None,
        is_unique: bool = False,
    ) -> None:
        """Append a field to a model.

        Args:
            model_name: Owning model (created if missing)
            field_name: Field name
            field_type: Type label (see FieldType); unknown labels are kept verbatim
            default: Default expression ("cuid()", "uid()", "now()") or its
                name ("ClientGeneratedId", "CustomId", "CurrentTimestamp")
            is_unique: Whether values must be unique

        Raises:
            FieldAlreadyExistsError: In strict mode, if the field name is taken
        """
        model = self._get_model(model_name)
        if self._strict and model.find_field(field_name) is not None:
            raise FieldAlreadyExistsError(field_name, model_name)

        model.fields.append(
            FieldDefinition(
                name=field_name,
                type=to_prisma_type(field_type),
                default=to_default_expression(default),
                is_unique=bool(is_unique),
            )
        )
        logger.debug(f"Added field '{field_name}' ({field_type}) to '{model_name}'")

    def set_primary_key(self, model_name: str, field_name: str) -> None:
        """Mark an existing field as the model's primary key.

        Raises:
            FieldNotFoundError: If the model has no field with this name
            PrimaryKeyAlreadySetError: In strict mode, if another field is
                already the primary key
        """
        model = self._get_model(model_name)
        field = model.find_field(field_name)
        if field is None:
            raise FieldNotFoundError(field_name, model_name, model.field_names())

        if self._strict:
            current = model.primary_key()
            if current is not None and current is not field:
                raise PrimaryKeyAlreadySetError(model_name, current.name, field_name)

        field.is_primary_key = True

    def add_relation(
        self,
        model_name: str,
        relation_name: str,
        kind: str,
        related_model: str,
        inverse_relation: str | None = None,
        foreign_key: str | None = None,
    ) -> None:
        """Append a relation to a model.

        The related model does not need to exist yet.

        Args:
            model_name: Owning model (created if missing)
            relation_name: Relation field name on the owning model
            kind: OneToMany, ManyToOne, ManyToMany or OneToOne
            related_model: Target model name
            inverse_relation: Relation name on the target (informational only)
            foreign_key: Backing field name; when omitted the field is found by
                the '<relation_name>id' naming convention at render time
        """
        model = self._get_model(model_name)
        model.relations.append(
            RelationDefinition(
                name=relation_name,
                kind=str(kind),
                related_model=related_model,
                inverse_relation=inverse_relation or "",
                foreign_key=foreign_key,
            )
        )
        logger.debug(
            f"Added {kind} relation '{relation_name}' from '{model_name}' to '{related_model}'"
        )

    def get_schema(self) -> Schema:
        """Return the live schema. Changes to it are visible to the builder."""
        return self._schema

    def get_model(self, model_name: str) -> ModelDefinition | None:
        """Return a model by name without creating it."""
        return self._schema.find_model(model_name)

    def list_models(self) -> list[str]:
        """List model names in declaration order."""
        return self._schema.model_names()

    def describe(self) -> dict[str, Any]:
        """Return the schema as a JSON-serializable dict."""
        return self._schema.model_dump()

    def generate_schema(self) -> str:
        """Render the current schema as Prisma schema text."""
        return self._renderer.render(self._schema)

    def reset(self) -> None:
        """Discard all models."""
        self._schema = Schema()
        logger.debug("Schema reset")
