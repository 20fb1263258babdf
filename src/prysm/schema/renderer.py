"""Prisma schema text generation.

Rendering runs in two passes:

1. Uniqueness inference - the backing field of every one-to-one relation is
   marked unique in a derived rendering view. Stored fields are never
   touched, so rendering the same schema twice yields the same text.
2. Emission - one ``model`` block per model, fields first, then relations,
   all in declaration order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from prysm.core.types import (
    FieldDefinition,
    ModelDefinition,
    RelationDefinition,
    RelationKind,
    Schema,
)
from prysm.exceptions import BackingFieldNotFoundError

logger = logging.getLogger(__name__)

DATASOURCE_PREAMBLE = (
    "datasource db {\n"
    '  provider = "postgresql"\n'
    '  url      = env("DATABASE_URL")\n'
    "}\n\n"
)


def many_to_many_relation_name(model_a: str, model_b: str) -> str:
    """Canonical relation table name for a many-to-many pair (e.g., PostToTag)."""
    first, second = sorted([model_a, model_b])
    return f"{first}To{second}"


def one_to_one_relation_name(model_a: str, model_b: str) -> str:
    """Canonical relation name for a one-to-one pair (e.g., RelationBetweenProfileAndUser)."""
    first, second = sorted([model_a, model_b])
    return f"RelationBetween{first}And{second}"


def find_backing_field(
    model: ModelDefinition, relation: RelationDefinition
) -> FieldDefinition | None:
    """Locate the scalar field storing the foreign key of a relation.

    An explicit ``foreign_key`` is matched by exact name. Otherwise the first
    field whose lowercased name contains ``<relation name>id`` is used, so
    ``author`` matches ``authorId`` and ``author_id`` does not.
    """
    if relation.foreign_key:
        return model.find_field(relation.foreign_key)

    needle = relation.name.lower() + "id"
    return next((f for f in model.fields if needle in f.name.lower()), None)


@dataclass(frozen=True)
class RenderedField:
    """Read-only snapshot of a field as it will be emitted."""

    name: str
    type: str
    is_primary_key: bool
    is_unique: bool
    default: str | None

    def to_line(self) -> str:
        """Format the field as one line of a model block."""
        line = f"  {self.name} {self.type}"
        if self.is_primary_key:
            line += " @id"
        if self.default:
            line += f" @default({self.default})"
        if self.is_unique:
            line += " @unique"
        return line


@dataclass(frozen=True)
class RenderedModel:
    """Read-only snapshot of a model after uniqueness inference."""

    name: str
    fields: tuple[RenderedField, ...]
    relations: tuple[RelationDefinition, ...]
    source: ModelDefinition


class PrismaRenderer:
    """Renders a Schema into Prisma schema-definition text.

    In permissive mode (the default) a many-to-one relation without a backing
    field is left out and a one-to-one relation without one falls back to the
    optional inverse form. With ``strict=True`` a missing backing field on a
    many-to-one relation, or an explicit ``foreign_key`` that does not exist,
    raises BackingFieldNotFoundError instead.
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    def render(self, schema: Schema) -> str:
        """Render the full document: datasource preamble plus one block per model."""
        views = self.build_view(schema)
        document = DATASOURCE_PREAMBLE
        for view in views:
            document += self._render_model(view)
        return document.strip()

    def build_view(self, schema: Schema) -> list[RenderedModel]:
        """Run uniqueness inference and return the rendering view."""
        views = []
        for model in schema.models:
            inferred_unique: set[int] = set()
            for relation in model.relations:
                if relation.kind != RelationKind.ONE_TO_ONE:
                    continue
                backing = find_backing_field(model, relation)
                if backing is not None:
                    inferred_unique.add(id(backing))

            fields = tuple(
                RenderedField(
                    name=f.name,
                    type=f.type,
                    is_primary_key=f.is_primary_key,
                    is_unique=f.is_unique or id(f) in inferred_unique,
                    default=f.default,
                )
                for f in model.fields
            )
            views.append(
                RenderedModel(
                    name=model.name,
                    fields=fields,
                    relations=tuple(model.relations),
                    source=model,
                )
            )
        return views

    def _render_model(self, view: RenderedModel) -> str:
        lines = [f"model {view.name} {{"]
        lines.extend(field.to_line() for field in view.fields)
        for relation in view.relations:
            line = self._render_relation(view.source, relation)
            if line is not None:
                lines.append(line)
        lines.append("}")
        return "\n".join(lines) + "\n\n"

    def _render_relation(self, model: ModelDefinition, relation: RelationDefinition) -> str | None:
        name = relation.name
        related = relation.related_model

        if relation.kind == RelationKind.ONE_TO_MANY:
            return f"  {name} {related}[]"

        if relation.kind == RelationKind.MANY_TO_ONE:
            backing = self._resolve_backing_field(model, relation, required=True)
            if backing is None:
                logger.warning(
                    f"Omitting relation '{name}' on '{model.name}': "
                    f"no field matching '{_expected_backing_name(relation)}'"
                )
                return None
            return f"  {name} {related} @relation(fields: [{backing.name}], references: [id])"

        if relation.kind == RelationKind.MANY_TO_MANY:
            table = many_to_many_relation_name(model.name, related)
            return f'  {name} {related}[] @relation("{table}")'

        if relation.kind == RelationKind.ONE_TO_ONE:
            canonical = one_to_one_relation_name(model.name, related)
            backing = self._resolve_backing_field(model, relation, required=False)
            if backing is None:
                return f'  {name} {related}? @relation(name: "{canonical}")'
            return (
                f'  {name} {related} @relation(name: "{canonical}", '
                f"fields: [{backing.name}], references: [id])"
            )

        logger.warning(
            f"Skipping relation '{name}' on '{model.name}': unknown kind '{relation.kind}'"
        )
        return None

    def _resolve_backing_field(
        self, model: ModelDefinition, relation: RelationDefinition, required: bool
    ) -> FieldDefinition | None:
        backing = find_backing_field(model, relation)
        if backing is None and self._strict and (required or relation.foreign_key):
            raise BackingFieldNotFoundError(
                relation.name, model.name, _expected_backing_name(relation)
            )
        return backing


def _expected_backing_name(relation: RelationDefinition) -> str:
    return relation.foreign_key or f"{relation.name}Id"


def render_schema(schema: Schema, strict: bool = False) -> str:
    """Render a schema with a one-off renderer."""
    return PrismaRenderer(strict=strict).render(schema)
