"""Input parsing utilities for CLI commands."""

import json
from pathlib import Path
from typing import Any

from prysm.exceptions import DefinitionError
from prysm.schema.builder import SchemaBuilder


def parse_field_spec(spec: str) -> dict[str, Any]:
    """Parse a field shorthand string.

    Format: name:Type[:modifier1][:modifier2]...

    Examples:
        "id:Int:id:default=cuid()" → {"name": "id", "type": "Int", "primary_key": True, "default": "cuid()"}
        "email:String:unique" → {"name": "email", "type": "String", "unique": True}

    Args:
        spec: Field specification string

    Returns:
        Field dictionary with parsed attributes

    Raises:
        DefinitionError: If spec format is invalid
    """
    parts = spec.split(":")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise DefinitionError(
            f"Invalid field spec: '{spec}'. Expected format: name:Type[:modifier]...",
            {"spec": spec},
        )

    field: dict[str, Any] = {
        "name": parts[0],
        "type": parts[1],
        "primary_key": False,
        "unique": False,
        "default": None,
    }

    for modifier in parts[2:]:
        if modifier.startswith("default="):
            field["default"] = modifier.split("=", 1)[1]
        elif modifier == "id":
            field["primary_key"] = True
        elif modifier == "unique":
            field["unique"] = True
        else:
            raise DefinitionError(
                f"Invalid modifier: '{modifier}'. Supported: id, unique, default=<expression>",
                {"spec": spec, "modifier": modifier},
            )

    return field


def read_json_file(path: str) -> dict[str, Any]:
    """Read a single JSON object from file.

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file contains invalid JSON
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with file_path.open("r") as f:
        return json.load(f)


def load_definition(data: dict[str, Any], builder: SchemaBuilder) -> SchemaBuilder:
    """Replay a definition document onto a builder.

    The document looks like::

        {
          "models": [
            {
              "name": "User",
              "primary_key": "id",
              "fields": ["id:Int:default=cuid()", {"name": "email", "type": "String", "unique": true}],
              "relations": [{"name": "posts", "kind": "OneToMany", "related_model": "Post"}]
            }
          ]
        }

    Models are declared first, then all fields and primary keys, then all
    relations, so the document order of models is the output order.

    Raises:
        DefinitionError: If the document structure is invalid
    """
    models = data.get("models")
    if not isinstance(models, list):
        raise DefinitionError("Definition must contain a 'models' list.", {"keys": list(data)})

    for model in models:
        if not isinstance(model, dict) or not model.get("name"):
            raise DefinitionError("Every model needs a 'name'.", {"model": model})
        builder.create_model(model["name"])

    for model in models:
        name = model["name"]
        for raw in model.get("fields", []):
            field = parse_field_spec(raw) if isinstance(raw, str) else raw
            if not isinstance(field, dict):
                raise DefinitionError(
                    f"Field on '{name}' must be a string or an object.",
                    {"model": name, "field": field},
                )
            if "name" not in field or "type" not in field:
                raise DefinitionError(
                    f"Field on '{name}' needs 'name' and 'type'.", {"model": name, "field": field}
                )
            builder.add_field(
                name,
                field["name"],
                field["type"],
                field.get("default"),
                bool(field.get("unique", False)),
            )
            if field.get("primary_key"):
                builder.set_primary_key(name, field["name"])
        if model.get("primary_key"):
            builder.set_primary_key(name, model["primary_key"])

    for model in models:
        for relation in model.get("relations", []):
            if not isinstance(relation, dict):
                raise DefinitionError(
                    f"Relation on '{model['name']}' must be an object.",
                    {"model": model["name"], "relation": relation},
                )
            try:
                builder.add_relation(
                    model["name"],
                    relation["name"],
                    relation["kind"],
                    relation["related_model"],
                    relation.get("inverse_relation"),
                    relation.get("foreign_key"),
                )
            except KeyError as e:
                raise DefinitionError(
                    f"Relation on '{model['name']}' is missing {e}.",
                    {"model": model["name"], "relation": relation},
                ) from e

    return builder
