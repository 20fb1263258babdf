"""Shared test fixtures for Prysm."""

import json
from collections.abc import Generator
from pathlib import Path

import pytest

from prysm import FileSchemaSink, SchemaBuilder


@pytest.fixture
def builder() -> SchemaBuilder:
    """A fresh permissive builder."""
    return SchemaBuilder()


@pytest.fixture
def strict_builder() -> SchemaBuilder:
    """A fresh builder with validated construction."""
    return SchemaBuilder(strict=True)


@pytest.fixture
def blog_builder(builder: SchemaBuilder) -> SchemaBuilder:
    """User/Post/Profile/Tag blog model covering every relation kind."""
    builder.create_model("User")
    builder.add_field("User", "id", "Int", "cuid()")
    builder.set_primary_key("User", "id")
    builder.add_field("User", "email", "String", None, True)
    builder.add_field("User", "profileId", "Int")
    builder.add_relation("User", "posts", "OneToMany", "Post", "author")
    builder.add_relation("User", "profile", "OneToOne", "Profile", "user")

    builder.create_model("Profile")
    builder.add_field("Profile", "id", "Int")
    builder.set_primary_key("Profile", "id")
    builder.add_relation("Profile", "user", "OneToOne", "User", "profile")

    builder.create_model("Post")
    builder.add_field("Post", "id", "Int")
    builder.set_primary_key("Post", "id")
    builder.add_field("Post", "authorId", "Int")
    builder.add_field("Post", "createdAt", "Date", "now()")
    builder.add_relation("Post", "author", "ManyToOne", "User", "posts")
    builder.add_relation("Post", "tags", "ManyToMany", "Tag", "posts")

    builder.create_model("Tag")
    builder.add_field("Tag", "id", "Int")
    builder.set_primary_key("Tag", "id")
    builder.add_relation("Tag", "posts", "ManyToMany", "Post", "tags")
    return builder


@pytest.fixture
def sink(tmp_path: Path) -> FileSchemaSink:
    """Sink writing into a temporary directory."""
    return FileSchemaSink(tmp_path / "prisma")


@pytest.fixture
def definition_file(tmp_path: Path) -> Generator[str, None, None]:
    """A JSON definition document equivalent to a small blog schema."""
    data = {
        "models": [
            {
                "name": "User",
                "fields": ["id:Int:id:default=cuid()", "email:String:unique"],
                "relations": [
                    {"name": "posts", "kind": "OneToMany", "related_model": "Post"},
                ],
            },
            {
                "name": "Post",
                "primary_key": "id",
                "fields": [
                    {"name": "id", "type": "Int"},
                    {"name": "authorId", "type": "Int"},
                ],
                "relations": [
                    {
                        "name": "author",
                        "kind": "ManyToOne",
                        "related_model": "User",
                        "inverse_relation": "posts",
                    },
                ],
            },
        ]
    }
    path = tmp_path / "models.json"
    path.write_text(json.dumps(data))
    yield str(path)
