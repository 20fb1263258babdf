"""Tests for the schema builder mutation API."""

import pytest

from prysm import SchemaBuilder
from prysm.exceptions import (
    FieldAlreadyExistsError,
    FieldNotFoundError,
    PrimaryKeyAlreadySetError,
)


class TestModels:
    """Tests for get-or-create model semantics."""

    def test_empty_builder(self, builder: SchemaBuilder):
        """A new builder has no models."""
        assert builder.list_models() == []
        assert builder.get_schema().models == []

    def test_create_model(self, builder: SchemaBuilder):
        """create_model adds an empty model."""
        builder.create_model("User")
        model = builder.get_model("User")
        assert model is not None
        assert model.fields == []
        assert model.relations == []

    def test_create_model_idempotent(self, builder: SchemaBuilder):
        """Creating the same model twice yields one model."""
        builder.create_model("User")
        builder.add_field("User", "id", "Int")
        builder.create_model("User")
        assert builder.list_models() == ["User"]
        assert len(builder.get_model("User").fields) == 1

    def test_mutations_create_missing_models(self, builder: SchemaBuilder):
        """add_field and add_relation create the model they name."""
        builder.add_field("Post", "id", "Int")
        builder.add_relation("Comment", "post", "ManyToOne", "Post")
        assert builder.list_models() == ["Post", "Comment"]

    def test_related_model_not_created(self, builder: SchemaBuilder):
        """Relations may point at models that do not exist yet."""
        builder.add_relation("User", "posts", "OneToMany", "Post")
        assert builder.get_model("Post") is None

    def test_get_model_does_not_create(self, builder: SchemaBuilder):
        """get_model is read-only."""
        assert builder.get_model("Ghost") is None
        assert builder.list_models() == []

    def test_declaration_order_preserved(self, builder: SchemaBuilder):
        """Models keep insertion order."""
        for name in ["Zeta", "Alpha", "Mid"]:
            builder.create_model(name)
        assert builder.list_models() == ["Zeta", "Alpha", "Mid"]


class TestFields:
    """Tests for add_field."""

    def test_type_mapping(self, builder: SchemaBuilder):
        """Type labels map to Prisma tokens."""
        labels = ["Int", "String", "String[]", "Boolean", "Date", "Float", "float", "Json"]
        for i, label in enumerate(labels):
            builder.add_field("T", f"f{i}", label)
        types = [f.type for f in builder.get_model("T").fields]
        assert types == ["Int", "String", "String[]", "Boolean", "DateTime", "Float", "Float", "Json"]

    def test_unknown_type_passes_through(self, builder: SchemaBuilder):
        """Unknown type labels are kept verbatim."""
        builder.add_field("T", "amount", "Decimal")
        assert builder.get_model("T").fields[0].type == "Decimal"
        assert "amount Decimal" in builder.generate_schema()

    def test_default_names_normalized(self, builder: SchemaBuilder):
        """Default names map to generator expressions."""
        builder.add_field("T", "a", "String", "ClientGeneratedId")
        builder.add_field("T", "b", "String", "CustomId")
        builder.add_field("T", "c", "Date", "CurrentTimestamp")
        builder.add_field("T", "d", "Date", "now()")
        defaults = [f.default for f in builder.get_model("T").fields]
        assert defaults == ["cuid()", "uid()", "now()", "now()"]

    def test_field_defaults(self, builder: SchemaBuilder):
        """New fields are not primary, not unique and have no default."""
        builder.add_field("T", "name", "String")
        field = builder.get_model("T").fields[0]
        assert field.is_primary_key is False
        assert field.is_unique is False
        assert field.default is None

    def test_duplicate_field_allowed(self, builder: SchemaBuilder):
        """Permissive mode appends duplicate field names."""
        builder.add_field("T", "name", "String")
        builder.add_field("T", "name", "Int")
        assert builder.get_model("T").field_names() == ["name", "name"]

    def test_duplicate_field_rejected_in_strict(self, strict_builder: SchemaBuilder):
        """Strict mode rejects a second field with the same name."""
        strict_builder.add_field("T", "name", "String")
        with pytest.raises(FieldAlreadyExistsError) as exc_info:
            strict_builder.add_field("T", "name", "Int")
        assert "already exists" in str(exc_info.value)
        assert strict_builder.get_model("T").field_names() == ["name"]


class TestPrimaryKey:
    """Tests for set_primary_key."""

    def test_set_primary_key(self, builder: SchemaBuilder):
        """An existing field can become the primary key."""
        builder.add_field("User", "id", "Int")
        builder.set_primary_key("User", "id")
        assert builder.get_model("User").primary_key().name == "id"

    def test_missing_field_raises(self, builder: SchemaBuilder):
        """Unknown fields raise FieldNotFoundError naming model and field."""
        builder.add_field("User", "email", "String")
        with pytest.raises(FieldNotFoundError) as exc_info:
            builder.set_primary_key("User", "id")
        error = exc_info.value
        assert error.field_name == "id"
        assert error.model_name == "User"
        assert "Available fields: email" in str(error)
        assert builder.get_model("User").primary_key() is None

    def test_missing_field_on_new_model(self, builder: SchemaBuilder):
        """The model is still created even though the call fails."""
        with pytest.raises(FieldNotFoundError) as exc_info:
            builder.set_primary_key("Ghost", "id")
        assert "No fields defined" in str(exc_info.value)
        assert builder.list_models() == ["Ghost"]

    def test_exact_name_match(self, builder: SchemaBuilder):
        """Primary key lookup is case-sensitive."""
        builder.add_field("User", "Id", "Int")
        with pytest.raises(FieldNotFoundError):
            builder.set_primary_key("User", "id")

    def test_second_primary_key_allowed(self, builder: SchemaBuilder):
        """Permissive mode allows several @id fields."""
        builder.add_field("T", "a", "Int")
        builder.add_field("T", "b", "Int")
        builder.set_primary_key("T", "a")
        builder.set_primary_key("T", "b")
        assert [f.is_primary_key for f in builder.get_model("T").fields] == [True, True]

    def test_second_primary_key_rejected_in_strict(self, strict_builder: SchemaBuilder):
        """Strict mode allows only one primary key per model."""
        strict_builder.add_field("T", "a", "Int")
        strict_builder.add_field("T", "b", "Int")
        strict_builder.set_primary_key("T", "a")
        strict_builder.set_primary_key("T", "a")
        with pytest.raises(PrimaryKeyAlreadySetError) as exc_info:
            strict_builder.set_primary_key("T", "b")
        assert exc_info.value.existing_field == "a"


class TestRelations:
    """Tests for add_relation."""

    def test_add_relation(self, builder: SchemaBuilder):
        """Relations are stored with their attributes."""
        builder.add_relation("Post", "author", "ManyToOne", "User", "posts")
        relation = builder.get_model("Post").relations[0]
        assert relation.name == "author"
        assert relation.kind == "ManyToOne"
        assert relation.related_model == "User"
        assert relation.inverse_relation == "posts"
        assert relation.foreign_key is None

    def test_inverse_defaults_to_empty(self, builder: SchemaBuilder):
        """Inverse relation name defaults to an empty string."""
        builder.add_relation("User", "posts", "OneToMany", "Post")
        assert builder.get_model("User").relations[0].inverse_relation == ""

    def test_inverse_never_rendered(self, builder: SchemaBuilder):
        """The inverse relation name is informational only."""
        builder.add_relation("User", "posts", "OneToMany", "Post", "writtenBy")
        assert "writtenBy" not in builder.generate_schema()


class TestSchemaAccess:
    """Tests for get_schema, describe and reset."""

    def test_get_schema_is_live(self, builder: SchemaBuilder):
        """The returned schema reflects later mutations."""
        schema = builder.get_schema()
        builder.create_model("User")
        assert schema.model_names() == ["User"]

    def test_describe(self, builder: SchemaBuilder):
        """describe returns plain dicts."""
        builder.add_field("User", "id", "Int")
        data = builder.describe()
        assert data["models"][0]["name"] == "User"
        assert data["models"][0]["fields"][0]["type"] == "Int"

    def test_reset(self, blog_builder: SchemaBuilder):
        """Reset leaves only the datasource preamble."""
        blog_builder.reset()
        schema = blog_builder.generate_schema()
        assert blog_builder.list_models() == []
        assert "model " not in schema
        assert schema.startswith("datasource db {")

    def test_builders_are_independent(self):
        """Two builders do not share state."""
        a = SchemaBuilder()
        b = SchemaBuilder()
        a.create_model("User")
        assert b.list_models() == []
