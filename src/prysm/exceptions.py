"""Custom exceptions for Prysm.

All exceptions follow the same conventions:
- Actionable messages that say what went wrong AND how to fix it
- Structured context for agents and JSON output
"""

from __future__ import annotations

from typing import Any


class PrysmError(Exception):
    """Base exception for all Prysm errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Return error as JSON-serializable dict for agent consumption."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class ModelNotFoundError(PrysmError):
    """Model does not exist in the schema."""

    def __init__(self, model_name: str, available_models: list[str] | None = None) -> None:
        available = available_models or []
        if available:
            message = f"Model '{model_name}' not found. Available models: {', '.join(available)}"
        else:
            message = f"Model '{model_name}' not found. No models exist yet."

        super().__init__(message, {"model_name": model_name, "available_models": available})
        self.model_name = model_name
        self.available_models = available


class FieldNotFoundError(PrysmError):
    """Field does not exist on model."""

    def __init__(
        self, field_name: str, model_name: str, available_fields: list[str] | None = None
    ) -> None:
        available = available_fields or []
        if available:
            message = (
                f"Field '{field_name}' not found in model '{model_name}'. "
                f"Available fields: {', '.join(available)}"
            )
        else:
            message = (
                f"Field '{field_name}' not found in model '{model_name}'. "
                "No fields defined. Add the field before marking it as primary key."
            )

        super().__init__(
            message,
            {
                "field_name": field_name,
                "model_name": model_name,
                "available_fields": available,
            },
        )
        self.field_name = field_name
        self.model_name = model_name
        self.available_fields = available


class FieldAlreadyExistsError(PrysmError):
    """Field already exists on model (strict mode only)."""

    def __init__(self, field_name: str, model_name: str) -> None:
        message = (
            f"Field '{field_name}' already exists in model '{model_name}'. "
            "Use a different name or build without strict=True to allow duplicates."
        )
        super().__init__(message, {"field_name": field_name, "model_name": model_name})
        self.field_name = field_name
        self.model_name = model_name


class PrimaryKeyAlreadySetError(PrysmError):
    """Model already has a different primary key (strict mode only)."""

    def __init__(self, model_name: str, existing_field: str, field_name: str) -> None:
        message = (
            f"Model '{model_name}' already has primary key '{existing_field}'. "
            f"Cannot also mark '{field_name}' as primary key."
        )
        super().__init__(
            message,
            {
                "model_name": model_name,
                "existing_field": existing_field,
                "field_name": field_name,
            },
        )
        self.model_name = model_name
        self.existing_field = existing_field
        self.field_name = field_name


class BackingFieldNotFoundError(PrysmError):
    """Relation needs a foreign-key field that the model does not declare (strict mode only)."""

    def __init__(self, relation_name: str, model_name: str, expected: str) -> None:
        message = (
            f"Relation '{relation_name}' on model '{model_name}' has no backing field. "
            f"Add a field matching '{expected}' or pass foreign_key explicitly."
        )
        super().__init__(
            message,
            {"relation_name": relation_name, "model_name": model_name, "expected": expected},
        )
        self.relation_name = relation_name
        self.model_name = model_name
        self.expected = expected


class InvalidTenantIdError(PrysmError):
    """Tenant identifier cannot be used as a document name."""

    def __init__(self, tenant_id: str) -> None:
        message = (
            f"Invalid tenant id '{tenant_id}'. "
            "Tenant ids must be non-empty and must not contain path separators or '..'."
        )
        super().__init__(message, {"tenant_id": tenant_id})
        self.tenant_id = tenant_id


class DefinitionError(PrysmError):
    """A model definition document is malformed."""

    pass
