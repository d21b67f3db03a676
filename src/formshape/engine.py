"""Contract of the validation engine consumed by binders."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from formshape.exceptions import ConfigurationError
from formshape.models.errors import ValidationResult


@runtime_checkable
class Schema(Protocol):
    """Anything with a ``validate(value)`` (sync or async) returning a validation result."""

    def validate(self, value: Any) -> Any: ...


def ensure_schema(schema: Any, binder_name: str) -> Schema:
    """Return ``schema`` if it exposes a callable ``validate``, else raise ``ConfigurationError``."""
    if schema is None or not callable(getattr(schema, "validate", None)):
        raise ConfigurationError(binder_name)
    return schema


def coerce_result(raw: Any) -> ValidationResult:
    """Normalize an engine result (mapping or attribute object) into ``ValidationResult``."""
    if isinstance(raw, ValidationResult):
        return raw
    if isinstance(raw, Mapping):
        return ValidationResult.model_validate(dict(raw))
    return ValidationResult.model_validate(raw, from_attributes=True)
