"""Pydantic models for formshape."""

from formshape.models.errors import FieldError, ValidationResult

__all__ = [
    "FieldError",
    "ValidationResult",
]
