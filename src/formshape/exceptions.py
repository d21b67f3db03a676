"""Exception hierarchy for formshape."""

from __future__ import annotations

from typing import Any


class FormshapeError(Exception):
    """Base class for all formshape errors."""


class ConfigurationError(FormshapeError, TypeError):
    """Raised when a binder is built around an unusable schema."""

    def __init__(self, binder_name: str, missing: str = "validate") -> None:
        self.binder_name = binder_name
        self.missing = missing
        super().__init__(f"{binder_name} binder requires a schema with a {missing} method")


class ValidationError(FormshapeError):
    """Raised by binders configured with ``throw_on_error`` when validation fails.

    ``errors`` holds the binder's reshaped error output, untouched.
    """

    name = "ValidationError"

    def __init__(self, errors: Any) -> None:
        super().__init__("Validation failed")
        self.errors = errors

    @property
    def message(self) -> str:
        return str(self)
