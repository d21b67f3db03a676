"""Structured error models shared by the transforms, binders and the API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """The first violation recorded for one field, as emitted by ``flatten``."""

    kind: str
    message: str


class ValidationResult(BaseModel):
    """Result of one validation engine call.

    ``errors`` is the raw error tree and is only populated when ``valid``
    is false.  It is kept as-is (no copying or coercion).
    """

    valid: bool
    value: Any = None
    errors: Any = None
