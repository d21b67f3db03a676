"""API request/response Pydantic schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from formshape.models.errors import FieldError


class TreeRequest(BaseModel):
    """Request body carrying one serialized error tree."""

    errors: Any = Field(
        default=None,
        description="Error tree as returned by the validation engine; "
        "array fields with element errors use {'$array': [...], '$items': {...}}",
    )


class FlattenResponse(BaseModel):
    """Response body for POST /flatten."""

    errors: dict[str, FieldError] = {}


class MessagesResponse(BaseModel):
    """Response body for POST /flatten/messages."""

    errors: dict[str, str] = {}


class MirrorResponse(BaseModel):
    """Response body for POST /mirror."""

    errors: dict[str, Any] | str = {}


class BinderInfo(BaseModel):
    """A registered binder and the transform it routes errors through."""

    name: str
    transform: str


class BinderListResponse(BaseModel):
    binders: list[BinderInfo]


class HealthResponse(BaseModel):
    status: str
    version: str
