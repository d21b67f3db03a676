"""TanStack Form binder."""

from __future__ import annotations

from typing import Any

from formshape.binder.base import FlatMessageBinder
from formshape.binder.registry import BinderRegistry


@BinderRegistry.register
class TanStackBinder(FlatMessageBinder):
    """Form-level validator returning ``{"dot.path": "message"}``."""

    name = "tanstack"


def tanstack_binder(schema: Any, *, throw_on_error: bool = False) -> TanStackBinder:
    return TanStackBinder(schema, throw_on_error=throw_on_error)
