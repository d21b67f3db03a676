"""VeeValidate binder."""

from __future__ import annotations

from typing import Any

from formshape.binder.base import FlatMessageBinder
from formshape.binder.registry import BinderRegistry


@BinderRegistry.register
class VeeValidateBinder(FlatMessageBinder):
    """Function-style validation schema: ``{"dot.path": "message"}``."""

    name = "veevalidate"


def vee_binder(schema: Any, *, throw_on_error: bool = False) -> VeeValidateBinder:
    return VeeValidateBinder(schema, throw_on_error=throw_on_error)
