"""Felte binder."""

from __future__ import annotations

from typing import Any

from formshape.binder.base import MirrorBinder
from formshape.binder.registry import BinderRegistry


@BinderRegistry.register
class FelteBinder(MirrorBinder):
    name = "felte"


def felte_binder(schema: Any, *, throw_on_error: bool = False) -> FelteBinder:
    return FelteBinder(schema, throw_on_error=throw_on_error)
