"""@mantine/form binder."""

from __future__ import annotations

from typing import Any

from formshape.binder.base import MirrorBinder
from formshape.binder.registry import BinderRegistry


@BinderRegistry.register
class MantineBinder(MirrorBinder):
    name = "mantine"


def mantine_binder(schema: Any, *, throw_on_error: bool = False) -> MantineBinder:
    return MantineBinder(schema, throw_on_error=throw_on_error)
