"""Formik validate binder."""

from __future__ import annotations

from typing import Any

from formshape.binder.base import MirrorBinder
from formshape.binder.registry import BinderRegistry


@BinderRegistry.register
class FormikBinder(MirrorBinder):
    """Errors mirror the form values; each field carries its first message.

    Formik reads ``values`` from its own state, so nothing is returned on success
    but an empty mapping.
    """

    name = "formik"


def formik_binder(schema: Any, *, throw_on_error: bool = False) -> FormikBinder:
    """Build a Formik ``validate`` function; raises ``ValidationError`` when ``throw_on_error``."""
    return FormikBinder(schema, throw_on_error=throw_on_error)
