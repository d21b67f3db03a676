"""React Hook Form resolver binder."""

from __future__ import annotations

from typing import Any

from formshape.binder.base import Binder
from formshape.binder.registry import BinderRegistry
from formshape.models.errors import ValidationResult
from formshape.transform import TransformKind, flatten_dict


@BinderRegistry.register
class RHFBinder(Binder):
    """Resolver shape: ``{"values": ..., "errors": {"dot.path": {"kind", "message"}}}``.

    On success ``values`` is the engine's (possibly sanitized) output value.
    """

    name = "rhf"
    transform = TransformKind.FLATTEN

    def on_valid(self, result: ValidationResult) -> dict[str, Any]:
        return {"values": result.value, "errors": {}}

    def on_invalid(self, result: ValidationResult) -> dict[str, Any]:
        return {"values": {}, "errors": flatten_dict(result.errors)}

    def raised_errors(self, output: dict[str, Any]) -> dict[str, Any]:
        return output["errors"]


def rhf_binder(schema: Any, *, throw_on_error: bool = False) -> RHFBinder:
    return RHFBinder(schema, throw_on_error=throw_on_error)
