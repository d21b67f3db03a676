"""Abstract base binder: run the validation engine once, reshape its errors for one form library."""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from formshape.engine import coerce_result, ensure_schema
from formshape.exceptions import ValidationError
from formshape.models.errors import ValidationResult
from formshape.transform import TransformKind, flatten_messages, mirror

logger = logging.getLogger("formshape.binder")


class Binder(ABC):
    """Base for all form-library binders.

    A binder wraps a schema and is awaited with the form values::

        validate = FormikBinder(schema)
        errors = await validate(values)

    The schema is checked at construction, so a schema without a callable
    ``validate`` fails immediately instead of at the first submit.  With
    ``throw_on_error`` the reshaped errors are raised as
    :class:`~formshape.exceptions.ValidationError` instead of returned.
    """

    name: ClassVar[str]
    transform: ClassVar[TransformKind]

    def __init__(self, schema: Any, *, throw_on_error: bool = False) -> None:
        self._schema = ensure_schema(schema, self.name)
        self.throw_on_error = throw_on_error

    async def __call__(self, values: Any) -> Any:
        raw = self._schema.validate(values)
        if inspect.isawaitable(raw):
            raw = await raw
        result = coerce_result(raw)
        if result.valid:
            return self.on_valid(result)

        output = self.on_invalid(result)
        logger.debug("%s binder: validation failed (%s)", self.name, self.transform)
        if self.throw_on_error:
            raise ValidationError(self.raised_errors(output))
        return output

    def on_valid(self, result: ValidationResult) -> Any:
        """Empty-error representation returned when validation passes."""
        return {}

    def raised_errors(self, output: Any) -> Any:
        """Part of the invalid output carried by a raised ``ValidationError``."""
        return output

    @abstractmethod
    def on_invalid(self, result: ValidationResult) -> Any:
        """Reshape the error tree of a failed validation."""


class MirrorBinder(Binder):
    """Binder for libraries that expect errors shaped like the form values."""

    transform = TransformKind.MIRROR

    def on_invalid(self, result: ValidationResult) -> Any:
        return mirror(result.errors)


class FlatMessageBinder(Binder):
    """Binder for libraries that expect ``{"dot.path": "message"}``."""

    transform = TransformKind.FLATTEN

    def on_invalid(self, result: ValidationResult) -> dict[str, str]:
        return flatten_messages(result.errors)
