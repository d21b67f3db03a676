"""Binder plugin registry: discover and register form-library binders."""

from __future__ import annotations

from typing import Any

from formshape.binder.base import Binder
from formshape.exceptions import FormshapeError


class UnsupportedBinderError(FormshapeError):
    """Raised when a requested binder is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.binder_name = name
        self.available = available
        super().__init__(f"Unsupported binder '{name}'. Available: {', '.join(available)}")


class BinderRegistry:
    """Registry for form-library binders."""

    _binders: dict[str, type[Binder]] = {}

    @classmethod
    def register(cls, binder_class: type[Binder]) -> type[Binder]:
        """Register a binder class. Can be used as a decorator."""
        cls._binders[binder_class.name] = binder_class
        return binder_class

    @classmethod
    def binder_class(cls, name: str) -> type[Binder]:
        """Return the class registered under ``name``."""
        if name not in cls._binders:
            raise UnsupportedBinderError(name, available=cls.available())
        return cls._binders[name]

    @classmethod
    def get(cls, name: str, schema: Any, **options: Any) -> Binder:
        """Build the named binder around ``schema``."""
        return cls.binder_class(name)(schema, **options)

    @classmethod
    def available(cls) -> list[str]:
        """List registered binder names."""
        return sorted(cls._binders.keys())

    @classmethod
    def reset(cls) -> None:
        """Clear all registered binders (for testing)."""
        cls._binders.clear()
