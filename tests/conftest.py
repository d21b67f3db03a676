"""Shared test fixtures for formshape."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from formshape.settings import Settings


def leaf(kind: str, message: str, **context: Any) -> dict[str, Any]:
    """A raw rule violation as a validation engine reports it."""
    entry: dict[str, Any] = {"kind": kind, "message": message}
    if context:
        entry["context"] = context
    return entry


class FakeSchema:
    """Stand-in validation engine returning a canned result."""

    def __init__(self, result: Any) -> None:
        self.result = result
        self.calls: list[Any] = []

    async def validate(self, value: Any) -> Any:
        self.calls.append(value)
        return self.result


@pytest.fixture
def make_schema() -> Callable[..., FakeSchema]:
    def _make(valid: bool = False, value: Any = None, errors: Any = None) -> FakeSchema:
        return FakeSchema({"valid": valid, "value": value, "errors": errors})

    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="DEBUG")


SAMPLE_TREE_YAML = """\
user:
  profile:
    email:
      - kind: email
        message: Invalid email
tags:
  $array:
    - someData: value
    - null
  $items:
    1:
      - kind: isEmpty
        message: Cannot be empty
"""
