"""Flatten an error tree into a single-level map keyed by dot-joined paths.

Nested objects become ``a.b.c``, array elements become ``tags.0``.  Only the
first violation of each field is kept.  Field names are used verbatim, so a
name that itself contains ``.`` produces an ambiguous path.
"""

from __future__ import annotations

from typing import Any

from formshape.models.errors import FieldError
from formshape.tree.nodes import (
    ArrayHybrid,
    FieldMap,
    IndexedItems,
    Leaf,
    LeafGroup,
    ObjectWrapper,
)
from formshape.tree.visitor import TreeVisitor

PATH_SEPARATOR = "."


def join_path(prefix: str, segment: str) -> str:
    """Append ``segment`` to ``prefix``; the root prefix is the empty string."""
    return f"{prefix}{PATH_SEPARATOR}{segment}" if prefix else segment


class _FlattenVisitor(TreeVisitor):
    """Accumulates ``path -> FieldError`` for a single ``flatten`` call."""

    def __init__(self) -> None:
        self.out: dict[str, FieldError] = {}

    def _emit(self, path: str, leaf: Leaf) -> None:
        # A later branch on the same path overwrites; items come after elements.
        self.out[path] = FieldError(kind=leaf.kind, message=leaf.message)

    def visit_leaf(self, node: Leaf, path: str) -> None:
        self._emit(path, node)

    def visit_leafgroup(self, node: LeafGroup, path: str) -> None:
        self._emit(path, node.first)

    def visit_fieldmap(self, node: FieldMap, path: str) -> None:
        for name, child in node.fields.items():
            self.visit(child, join_path(path, name))

    def visit_objectwrapper(self, node: ObjectWrapper, path: str) -> None:
        self.visit(node.inner, path)

    def visit_indexeditems(self, node: IndexedItems, path: str) -> None:
        for index, child in node.items.items():
            self.visit(child, join_path(path, index))

    def visit_arrayhybrid(self, node: ArrayHybrid, path: str) -> None:
        for i, element in enumerate(node.elements):
            self.visit(element, join_path(path, str(i)))
        if node.items:
            self.visit(IndexedItems(items=node.items), path)


def flatten(tree: Any) -> dict[str, FieldError]:
    """Flatten ``tree`` into ``{path: FieldError}``. ``None`` yields ``{}``."""
    if tree is None:
        return {}
    visitor = _FlattenVisitor()
    visitor.visit(tree, "")
    return visitor.out


def flatten_messages(tree: Any) -> dict[str, str]:
    """Flatten ``tree`` and keep only the message of each field."""
    return {path: error.message for path, error in flatten(tree).items()}


def flatten_dict(tree: Any) -> dict[str, dict[str, str]]:
    """Flatten ``tree`` into plain ``{path: {"kind", "message"}}`` dicts."""
    return {path: error.model_dump() for path, error in flatten(tree).items()}
