"""Mirror an error tree into the shape of the validated values, with string leaves.

Each field keeps its position in the nested structure and carries the
message of its first violation.  Branches without errors are left out.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formshape.tree.classifier import as_leaf
from formshape.tree.nodes import (
    ArrayHybrid,
    FieldMap,
    IndexedItems,
    Leaf,
    LeafGroup,
    ObjectWrapper,
)
from formshape.tree.visitor import TreeVisitor

# Per-element errors of an array field are surfaced under this key.
ITEMS_KEY = "items"

MirrorValue = str | dict[str, Any]


class _MirrorVisitor(TreeVisitor):
    def visit_leaf(self, node: Leaf) -> str:
        return node.message

    def visit_leafgroup(self, node: LeafGroup) -> str:
        return node.first.message

    def visit_fieldmap(self, node: FieldMap) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for name, child in node.fields.items():
            sub = self.visit(child)
            if sub is not None:
                out[name] = sub
        return out

    def visit_objectwrapper(self, node: ObjectWrapper) -> MirrorValue | None:
        return self.visit(node.inner)

    def visit_indexeditems(self, node: IndexedItems) -> dict[str, Any] | None:
        return self._render_items(node.items) or None

    def visit_arrayhybrid(self, node: ArrayHybrid) -> MirrorValue | None:
        if node.items:
            rendered = self._render_items(node.items)
            if rendered:
                return {ITEMS_KEY: rendered}

        for element in node.elements:
            leaf = as_leaf(element)
            if leaf is not None:
                return leaf.message

        per_element: dict[str, Any] = {}
        for i, element in enumerate(node.elements):
            sub = self.visit(element)
            if sub:
                per_element[str(i)] = sub
        return per_element or None

    def _render_items(self, items: Mapping[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for index, child in items.items():
            sub = self.visit(child)
            if sub is not None:
                out[index] = sub
        return out


def mirror(tree: Any) -> MirrorValue:
    """Mirror ``tree`` into a nested structure of messages.

    The outermost result is never ``None``: an absent or empty tree yields ``{}``.
    A root-level leaf group yields its message string.
    """
    if tree is None:
        return {}
    result = _MirrorVisitor().visit(tree)
    return {} if result is None else result
