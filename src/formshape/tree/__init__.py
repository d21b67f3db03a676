"""Error-tree data model, structural classifier and visitor base."""

from formshape.tree.classifier import as_leaf, classify
from formshape.tree.nodes import (
    ArrayErrors,
    ArrayHybrid,
    Empty,
    ErrorNode,
    FieldMap,
    IndexedItems,
    Leaf,
    LeafGroup,
    ObjectWrapper,
    Opaque,
)
from formshape.tree.visitor import TreeVisitor

__all__ = [
    "ArrayErrors",
    "ArrayHybrid",
    "Empty",
    "ErrorNode",
    "FieldMap",
    "IndexedItems",
    "Leaf",
    "LeafGroup",
    "ObjectWrapper",
    "Opaque",
    "TreeVisitor",
    "as_leaf",
    "classify",
]
