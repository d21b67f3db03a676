"""Structural classification of raw error-tree nodes.

Validation engines carry no explicit type tag on their error nodes, so the
variant of each node is decided by its shape.  Precedence for sequences:

1. empty with no items side-channel -> ``Empty``
2. first element is a leaf -> ``LeafGroup`` for the whole field
3. exactly one element, a mapping that is not a leaf -> ``ObjectWrapper``
4. anything else -> ``ArrayHybrid``

Classification never raises; shapes it does not recognize become ``Opaque``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formshape.tree.nodes import (
    NODE_TYPES,
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


def classify(raw: Any) -> ErrorNode:
    """Return the classified variant of ``raw``. Already-classified nodes pass through."""
    if isinstance(raw, NODE_TYPES):
        return raw
    if isinstance(raw, ArrayErrors):
        return _classify_sequence(tuple(raw.direct), _index_keys(raw.items))
    if isinstance(raw, (list, tuple)):
        return _classify_sequence(tuple(raw), {})
    if isinstance(raw, Mapping):
        return _classify_mapping(raw)
    return Opaque(value=raw)


def as_leaf(value: Any) -> Leaf | None:
    """Return ``value`` as a :class:`Leaf` if it is one, else ``None``."""
    if isinstance(value, Leaf):
        return value
    if not isinstance(value, Mapping) or not _looks_like_leaf(value):
        return None
    message = value.get("message")
    if not isinstance(message, str) or not message:
        return None
    context = value.get("context")
    return Leaf(
        kind=value["kind"],
        message=message,
        context=context if isinstance(context, Mapping) else None,
    )


def is_index_key(key: Any) -> bool:
    """True for non-negative ints and their canonical ASCII decimal form (no leading zeros)."""
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return key >= 0
    if not isinstance(key, str) or not (key.isascii() and key.isdigit()):
        return False
    return key == "0" or key[0] != "0"


def _looks_like_leaf(value: Mapping[Any, Any]) -> bool:
    # A field literally named "kind" holds a sub-tree, never a string.
    kind = value.get("kind")
    return isinstance(kind, str) and bool(kind)


def _classify_mapping(raw: Mapping[Any, Any]) -> ErrorNode:
    if _looks_like_leaf(raw):
        leaf = as_leaf(raw)
        return leaf if leaf is not None else Opaque(value=raw)
    if raw and all(is_index_key(key) for key in raw):
        return IndexedItems(items=_index_keys(raw))
    return FieldMap(fields={str(key): value for key, value in raw.items()})


def _classify_sequence(elements: tuple[Any, ...], items: dict[str, Any]) -> ErrorNode:
    if not elements:
        return ArrayHybrid(elements=(), items=items) if items else Empty()

    if as_leaf(elements[0]) is not None:
        # Array-level promotion: the items side-channel is not consulted.
        leaves = tuple(leaf for leaf in map(as_leaf, elements) if leaf is not None)
        return LeafGroup(leaves=leaves)

    sole = elements[0]
    if len(elements) == 1 and isinstance(sole, Mapping) and not _looks_like_leaf(sole):
        return ObjectWrapper(inner=sole)

    return ArrayHybrid(elements=elements, items=items)


def _index_keys(items: Mapping[Any, Any]) -> dict[str, Any]:
    return {_index_segment(index): child for index, child in items.items()}


def _index_segment(index: Any) -> str:
    # "01" and 1 both render as "1"; keys that are not numbers stay verbatim.
    if isinstance(index, str) and index.isascii() and index.isdigit():
        return str(int(index))
    return str(index)
