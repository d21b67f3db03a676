"""Immutable error-tree nodes. Every node of a raw error tree classifies into exactly one of these."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ArrayErrors:
    """Errors of an array field: array-level entries plus per-element errors.

    Validation engines build this when an array field carries element errors
    next to (or instead of) its own violations.  ``direct`` holds the
    array-level entries, ``items`` maps an element index to its sub-tree.
    """

    direct: Sequence[Any] = ()
    items: Mapping[int | str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Leaf:
    """One rule violation."""

    kind: str
    message: str
    context: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class LeafGroup:
    """All violations recorded for one field. Only the first one is surfaced."""

    leaves: tuple[Leaf, ...]

    @property
    def first(self) -> Leaf:
        return self.leaves[0]


@dataclass(frozen=True)
class FieldMap:
    """One level of nested object errors, keyed by field name."""

    fields: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class IndexedItems:
    """Sparse per-element errors keyed by element index (string-encoded)."""

    items: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ArrayHybrid:
    """Array whose first entry is not a leaf, with an optional items side-channel."""

    elements: tuple[Any, ...] = ()
    items: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ObjectWrapper:
    """Single-element sequence around a field map. Unwrapped without a path segment."""

    inner: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Empty:
    """Empty sequence with no side-channel. Contributes nothing."""


@dataclass(frozen=True)
class Opaque:
    """Unrecognized shape. Skipped by every transform."""

    value: Any = None


# The union of all classified node types.
ErrorNode = (
    Leaf
    | LeafGroup
    | FieldMap
    | IndexedItems
    | ArrayHybrid
    | ObjectWrapper
    | Empty
    | Opaque
)

NODE_TYPES: tuple[type, ...] = (
    Leaf,
    LeafGroup,
    FieldMap,
    IndexedItems,
    ArrayHybrid,
    ObjectWrapper,
    Empty,
    Opaque,
)
