"""Loader for serialized error trees (YAML or JSON) with safety limits."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.events import AliasEvent

from formshape.exceptions import FormshapeError
from formshape.settings import Settings
from formshape.tree.nodes import ArrayErrors

# Reserved keys of a serialized ArrayErrors. Plain JSON has no way to hang
# an ``items`` attribute on an array, so array fields with element errors
# are written as {"$array": [...], "$items": {"1": ...}}.
ARRAY_KEY = "$array"
ITEMS_KEY = "$items"


class TreeLoadError(FormshapeError, ValueError):
    """Raised when a serialized error tree cannot be parsed."""


class TreeSafetyError(FormshapeError, ValueError):
    """Raised when a serialized error tree violates size or depth limits.

    Distinct from parse errors: these reject oversized, too deeply nested or
    alias-expanding documents before they reach the transforms.
    """


def decode_tree(data: Any) -> Any:
    """Turn serialized ``$array`` / ``$items`` markers into :class:`ArrayErrors`."""
    if isinstance(data, Mapping):
        if ARRAY_KEY in data or ITEMS_KEY in data:
            direct = data.get(ARRAY_KEY) or []
            items = data.get(ITEMS_KEY) or {}
            if not isinstance(direct, list) or not isinstance(items, Mapping):
                raise TreeLoadError(
                    f"'{ARRAY_KEY}' must be a list and '{ITEMS_KEY}' a mapping"
                )
            return ArrayErrors(
                direct=[decode_tree(entry) for entry in direct],
                items={str(index): decode_tree(child) for index, child in items.items()},
            )
        return {key: decode_tree(value) for key, value in data.items()}
    if isinstance(data, list):
        return [decode_tree(entry) for entry in data]
    return data


def encode_tree(tree: Any) -> Any:
    """Inverse of :func:`decode_tree`: make a tree containing ``ArrayErrors`` JSON-safe."""
    if isinstance(tree, ArrayErrors):
        encoded: dict[str, Any] = {ARRAY_KEY: [encode_tree(entry) for entry in tree.direct]}
        if tree.items:
            encoded[ITEMS_KEY] = {str(i): encode_tree(child) for i, child in tree.items.items()}
        return encoded
    if isinstance(tree, Mapping):
        return {str(key): encode_tree(value) for key, value in tree.items()}
    if isinstance(tree, (list, tuple)):
        return [encode_tree(entry) for entry in tree]
    return tree


class TreeLoader:
    """Parses serialized error trees and enforces the configured safety limits.

    YAML is a superset of JSON, so one ruamel.yaml safe loader handles both.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._yaml = YAML(typ="safe", pure=True)

    # -- safety checks -------------------------------------------------------

    def _check_size(self, content: str) -> None:
        limit = self._settings.max_document_size
        if len(content) > limit:
            raise TreeSafetyError(
                f"Error tree document exceeds maximum size "
                f"({len(content):,} chars > {limit:,} limit)"
            )

    def _check_anchors(self, content: str) -> None:
        # Anchors are read from parser events, so a literal "&" inside a
        # quoted message is not mistaken for one.
        for event in self._yaml.parse(content):
            if isinstance(event, AliasEvent) or getattr(event, "anchor", None):
                raise TreeSafetyError("YAML anchors/aliases are not supported in error trees")

    def check(self, data: Any) -> None:
        """Reject trees with too many nodes or nesting deeper than allowed."""
        max_nodes = self._settings.max_node_count
        max_depth = self._settings.max_depth
        count = 0
        stack: list[tuple[Any, int]] = [(data, 1)]
        while stack:
            node, depth = stack.pop()
            count += 1
            if count > max_nodes:
                raise TreeSafetyError(f"Error tree exceeds maximum node count ({max_nodes:,})")
            if depth > max_depth:
                raise TreeSafetyError(f"Error tree exceeds maximum depth ({max_depth})")
            if isinstance(node, Mapping):
                stack.extend((child, depth + 1) for child in node.values())
            elif isinstance(node, (list, tuple)):
                stack.extend((child, depth + 1) for child in node)

    # -- public loading API --------------------------------------------------

    def loads(self, content: str) -> Any:
        """Parse ``content`` and return the decoded error tree (``None`` if empty)."""
        self._check_size(content)
        try:
            self._check_anchors(content)
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise TreeLoadError(f"Invalid error tree document: {exc}") from exc
        if data is None:
            return None
        self.check(data)
        return decode_tree(data)

    def load(self, path: Path) -> Any:
        """Load an error tree from a YAML or JSON file."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.loads(content)
