"""Visitor pattern for error-tree traversal."""

from __future__ import annotations

import logging
from typing import Any

from formshape.tree.classifier import classify
from formshape.tree.nodes import Empty, Opaque

logger = logging.getLogger("formshape.tree")


class TreeVisitor:
    """Base visitor for raw error trees.

    ``visit`` classifies a raw node once and dispatches to the matching
    ``visit_<variant>`` method.  Extra positional arguments (a path prefix,
    for instance) are handed through unchanged.  Variants without a
    handler fall back to :meth:`generic_visit`.
    """

    def visit(self, raw: Any, *args: Any) -> Any:
        """Classify ``raw`` and dispatch to the appropriate visit_* method."""
        node = classify(raw)
        method_name = f"visit_{type(node).__name__.lower()}"
        method = getattr(self, method_name, self.generic_visit)
        return method(node, *args)

    def generic_visit(self, node: Any, *args: Any) -> Any:
        return None

    def visit_empty(self, node: Empty, *args: Any) -> Any:
        return None

    def visit_opaque(self, node: Opaque, *args: Any) -> Any:
        if node.value is not None:
            logger.debug("Skipping unrecognized error node of type %s", type(node.value).__name__)
        return None
