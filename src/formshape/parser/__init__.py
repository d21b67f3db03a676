"""Parsing of serialized error trees."""

from formshape.parser.loader import (
    TreeLoader,
    TreeLoadError,
    TreeSafetyError,
    decode_tree,
    encode_tree,
)

__all__ = [
    "TreeLoadError",
    "TreeLoader",
    "TreeSafetyError",
    "decode_tree",
    "encode_tree",
]
