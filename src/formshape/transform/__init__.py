"""Error-tree transforms: flat dot-path map and mirrored nested structure."""

from enum import StrEnum

from formshape.transform.flatten import flatten, flatten_dict, flatten_messages, join_path
from formshape.transform.mirror import ITEMS_KEY, mirror


class TransformKind(StrEnum):
    FLATTEN = "flatten"
    MIRROR = "mirror"


__all__ = [
    "ITEMS_KEY",
    "TransformKind",
    "flatten",
    "flatten_dict",
    "flatten_messages",
    "join_path",
    "mirror",
]
