"""formshape: normalize validation-engine error trees for UI form libraries."""

from formshape.exceptions import ConfigurationError, FormshapeError, ValidationError
from formshape.transform import flatten, flatten_messages, mirror
from formshape.tree import ArrayErrors, classify

__version__ = "0.1.0"

__all__ = [
    "ArrayErrors",
    "ConfigurationError",
    "FormshapeError",
    "ValidationError",
    "__version__",
    "classify",
    "flatten",
    "flatten_messages",
    "mirror",
]
