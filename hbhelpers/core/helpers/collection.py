"""
Helpers that accept either a list or a mapping.
"""
from typing import Any

from .array import for_each
from .coercion import ShapeKind, normalize
from .object import for_own
from .options import Options, is_options
from .utils import is_blank


def is_empty(collection: Any, options: Options) -> str:
    """Renders the block if `collection` is an empty list or mapping, else the inverse block.

    When the template omits the collection the options object lands in its
    place; that case renders the block of the options it carries.
    """
    if is_options(collection):
        return collection.render_this()
    shape = normalize(collection, parse_literals=False)
    if (shape.is_sequence or shape.is_mapping) and len(shape.value) == 0:
        return options.render_this()
    return options.render_inverse()


def iterate(collection: Any, options: Options) -> str:
    """Iterates a list with `forEach` or a mapping with `forOwn`."""
    shape = normalize(collection, parse_literals=False)
    if shape.is_sequence:
        return for_each(shape.value, options)
    if shape.is_mapping:
        return for_own(shape.value, options)
    return options.render_inverse()


def length(value: Any) -> Any:
    """Number of items in a list (or JSON array literal) or keys in a mapping.

    Missing values give `""` so templates can tell "unknown" from zero.
    """
    if is_blank(value):
        return ""
    shape = normalize(value)
    if shape.kind is ShapeKind.SCALAR and not hasattr(shape.value, "__len__"):
        return ""
    return len(shape.value)
