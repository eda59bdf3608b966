"""
Normalization of helper arguments into sequences and mappings.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

import structlog

from .utils import is_blank, is_mapping, is_sequence, try_parse

log = structlog.get_logger(__name__)


class ShapeKind(Enum):
    ABSENT = "absent"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    TEXT = "text"
    SCALAR = "scalar"


@dataclass(frozen=True)
class Shape:
    kind: ShapeKind
    value: Any

    @property
    def is_sequence(self) -> bool:
        return self.kind is ShapeKind.SEQUENCE

    @property
    def is_mapping(self) -> bool:
        return self.kind is ShapeKind.MAPPING

    @property
    def is_absent(self) -> bool:
        return self.kind is ShapeKind.ABSENT


def looks_like_sequence_literal(value: Any) -> bool:
    return isinstance(value, str) and "[" in value


def coerce_sequence(value: Any) -> Any:
    """Parses a string holding a JSON array literal; other values pass through.

    A literal that fails to parse, or parses to something other than an
    array, becomes an empty list so the template keeps rendering.
    """
    if not looks_like_sequence_literal(value):
        return value
    parsed = try_parse(value)
    if isinstance(parsed, list):
        return parsed
    log.debug("sequence_literal_coerced_to_empty", literal=value[:80])
    return []


def normalize(value: Any, parse_literals: bool = True) -> Shape:
    """Classifies a helper argument once so callers branch on a single tag."""
    if value is None:
        return Shape(ShapeKind.ABSENT, None)
    if parse_literals:
        value = coerce_sequence(value)
    if is_sequence(value):
        return Shape(ShapeKind.SEQUENCE, value)
    if is_mapping(value):
        return Shape(ShapeKind.MAPPING, value)
    if isinstance(value, str):
        return Shape(ShapeKind.TEXT, value)
    return Shape(ShapeKind.SCALAR, value)


def arrayify(value: Any) -> List[Any]:
    """Casts `value` to a list: blank -> [], list/tuple -> itself, other -> [value]."""
    if is_blank(value):
        return []
    if is_sequence(value):
        return value
    return [value]
