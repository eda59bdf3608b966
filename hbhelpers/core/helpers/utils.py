"""
Small value utilities shared by the helper modules.
"""
import inspect
import json
from collections.abc import Mapping
from typing import Any, Callable, Optional

import structlog

log = structlog.get_logger(__name__)

SEQUENCE_TYPES = (list, tuple)


def is_sequence(value: Any) -> bool:
    return isinstance(value, SEQUENCE_TYPES)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_blank(value: Any) -> bool:
    """True for None, False, empty strings and numeric zero; empty containers are not blank."""
    if value is None or value is False:
        return True
    if isinstance(value, (str, int, float)):
        return not value
    return False


def is_number(value: Any) -> bool:
    """True for ints/floats and for strings that parse as a finite number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == value  # nan
    if isinstance(value, str) and value.strip():
        try:
            parsed = float(value)
        except ValueError:
            return False
        return parsed == parsed and parsed not in (float("inf"), float("-inf"))
    return False


def to_int(value: Any) -> int:
    # slice offsets; "2.7" and 2.7 both truncate to 2.
    return int(float(value))


def strict_equal(left: Any, right: Any) -> bool:
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    try:
        return bool(left == right)
    except (TypeError, ValueError):  # ambiguous array truth values
        return False


def get_value(obj: Any, path: Any, default: Any = None) -> Any:
    """Resolves a dotted property path against mappings, sequences and attributes."""
    if obj is None or path is None:
        return default
    current = obj
    for segment in str(path).split("."):
        if current is None:
            return default
        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        elif isinstance(current, SEQUENCE_TYPES) and segment.lstrip("-").isdigit():
            try:
                current = current[int(segment)]
            except IndexError:
                return default
        else:
            current = getattr(current, segment, default)
    return current


def result(value: Any) -> Any:
    """Returns `value()` for zero-argument callables, `value` otherwise."""
    if callable(value) and not isinstance(value, type):
        return value()
    return value


def try_parse(text: Any) -> Optional[Any]:
    """Parses a JSON literal, returning None when it is not valid JSON."""
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        log.debug("literal_parse_failed", error=str(e))
        return None


def positional_arity(func: Callable) -> Optional[int]:
    """Number of positional parameters `func` accepts, None when unbounded.

    Builtins without an introspectable signature are assumed to take one.
    """
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 1
    count = 0
    for param in params:
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def required_arity(func: Callable) -> Optional[int]:
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return None
    return sum(
        1 for p in params
        if p.default is inspect.Parameter.empty
        and p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    )


def call_iteratee(func: Callable, item: Any, index: int, collection: Any) -> Any:
    # callbacks get (item, index, collection), trimmed to what they accept.
    arity = positional_arity(func)
    args = (item, index, collection)
    if arity is None:
        return func(*args)
    return func(*args[:max(arity, 1)])


def iteratee(predicate: Any) -> Callable[..., Any]:
    """Turns a callback shorthand into a callable.

    - callable: used as is
    - None: identity
    - str: property lookup
    - mapping: matches elements whose properties equal every given value
    """
    if predicate is None:
        return lambda item: item
    if callable(predicate):
        return predicate
    if isinstance(predicate, Mapping):
        expected = dict(predicate)
        return lambda item: all(strict_equal(get_value(item, k), v) for k, v in expected.items())
    return lambda item: get_value(item, predicate)
