"""
Array helpers: windowing, iteration, filtering, membership and sorting.

Every function here takes the template arguments positionally. Block helpers
take the `Options` continuation as their last argument; value helpers return
their result for direct interpolation. Absent input follows each helper's
documented fallback (`""`, `[]` or the inverse block) rather than raising.
"""
import functools
from collections.abc import MutableMapping
from typing import Any, Callable, List, Optional

import structlog

from hbhelpers.exceptions import HelperUsageError

from .coercion import coerce_sequence, normalize
from .options import Options, render_each
from .utils import (
    call_iteratee,
    get_value,
    is_number,
    is_sequence,
    iteratee,
    required_arity,
    result,
    strict_equal,
    to_int,
)

log = structlog.get_logger(__name__)


def _offset(n: Any) -> int:
    return to_int(n) if is_number(n) else 0


def _head(items, n: Any):
    if not is_number(n):
        return items[0] if len(items) else None
    return items[:to_int(n)]


def _tail(items, n: Any):
    if not is_number(n):
        return items[-1] if len(items) else None
    return items[-to_int(n):]


def _window_text(text: str, n: Any, take: Callable) -> Any:
    chars = list(text)
    window = take(chars, n)
    return "".join(window) if isinstance(window, list) else window


# windowing

def after(array: Any, n: Any = None) -> Any:
    """Returns the items of `array` after index `n`.

    `{{after array 1}}` with `['a', 'b', 'c']` gives `['b', 'c']`.
    """
    if array is None:
        return ""
    return array[_offset(n):]


def before(array: Any, n: Any = None) -> Any:
    """Returns the items of `array` minus the last `n`."""
    if array is None:
        return ""
    end = max(len(array) - _offset(n), 0)
    return array[:end]


def first(array: Any, n: Any = None) -> Any:
    """First item, or first `n` items, of a list; first characters of a string."""
    if is_sequence(array):
        return _head(array, n)
    if isinstance(array, str):
        return _window_text(array, n, _head)
    return []


def last(array: Any, n: Any = None) -> Any:
    """Last item, or last `n` items, of a list; last characters of a string."""
    if is_sequence(array):
        return _tail(array, n)
    if isinstance(array, str):
        return _window_text(array, n, _tail)
    return []


def with_after(array: Any, idx: Any, options: Options) -> str:
    """Renders the block for every item after index `idx`."""
    window = after(array, idx)
    return render_each(window, options) if window else ""


def with_before(array: Any, idx: Any, options: Options) -> str:
    """Renders the block for every item except the last `idx`."""
    window = before(array, idx)
    return render_each(window, options) if window else ""


def _resolve_index(idx: Any) -> Optional[Any]:
    if idx is None:
        return None
    return result(idx)


def with_first(array: Any, idx: Any, options: Options) -> str:
    """Renders the block for the first item, or for each of the first `idx` items.

    An empty list renders nothing; a present value that cannot be indexed
    raises, since that is a template authoring mistake.
    """
    if array is None or (hasattr(array, "__len__") and len(array) == 0):
        return ""
    array = result(array)
    idx = _resolve_index(idx)
    if idx is None:
        return options.render(array[0])
    if not is_number(idx):
        return ""
    return render_each(array[:to_int(idx)], options)


def with_last(array: Any, idx: Any, options: Options) -> str:
    """Renders the block for the last item, or for each of the last `idx` items."""
    if array is None or (hasattr(array, "__len__") and len(array) == 0):
        return ""
    array = result(array)
    idx = _resolve_index(idx)
    if idx is None:
        return options.render(array[-1])
    if not is_number(idx):
        return ""
    return render_each(array[-to_int(idx):], options)


# iteration

def _annotate(item: Any, position: int, total: int) -> None:
    meta = {
        "index": position + 1,
        "total": total,
        "isFirst": position == 0,
        "isLast": position == total - 1,
    }
    if isinstance(item, MutableMapping):
        item.update(meta)
    elif hasattr(item, "__dict__") and not isinstance(item, type):
        for name, value in meta.items():
            setattr(item, name, value)


def for_each(array: Any, options: Options) -> str:
    """Renders the block once per item, exposing `index`, `total`, `isFirst`, `isLast`.

    `index` on the item is 1-based; the zero-based position travels in the
    frame handed to the block (`@index` in templates).
    """
    shape = normalize(array)
    if shape.is_absent:
        return ""
    if not shape.is_sequence:
        log.debug("for_each_skipped_non_sequence", kind=shape.kind.value)
        return ""
    items = shape.value
    total = len(items)
    buffer = []
    for position, item in enumerate(items):
        _annotate(item, position, total)
        buffer.append(options.render(item, data=options.frame(position, total)))
    return "".join(buffer)


def each_index(array: Any, options: Options) -> str:
    """Renders the block with `{item, index}` for every item."""
    if not is_sequence(array):
        return ""
    return "".join(options.render({"item": item, "index": i}) for i, item in enumerate(array))


# filtering & membership

def filter_items(array: Any, value: Any, options: Options) -> str:
    """Renders the block for every item equal to `value`, else the inverse block.

    With `property="name"` the named property of each item is compared
    instead of the item itself.
    """
    prop = options.hash.get("property")
    matches: List[Any] = []
    if is_sequence(array):
        if prop:
            matches = [item for item in array if strict_equal(get_value(item, prop), value)]
        else:
            matches = [item for item in array if strict_equal(item, value)]
    if matches:
        return render_each(matches, options)
    return options.render_inverse()


def in_array(array: Any, value: Any, options: Options) -> str:
    """Renders the block if `array` contains `value`, else the inverse block."""
    if is_sequence(array) and any(strict_equal(item, value) for item in array):
        return options.render_this()
    return options.render_inverse()


def some(array: Any, predicate: Any, options: Options) -> str:
    """Renders the block if `predicate` is truthy for any item, else the inverse block."""
    check = iteratee(predicate)
    if not array or not (is_sequence(array) or isinstance(array, str)):
        return options.render_inverse()
    for i, item in enumerate(array):
        if call_iteratee(check, item, i, array):
            return options.render_this()
    return options.render_inverse()


def map_items(array: Any, fn: Any) -> Any:
    """Returns `[fn(item, index, array), ...]`."""
    if array is None:
        return ""
    array = coerce_sequence(array)
    func = iteratee(fn)
    return [call_iteratee(func, item, i, array) for i, item in enumerate(array)]


# sorting

def _three_way(a: Any, b: Any) -> int:
    if a is None or b is None:
        return (a is not None) - (b is not None)
    try:
        return (a > b) - (a < b)
    except TypeError:
        sa, sb = str(a), str(b)
        return (sa > sb) - (sa < sb)


def _natural_sort(items: List[Any]) -> None:
    try:
        items.sort()
    except TypeError:
        log.debug("natural_sort_fell_back_to_string_order", size=len(items))
        items.sort(key=str)


def _sortable(array: Any, helper_name: str) -> List[Any]:
    if isinstance(array, list):
        return array
    if isinstance(array, tuple):
        return list(array)
    raise HelperUsageError(f"{helper_name} expects a list, got {type(array).__name__}")


def sort(array: Any, reverse: Any = False) -> Any:
    """Sorts `array` in place in natural order and returns it.

    `reverse=true` reverses the sorted list; tuples are sorted into a new list.
    """
    if array is None:
        return ""
    items = _sortable(array, "sort")
    _natural_sort(items)
    if reverse:
        items.reverse()
    return items


def _key_comparator(key: Any) -> Callable[[Any, Any], int]:
    if callable(key):
        arity = required_arity(key)
        if arity is not None and arity >= 2:
            return lambda a, b: key(a, b)
        return lambda a, b: _three_way(key(a), key(b))
    return lambda a, b: _three_way(get_value(a, key), get_value(b, key))


def _flatten_keys(keys) -> List[Any]:
    flat: List[Any] = []
    for key in keys:
        if isinstance(key, (list, tuple)):
            flat.extend(_flatten_keys(key))
        elif key is not None:
            flat.append(key)
    return flat


def sort_by(array: Any, *keys: Any, reverse: Any = False) -> Any:
    """Sorts `array` by one or more property names or functions.

    Functions taking one argument project each item to a sort key; functions
    taking two are used as comparators. Later keys only break ties left by
    earlier ones.
    """
    if array is None:
        return ""
    items = _sortable(coerce_sequence(array), "sortBy")
    comparators = [_key_comparator(key) for key in _flatten_keys(keys)]
    if not comparators:
        _natural_sort(items)
    else:
        def compare(a: Any, b: Any) -> int:
            for comparator in comparators:
                outcome = comparator(a, b)
                if outcome:
                    return outcome
            return 0
        items.sort(key=functools.cmp_to_key(compare))
    if reverse:
        items.reverse()
    return items


def with_sort(array: Any, prop: Any, options: Options) -> str:
    """Sorts `array`, optionally by `prop`, and renders the block per item."""
    if array is None:
        return ""
    items = _sortable(array, "withSort")
    if prop is None:
        _natural_sort(items)
    else:
        items.sort(key=functools.cmp_to_key(lambda a, b: _three_way(get_value(a, prop), get_value(b, prop))))
    if options.flag("reverse"):
        items.reverse()
    return render_each(items, options)


# metadata

def is_array(value: Any) -> bool:
    return is_sequence(value)


def length_equal(array: Any, length: Any, options: Options) -> str:
    """Renders the block if `array` has exactly `length` items, else the inverse block."""
    if array is None:
        raise HelperUsageError("lengthEqual requires a list, got nothing")
    if isinstance(length, str) and is_number(length):
        length = float(length)
    if len(array) == length:
        return options.render_this()
    return options.render_inverse()
