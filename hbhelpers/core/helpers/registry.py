"""
Adapts the helper toolkit to pybars' calling convention and builds the
helper table handed to `Compiler.compile(...)(context, helpers=...)`.

pybars calls inline helpers as `helper(this, *args, **hash)` and block
helpers as `helper(this, options, *args, **hash)`, where `options` is a dict
holding the compiled `fn`/`inverse` programs.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import pybars  # type: ignore
import structlog

from . import array, collection, object as object_helpers
from .coercion import arrayify
from .json_safe import json_parse_safe
from .options import IterationFrame, Options, truthy_flag
from .render_globals import HelperGlobals
from .url import get_url_query_param
from .variables import make_increment_var

log = structlog.get_logger(__name__)


def as_text(rendered: Any) -> str:
    """Flattens pybars output (str, strlist or None) into a str."""
    if rendered is None:
        return ""
    if isinstance(rendered, str):
        return rendered
    if isinstance(rendered, list):  # pybars.strlist
        return "".join(as_text(part) for part in rendered)
    return str(rendered)


def is_pybars_options(value: Any) -> bool:
    return isinstance(value, dict) and callable(value.get("fn"))


def to_options(this: Any, pb_options: Dict[str, Any], hash_args: Dict[str, Any]) -> Options:
    """Wraps a pybars options dict in the toolkit's continuation protocol."""
    program = pb_options.get("fn")
    inverse_program = pb_options.get("inverse")
    root = pb_options.get("root")

    def render(context: Any, data: Optional[IterationFrame] = None) -> str:
        if program is None:
            return ""
        if data is None:
            return as_text(program(context))
        # hash arguments of the call become private @variables of the body
        overrides = {f"@{name}": value for name, value in data.extra.items()}
        overrides["@total"] = data.total
        scope = pybars.Scope(context, this, root, overrides=overrides, index=data.index,
                             key=data.key, first=data.first, last=data.last)
        return as_text(program(scope))

    def render_inverse(context: Any = None) -> str:
        if inverse_program is None:
            return ""
        return as_text(inverse_program(context))

    return Options(fn=render, inverse=render_inverse, hash=dict(hash_args), this=this)


def _padded(args, count: int) -> List[Any]:
    return (list(args) + [None] * count)[:count]


def block(op: Callable[..., str], arity: int) -> Callable[..., str]:
    """Adapts `op(arg1, ..., argN, options)`; missing template args become None."""
    def helper(this, options, *args, **kwargs):
        return op(*_padded(args, arity), to_options(this, options, kwargs))
    helper.__name__ = op.__name__
    return helper


def inline(op: Callable[..., Any], arity: int) -> Callable[..., Any]:
    """Adapts `op(arg1, ..., argN)`; hash arguments are ignored."""
    def helper(this, *args, **kwargs):
        return op(*_padded(args, arity))
    helper.__name__ = op.__name__
    return helper


def raw(value: Any) -> Any:
    # strlist output is not html-escaped by pybars.
    return pybars.strlist([as_text(value)])


@dataclass(frozen=True)
class HelperSpec:
    name: str
    factory: Callable[[HelperGlobals], Callable[..., Any]]


def _static(helper: Callable[..., Any]) -> Callable[[HelperGlobals], Callable[..., Any]]:
    return lambda _globals: helper


def _sort_helper(this, value=None, *args, **kwargs):
    return array.sort(value, reverse=truthy_flag(kwargs.get("reverse")))


def _sort_by_helper(this, value=None, *keys, **kwargs):
    return array.sort_by(value, *keys, reverse=truthy_flag(kwargs.get("reverse")))


def _is_empty_helper(this, options, *args, **kwargs):
    opts = to_options(this, options, kwargs)
    if not args:
        # nothing in the collection position: the options stand in for it
        return collection.is_empty(opts, opts)
    return collection.is_empty(args[0], opts)


def _json_parse_safe_helper(this, *args, **kwargs):
    if args and is_pybars_options(args[0]):
        opts = to_options(this, args[0], kwargs)
        return json_parse_safe(args[1] if len(args) > 1 else None, opts)
    return json_parse_safe(args[0] if args else None)


def _url_query_param_helper(this, url=None, key=None, *args, **kwargs):
    return raw(get_url_query_param(url, key))


def _increment_var_factory(helper_globals: HelperGlobals) -> Callable[..., Any]:
    increment_var = make_increment_var(helper_globals)

    def helper(this, key=None, *args, **kwargs):
        return increment_var(key)
    return helper


HELPER_SPECS: List[HelperSpec] = [
    # arrays
    HelperSpec("after", _static(inline(array.after, 2))),
    HelperSpec("arrayify", _static(inline(arrayify, 1))),
    HelperSpec("before", _static(inline(array.before, 2))),
    HelperSpec("eachIndex", _static(block(array.each_index, 1))),
    HelperSpec("filter", _static(block(array.filter_items, 2))),
    HelperSpec("first", _static(inline(array.first, 2))),
    HelperSpec("forEach", _static(block(array.for_each, 1))),
    HelperSpec("inArray", _static(block(array.in_array, 2))),
    HelperSpec("isArray", _static(inline(array.is_array, 1))),
    HelperSpec("last", _static(inline(array.last, 2))),
    HelperSpec("lengthEqual", _static(block(array.length_equal, 2))),
    HelperSpec("map", _static(inline(array.map_items, 2))),
    HelperSpec("some", _static(block(array.some, 2))),
    HelperSpec("sort", _static(_sort_helper)),
    HelperSpec("sortBy", _static(_sort_by_helper)),
    HelperSpec("withAfter", _static(block(array.with_after, 2))),
    HelperSpec("withBefore", _static(block(array.with_before, 2))),
    HelperSpec("withFirst", _static(block(array.with_first, 2))),
    HelperSpec("withLast", _static(block(array.with_last, 2))),
    HelperSpec("withSort", _static(block(array.with_sort, 2))),
    # collections and objects
    HelperSpec("isEmpty", _static(_is_empty_helper)),
    HelperSpec("iterate", _static(block(collection.iterate, 1))),
    HelperSpec("length", _static(inline(collection.length, 1))),
    HelperSpec("forOwn", _static(block(object_helpers.for_own, 1))),
    # standalone helpers
    HelperSpec("getURLQueryParam", _static(_url_query_param_helper)),
    HelperSpec("incrementVar", _increment_var_factory),
    HelperSpec("JSONparseSafe", _static(_json_parse_safe_helper)),
]


def helper_names() -> List[str]:
    return sorted(spec.name for spec in HELPER_SPECS)


def build_helpers(helper_globals: Optional[HelperGlobals] = None) -> Dict[str, Callable[..., Any]]:
    """Instantiates every helper for one render."""
    helper_globals = helper_globals or HelperGlobals()
    helpers = {spec.name: spec.factory(helper_globals) for spec in HELPER_SPECS}
    log.debug("helpers_built", count=len(helpers), max_storage_keys=helper_globals.max_storage_keys)
    return helpers
