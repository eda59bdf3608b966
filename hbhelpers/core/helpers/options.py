"""
Continuation protocol shared by every block helper.

A block helper receives an `Options` value as its last argument. `fn` renders
the primary body, `inverse` renders the `{{else}}` body, and `hash` carries the
named arguments of the call (`reverse=true`, `property="name"`, ...).
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional


def truthy_flag(value: Any) -> bool:
    # hash flags may arrive as literals or as strings ("false").
    if isinstance(value, str):
        return value.strip().lower() not in ("", "false", "0", "no")
    return bool(value)


def _empty_renderer(*args: Any, **kwargs: Any) -> str:
    return ""


@dataclass(frozen=True)
class IterationFrame:
    """Positional metadata for one element of an iterating block helper.

    Built fresh for every element and handed to `Options.fn` as `data`;
    `index` is zero-based here, unlike the 1-based `index` written onto
    the element by `forEach`.
    """
    index: int
    total: int
    first: bool
    last: bool
    key: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Options:
    fn: Callable[..., str] = _empty_renderer
    inverse: Callable[..., str] = _empty_renderer
    hash: Dict[str, Any] = field(default_factory=dict)
    this: Any = None

    def render(self, context: Any, data: Optional[IterationFrame] = None) -> str:
        """Renders the primary body against `context`."""
        if data is None:
            return self.fn(context)
        return self.fn(context, data=data)

    def render_inverse(self, context: Any = None) -> str:
        return self.inverse(self.this if context is None else context)

    def render_this(self) -> str:
        """Renders the primary body against the caller's current context."""
        return self.fn(self.this)

    def flag(self, name: str) -> bool:
        return truthy_flag(self.hash.get(name))

    def frame(self, index: int, total: int, key: Any = None) -> IterationFrame:
        return IterationFrame(
            index=index,
            total=total,
            first=index == 0,
            last=index == total - 1,
            key=key,
            extra=dict(self.hash),
        )


def is_options(value: Any) -> bool:
    return isinstance(value, Options)


def render_each(items, options: Options) -> str:
    """Renders the primary body once per item and concatenates the output."""
    return "".join(options.render(item) for item in items)
