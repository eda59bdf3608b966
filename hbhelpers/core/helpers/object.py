"""
Object (mapping) helpers.
"""
from typing import Any

from .options import Options
from .utils import is_mapping


def for_own(obj: Any, options: Options) -> str:
    """Renders the block once per key of `obj`, in insertion order.

    The value is the block context; the key travels in the frame
    (`@key` in templates).
    """
    if not is_mapping(obj):
        return options.render_inverse()
    total = len(obj)
    return "".join(
        options.render(value, data=options.frame(position, total, key=key))
        for position, (key, value) in enumerate(obj.items())
    )
