"""
Safe JSON parsing helper (`JSONparseSafe`).
"""
import json
from typing import Any, Optional

from .options import Options


def json_parse_safe(value: Any, options: Optional[Options] = None) -> Any:
    """Parses `value` as JSON.

    As a block, renders the block with the parsed value as context; inline,
    returns the parsed value. Invalid JSON renders the inverse block (or
    nothing, inline).
    """
    try:
        parsed = json.loads(value)
    except (TypeError, ValueError):
        return options.render_inverse() if options is not None else ""
    if options is not None:
        return options.render(parsed)
    return parsed
