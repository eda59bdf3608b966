"""
Per-render counters (`incrementVar`).
"""
from typing import Any, Callable

import structlog

from hbhelpers.exceptions import ValidationError

from .render_globals import HelperGlobals

log = structlog.get_logger(__name__)


def make_increment_var(helper_globals: HelperGlobals) -> Callable[[Any], int]:
    """Builds `incrementVar` bound to the storage of one render.

    The first call for a key yields 0 and each later call one more. At most
    `max_storage_keys` distinct keys may be created per render.
    """
    def increment_var(key: Any) -> int:
        if not isinstance(key, str):
            raise ValidationError("incrementVar helper key must be a string")
        variables = helper_globals.storage.setdefault("variables", {})
        current = variables.get(key)
        if isinstance(current, int) and not isinstance(current, bool):
            variables[key] = current + 1
        else:
            if key not in variables and len(variables) >= helper_globals.max_storage_keys:
                raise ValidationError(
                    f"Unique keys in variable storage may not exceed {helper_globals.max_storage_keys} in total")
            variables[key] = 0
            log.debug("storage_variable_initialised", key=key, total_keys=len(variables))
        return variables[key]

    return increment_var
