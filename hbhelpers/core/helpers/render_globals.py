"""
Render-scoped state handed to helper factories.
"""
from dataclasses import dataclass, field
from typing import Any, Dict

DEFAULT_MAX_STORAGE_KEYS = 50


@dataclass
class HelperGlobals:
    # one instance per render; never shared between renders.
    storage: Dict[str, Any] = field(default_factory=dict)
    max_storage_keys: int = DEFAULT_MAX_STORAGE_KEYS
