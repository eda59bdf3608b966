from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional
import structlog

from hbhelpers.core.helpers.render_globals import DEFAULT_MAX_STORAGE_KEYS

log = structlog.get_logger(__name__)

class OutputFormat(Enum):
    # how the rendered document is emitted.
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_string(cls, s: Optional[str]) -> "OutputFormat":
        if not s:
            return cls.TEXT
        try:
            return cls(s.lower())
        except ValueError:
            log.warning("invalid_output_format_string", input_string=s)
            return cls.TEXT

DEFAULT_OUTPUT_FORMAT = OutputFormat.TEXT
DEFAULT_STRIP_OUTPUT = True

@dataclass
class RenderConfig:
    # holds all configuration parameters for a single render.
    template_path: Optional[Path] = None
    context_paths: List[Path] = field(default_factory=list)
    user_vars: Dict[str, Any] = field(default_factory=dict)
    output_file: Optional[Path] = None
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    max_storage_keys: int = DEFAULT_MAX_STORAGE_KEYS
    strip_output: bool = DEFAULT_STRIP_OUTPUT
    console_show_summary: bool = False

    # internal state, not set directly by user flags.
    base_dir: Path = field(init=False)

    def __post_init__(self):
        # performs initial setup after dataclass instantiation.
        self.base_dir = Path.cwd().resolve()
        if self.max_storage_keys < 1:
            log.warning("max_storage_keys_too_small_using_default", requested=self.max_storage_keys)
            self.max_storage_keys = DEFAULT_MAX_STORAGE_KEYS
