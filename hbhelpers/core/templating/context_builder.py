# hbhelpers/core/templating/context_builder.py
"""
Builds the context dictionary a template is rendered against, from JSON/TOML
context files and user variables.
"""
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional
import structlog
import toml

from hbhelpers.exceptions import ContextError

log = structlog.get_logger(__name__)

def load_context_file(path: Path) -> Dict[str, Any]:
    """Reads one context file; `.toml` files are parsed as TOML, everything else as JSON."""
    log.debug("loading_context_file", path=str(path))
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ContextError(f"could not read context file {path}: {e}") from e

    try:
        data = toml.loads(raw_text) if path.suffix.lower() == ".toml" else json.loads(raw_text)
    except (toml.TomlDecodeError, ValueError) as e:
        raise ContextError(f"context file {path} is not valid {'TOML' if path.suffix.lower() == '.toml' else 'JSON'}: {e}") from e

    if not isinstance(data, dict):
        raise ContextError(f"context file {path} must contain an object at the top level, got {type(data).__name__}")
    return data

def build_template_context(context_paths: Iterable[Path] = (), user_vars: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merges context files in order (later keys win), then user variables on top."""
    context: Dict[str, Any] = {}
    for path in context_paths:
        file_data = load_context_file(Path(path))
        overlapping = sorted(set(context) & set(file_data))
        if overlapping:
            log.info("context_keys_overridden", path=str(path), keys=overlapping)
        context.update(file_data)
    if user_vars:
        context.update(user_vars)
    log.debug("template_context_prepared_with_keys", keys=list(context.keys()))
    return context
