# hbhelpers/config/loader.py
"""
Handles loading and merging of configuration from TOML files.
"""
import toml
from pathlib import Path
from typing import Any, Dict, Optional
import structlog

from hbhelpers.exceptions import ConfigError

from .settings import OutputFormat, RenderConfig

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".hbhelpers.toml", "hbhelpers.toml", "pyproject.toml"]
USER_CONFIG_DIR = Path.home() / ".config" / "hbhelpers"
USER_CONFIG_FILE = USER_CONFIG_DIR / "config.toml"

CONFIG_KEY_TO_RENDERCONFIG_ATTR_MAP: Dict[str, str] = {
    "template": "template_path",
    "context": "context_paths",
    "vars": "user_vars",
    "output_file": "output_file",
    "output_format": "output_format",
    "max_storage_keys": "max_storage_keys",
    "strip_output": "strip_output",
    "console_summary": "console_show_summary",
}

def _load_toml_file_data(file_path: Path, required: bool = False) -> Dict[str, Any]:
    if not file_path.is_file():
        if required: raise ConfigError(f"config file not found: {file_path}")
        return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except (toml.TomlDecodeError, OSError) as e:
        if required:
            raise ConfigError(f"could not read config file {file_path}: {e}") from e
        log.error("config_file_load_error", path=str(file_path), error=str(e))
        return {}
    return data.get("tool", {}).get("hbhelpers", {}) if file_path.name == "pyproject.toml" else data

def load_and_merge_configs(search_dir: Optional[Path] = None, explicit_file: Optional[Path] = None) -> Dict[str, Any]:
    """Merges the user-global config with the first project config found (or an explicit file)."""
    merged_toml_data: Dict[str, Any] = {}
    if USER_CONFIG_FILE.is_file():
        log.info("loading_user_global_config", path=str(USER_CONFIG_FILE))
        merged_toml_data.update(_load_toml_file_data(USER_CONFIG_FILE))

    candidates = [explicit_file] if explicit_file else [(search_dir or Path.cwd()) / name for name in PROJECT_CONFIG_FILENAMES]
    for candidate in candidates:
        project_settings = _load_toml_file_data(candidate, required=explicit_file is not None)
        if not project_settings: continue
        log.info("loading_project_local_config", path=str(candidate))
        project_profiles = project_settings.pop("profiles", {})
        if project_profiles and isinstance(project_profiles, dict):
            user_profiles = merged_toml_data.get("profiles")
            if isinstance(user_profiles, dict):
                user_profiles.update(project_profiles)
            else:
                merged_toml_data["profiles"] = project_profiles
        merged_toml_data.update(project_settings)
        break
    if not merged_toml_data: log.debug("no_configuration_files_loaded")
    return merged_toml_data

def settings_from_toml(raw: Dict[str, Any], profile_name: Optional[str] = None) -> Dict[str, Any]:
    """Maps TOML keys (base table, then the named profile on top) onto RenderConfig attributes."""
    layers = [raw]
    if profile_name:
        profile = raw.get("profiles", {}).get(profile_name)
        if profile is None:
            raise ConfigError(f"profile '{profile_name}' not found in configuration files")
        log.info("applying_profile_settings", profile=profile_name)
        layers.append(profile)

    options: Dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            if key in ("profiles", "description"): continue
            attr = CONFIG_KEY_TO_RENDERCONFIG_ATTR_MAP.get(key)
            if attr is None:
                log.warning("unknown_config_key_ignored", key=key)
                continue
            options[attr] = value
    return _coerce_types(options)

def _coerce_types(options: Dict[str, Any]) -> Dict[str, Any]:
    coerced = dict(options)
    if isinstance(coerced.get("template_path"), str):
        coerced["template_path"] = Path(coerced["template_path"])
    if isinstance(coerced.get("output_file"), str):
        coerced["output_file"] = Path(coerced["output_file"])
    context = coerced.get("context_paths")
    if isinstance(context, str): context = [context]
    if isinstance(context, list):
        coerced["context_paths"] = [Path(p) for p in context]
    if isinstance(coerced.get("output_format"), str):
        coerced["output_format"] = OutputFormat.from_string(coerced["output_format"])
    if "max_storage_keys" in coerced:
        try:
            coerced["max_storage_keys"] = int(coerced["max_storage_keys"])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"max_storage_keys must be an integer, got {coerced['max_storage_keys']!r}") from e
    if "user_vars" in coerced and not isinstance(coerced["user_vars"], dict):
        raise ConfigError("vars must be a table of key/value pairs")
    return coerced

def build_render_config(overrides: Dict[str, Any], profile_name: Optional[str] = None,
                        search_dir: Optional[Path] = None, config_file: Optional[Path] = None) -> RenderConfig:
    """TOML settings (base, then profile), then explicit overrides (e.g. from the CLI)."""
    options = settings_from_toml(load_and_merge_configs(search_dir, config_file), profile_name)
    for key, value in overrides.items():
        if value is None: continue
        if key == "user_vars":
            options["user_vars"] = {**options.get("user_vars", {}), **value}
        elif key == "context_paths":
            if value: options["context_paths"] = list(value)
        else:
            options[key] = value
    log.debug("render_config_resolved", keys=sorted(options))
    return RenderConfig(**options)
