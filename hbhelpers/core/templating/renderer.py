# hbhelpers/core/templating/renderer.py
"""
Contains the TemplateRenderer class responsible for loading, compiling,
and rendering Handlebars templates with the helper toolkit registered.
"""
from pathlib import Path
from typing import Any, Callable, Dict, Optional
import pybars # type: ignore
import structlog

from hbhelpers.config.settings import RenderConfig
from hbhelpers.core.helpers import HelperGlobals, build_helpers
from hbhelpers.core.helpers.registry import as_text
from hbhelpers.exceptions import HbHelpersError, TemplateError

log = structlog.get_logger(__name__)

class TemplateRenderer:
    """Manages loading, compilation, and rendering of one Handlebars template."""
    def __init__(self, template_source: str, config: Optional[RenderConfig] = None,
                 source_name: str = "inline", extra_helpers: Optional[Dict[str, Callable]] = None):
        self.config = config or RenderConfig()
        self.template_source_name = source_name
        self.extra_helpers: Dict[str, Callable] = dict(extra_helpers or {})
        self.raw_template_string = template_source
        self.handlebars_compiler = pybars.Compiler()

        try:
            self.compiled_template_function = self.handlebars_compiler.compile(self.raw_template_string)
            log.debug("template_compiled_successfully", source=self.template_source_name)
        except Exception as e:
            log.error("template_compilation_failed", source=self.template_source_name, error=str(e))
            raise TemplateError(f"Failed to compile template from '{self.template_source_name}': {e}") from e

    @classmethod
    def from_file(cls, template_path: Path, config: Optional[RenderConfig] = None) -> "TemplateRenderer":
        log.info("loading_template_from_path", path=str(template_path))
        try:
            source = template_path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateError(f"Failed to read template file {template_path}: {e}") from e
        return cls(source, config=config, source_name=f"file:{template_path}")

    def _helpers_for_render(self) -> Dict[str, Callable]:
        # fresh globals per render so incrementVar counters never leak between renders.
        helper_globals = HelperGlobals(max_storage_keys=self.config.max_storage_keys)
        return {**build_helpers(helper_globals), **self.extra_helpers}

    def render(self, template_context_data: Dict[str, Any]) -> str:
        """Renders the compiled template with the given context data."""
        log.info("rendering_template_with_context", source=self.template_source_name,
                 context_keys=list(template_context_data.keys()))
        try:
            rendered_string = self.compiled_template_function(
                template_context_data, helpers=self._helpers_for_render()
            )
        except HbHelpersError as e:
            log.error("template_helper_error", source=self.template_source_name, error=str(e))
            raise TemplateError(f"Template render failed for '{self.template_source_name}': {e}") from e
        except Exception as e:
            log.error("template_rendering_error_occurred", source=self.template_source_name,
                      error_message=str(e), exc_info=True)
            raise TemplateError(f"Template render failed for '{self.template_source_name}': {e}") from e
        log.debug("template_rendered_successfully", source=self.template_source_name)
        output = as_text(rendered_string)
        if self.config.strip_output:
            return output.strip() + "\n"
        return output

def render_string(template_source: str, context: Optional[Dict[str, Any]] = None, **kwargs: Any) -> str:
    """Compiles and renders `template_source` in one go, without output stripping."""
    config = kwargs.pop("config", None) or RenderConfig(strip_output=False)
    return TemplateRenderer(template_source, config=config, **kwargs).render(context or {})
