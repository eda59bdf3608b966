"""
Templating module for hbhelpers.

Provides the TemplateRenderer for compiling and rendering Handlebars templates
with every helper registered, and build_template_context for preparing the data
they are rendered against.
"""
from .renderer import TemplateRenderer, render_string
from .context_builder import build_template_context, load_context_file

__all__ = [
    "TemplateRenderer",
    "build_template_context",
    "load_context_file",
    "render_string",
]
