"""
Collection helpers for Handlebars templates.

The toolkit functions are plain Python callables taking the template
arguments positionally (block helpers also take an `Options` continuation);
`build_helpers` adapts them to pybars and returns the helper table for one
render.
"""
from .options import IterationFrame, Options
from .registry import HELPER_SPECS, build_helpers, helper_names
from .render_globals import HelperGlobals

__all__ = [
    "HELPER_SPECS",
    "HelperGlobals",
    "IterationFrame",
    "Options",
    "build_helpers",
    "helper_names",
]
