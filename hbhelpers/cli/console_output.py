# hbhelpers/cli/console_output.py
"""
Prints summary information to the console (stderr) after a render.
"""
from typing import Any, Dict

import click
from rich.console import Console
from rich.table import Table
import structlog

from hbhelpers.config.settings import RenderConfig

log = structlog.get_logger(__name__)

def print_render_summary(config: RenderConfig, context: Dict[str, Any], rendered: str, console: Console = None):
    """Prints a table describing the template, context sources and output size."""
    log.debug("console_summary_output_requested")
    console = console or Console(stderr=True)

    table = Table(title="render summary", show_header=False, title_style="cyan")
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("template", str(config.template_path) if config.template_path else "-")
    table.add_row("context files", ", ".join(str(p) for p in config.context_paths) or "-")
    table.add_row("context keys", str(len(context)))
    table.add_row("user variables", str(len(config.user_vars)))
    table.add_row("output lines", str(rendered.count("\n")))
    table.add_row("output chars", f"{len(rendered):,}")
    console.print(table)

def print_helper_names(names):
    for name in names:
        click.echo(name)
