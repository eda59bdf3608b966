# hbhelpers/cli/interface.py
import json
from pathlib import Path
from typing import Any, Dict, Tuple

import click
from click_option_group import optgroup
import structlog

from hbhelpers import __version__ as app_version
from hbhelpers.cli.console_output import print_helper_names, print_render_summary
from hbhelpers.config.loader import build_render_config
from hbhelpers.config.settings import OutputFormat, RenderConfig
from hbhelpers.core.helpers import helper_names
from hbhelpers.core.output import write_to_file, write_to_stdout
from hbhelpers.core.templating import TemplateRenderer, build_template_context
from hbhelpers.exceptions import HbHelpersError
from hbhelpers.logging_setup import configure_logging

log = structlog.get_logger(__name__)

def _parse_user_vars(raw_vars: Tuple[str, ...]) -> Dict[str, str]:
    user_vars: Dict[str, str] = {}
    for item in raw_vars:
        if "=" not in item:
            raise click.BadParameter(f"expected KEY=VALUE, got '{item}'", param_hint="--var")
        key, value = item.split("=", 1)
        user_vars[key.strip()] = value
    return user_vars

def _run_render_flow(config: RenderConfig) -> str:
    if not config.template_path:
        raise click.UsageError("no template given (pass TEMPLATE or set 'template' in the config file)")
    context = build_template_context(config.context_paths, config.user_vars)
    renderer = TemplateRenderer.from_file(config.template_path, config)
    rendered = renderer.render(context)
    log.info("render_complete", chars=len(rendered))

    output_to_write = rendered
    if config.output_format == OutputFormat.JSON:
        payload = {
            "rendered": rendered,
            "metadata": {
                "template": str(config.template_path),
                "context_files": [str(p) for p in config.context_paths],
                "context_keys": sorted(context.keys()),
            },
        }
        output_to_write = json.dumps(payload, indent=2) + "\n"

    if config.output_file:
        write_to_file(config.output_file, output_to_write)
        click.echo(f"Info: Output written to: {config.output_file}", err=True)
    else:
        write_to_stdout(output_to_write)

    if config.console_show_summary:
        print_render_summary(config, context, rendered)
    return rendered

@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("template_path", required=False, type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path))
@optgroup.group("Context", help="Data the template is rendered against.")
@optgroup.option("-c", "--context", "context_paths", multiple=True, type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path), help="JSON or TOML context file(s); later files override earlier keys.")
@optgroup.option("--var", "user_vars", multiple=True, metavar="KEY=VALUE", help="Extra top-level context variables.")
@optgroup.group("Output", help="Where and how the rendered document is written.")
@optgroup.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, writable=True, path_type=Path), default=None, help="Path to write the output to.")
@optgroup.option("-F", "--output-format", "output_format_str", type=click.Choice([f.value for f in OutputFormat]), default=None, help="Emit plain text or a JSON envelope. Default: text.")
@optgroup.option("--strip/--no-strip", "strip_output", default=None, help="Strip surrounding whitespace from the output. Default: on.")
@optgroup.option("--summary/--no-summary", "console_show_summary", default=None, help="Print a render summary table on stderr.")
@optgroup.group("Application Behavior", help="Configuration profiles, helpers and logging.")
@optgroup.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None, help="Read settings from this TOML file instead of searching for one.")
@optgroup.option("--profile", "profile_name", default=None, help="Apply a [profiles.NAME] table from the config file.")
@optgroup.option("--max-storage-keys", "max_storage_keys", type=int, default=None, help="Cap on distinct incrementVar keys per render.")
@optgroup.option("--list-helpers", "list_helpers", is_flag=True, default=False, help="List registered helper names and exit.")
@optgroup.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@optgroup.option("--json-logs", "force_json_logs", is_flag=True, default=False, help="Emit logs as JSON.")
@click.version_option(version=app_version, package_name="hbhelpers", prog_name="hbhelpers")
@click.pass_context
def main_cli(ctx: click.Context, **cli_params: Any):
    """hbhelpers: render a Handlebars TEMPLATE against JSON/TOML context
    with the collection helper toolkit registered."""
    log_level = "warning"
    if cli_params["verbosity_level"] == 1: log_level = "info"
    elif cli_params["verbosity_level"] >= 2: log_level = "debug"
    configure_logging(log_level_str=log_level, force_json_logs=cli_params["force_json_logs"])
    log.debug("cli_command_invoked", params={k: str(v) for k, v in cli_params.items()})

    if cli_params["list_helpers"]:
        print_helper_names(helper_names())
        ctx.exit(0)

    try:
        overrides: Dict[str, Any] = {
            "template_path": cli_params["template_path"],
            "context_paths": list(cli_params["context_paths"]),
            "user_vars": _parse_user_vars(cli_params["user_vars"]) or None,
            "output_file": cli_params["output_file"],
            "output_format": OutputFormat.from_string(cli_params["output_format_str"]) if cli_params["output_format_str"] else None,
            "strip_output": cli_params["strip_output"],
            "console_show_summary": cli_params["console_show_summary"],
            "max_storage_keys": cli_params["max_storage_keys"],
        }
        config = build_render_config(overrides, profile_name=cli_params["profile_name"], config_file=cli_params["config_file"])
        _run_render_flow(config)
    except HbHelpersError as e:
        log.error("render_failed", error=str(e))
        click.secho(f"Error: {e}", fg="red", err=True)
        ctx.exit(1)
