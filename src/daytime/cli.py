"""Root CLI group: global flags build DayTimeSettings once per invocation."""

from __future__ import annotations

import click

from daytime import __version__
from daytime.commands import register_commands
from daytime.commands._context import AppContext
from daytime.config.settings import DayTimeSettings
from daytime.domain.anchoring import Rollover


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="daytime")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting value.")
@click.option("-v", "--verbose", is_flag=True, help="Show meta and error context; debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Config file (daytime.toml or a pyproject.toml with [tool.daytime]).",
)
@click.option(
    "--rollover",
    type=click.Choice([r.value for r in Rollover]),
    default=None,
    help="Override [anchor] rollover: fixed 24 hours or calendar day.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    rollover: str | None,
) -> None:
    """daytime — time-of-day parsing, anchoring, and encoding."""
    settings = DayTimeSettings.from_cli(
        config_path=config_path,
        rollover=rollover,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
