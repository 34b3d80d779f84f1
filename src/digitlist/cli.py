"""Root CLI group: global output and config flags, then the arithmetic commands."""

from __future__ import annotations

from typing import Any

import click

from digitlist import __version__
from digitlist.commands import register_commands
from digitlist.commands._context import AppContext
from digitlist.config.settings import DigitSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="digitlist")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting value.")
@click.option("-v", "--verbose", is_flag=True, help="Show inputs and timing spans; debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    metavar="PATH",
    default=None,
    help="Read this TOML file instead of searching for digitlist.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """digitlist — exact arithmetic on arbitrarily long decimal numbers."""
    ctx.obj = AppContext(DigitSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
