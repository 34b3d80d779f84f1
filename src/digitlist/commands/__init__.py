"""Subcommand modules for digitlist.

Provides register_commands() which uses deferred imports to keep
``digitlist --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the scale group and the standalone arithmetic commands."""
    # --- Groups ---
    from digitlist.commands.scale import scale

    cli.add_command(scale)

    # --- Standalone commands ---
    from digitlist.commands.add import add
    from digitlist.commands.factorial import factorial
    from digitlist.commands.multiply import multiply
    from digitlist.commands.parse import parse
    from digitlist.commands.power import power

    cli.add_command(parse)
    cli.add_command(add)
    cli.add_command(multiply)
    cli.add_command(factorial)
    cli.add_command(power)
