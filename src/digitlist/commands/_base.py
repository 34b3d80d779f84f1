"""Custom Click base classes with --examples support.

Provides DigitCommand and DigitGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
"""

from __future__ import annotations

from typing import Any

import click

from digitlist.domain.types import MultiplyStrategy


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class DigitCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class DigitGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = DigitCommand`` so subcommands accept ``examples``
    without an explicit ``cls=``.
    """

    command_class = DigitCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


# Shared by every command that multiplies.
strategy_option = click.option(
    "--strategy",
    type=click.Choice([s.value for s in MultiplyStrategy]),
    default=None,
    help="Multiplication algorithm (default: [arithmetic] multiply_strategy).",
)
