"""Command: x raised to the power y."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from digitlist.commands._base import DigitCommand, strategy_option

if TYPE_CHECKING:
    from digitlist.commands._context import AppContext


@click.command(
    cls=DigitCommand,
    examples="""\
  digitlist power 2 10
  digitlist -q power 2 1000
  digitlist power 0 0""",
)
@click.argument("x", type=int)
@click.argument("y", type=int)
@strategy_option
@click.pass_obj
def power(app: AppContext, x: int, y: int, strategy: str | None) -> None:
    """Compute X**Y exactly."""
    app.emit(app.arithmetic.power(x, y, strategy=strategy))
