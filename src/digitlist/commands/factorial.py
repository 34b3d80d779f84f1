"""Command: n factorial."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from digitlist.commands._base import DigitCommand, strategy_option

if TYPE_CHECKING:
    from digitlist.commands._context import AppContext


@click.command(
    cls=DigitCommand,
    examples="""\
  digitlist factorial 10
  digitlist -q factorial 100
  digitlist -v factorial 50 --strategy repeated-addition""",
)
@click.argument("n", type=int)
@strategy_option
@click.pass_obj
def factorial(app: AppContext, n: int, strategy: str | None) -> None:
    """Compute N! exactly."""
    app.emit(app.arithmetic.factorial(n, strategy=strategy))
