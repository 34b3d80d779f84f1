"""Command: multiply a decimal number by a non-negative integer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from digitlist.commands._base import DigitCommand, strategy_option

if TYPE_CHECKING:
    from digitlist.commands._context import AppContext


@click.command(
    cls=DigitCommand,
    examples="""\
  digitlist multiply 123 5
  digitlist multiply 99999999999999999999 0
  digitlist multiply 42 1000 --strategy repeated-addition""",
)
@click.argument("text")
@click.argument("x", type=int)
@strategy_option
@click.pass_obj
def multiply(app: AppContext, text: str, x: int, strategy: str | None) -> None:
    """Multiply TEXT by the integer X."""
    app.emit(app.arithmetic.multiply(text, x, strategy=strategy))
