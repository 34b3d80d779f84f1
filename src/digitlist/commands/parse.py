"""Command: validate decimal text and show its canonical form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from digitlist.commands._base import DigitCommand

if TYPE_CHECKING:
    from digitlist.commands._context import AppContext


@click.command(
    cls=DigitCommand,
    examples="""\
  digitlist parse 135642
  digitlist --json parse 0""",
)
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Parse a non-negative decimal number and report its digit count."""
    app.emit(app.arithmetic.parse(text))
