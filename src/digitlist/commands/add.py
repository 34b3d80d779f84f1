"""Command: add two arbitrarily long decimal numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from digitlist.commands._base import DigitCommand

if TYPE_CHECKING:
    from digitlist.commands._context import AppContext


@click.command(
    cls=DigitCommand,
    examples="""\
  digitlist add 9999 2
  digitlist -q add 2 1000
  digitlist --json add 123456789012345678901234567890 987654321""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def add(app: AppContext, left: str, right: str) -> None:
    """Add LEFT and RIGHT."""
    app.emit(app.arithmetic.add(left, right))
