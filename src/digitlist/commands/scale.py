"""Command group: scale a decimal number by powers of ten."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from digitlist.commands._base import DigitGroup

if TYPE_CHECKING:
    from digitlist.commands._context import AppContext

_SCALE_EXAMPLES = """\
  digitlist scale up 23
  digitlist scale up 7 --times 3
  digitlist scale down 23
  digitlist scale down 8"""

_times_option = click.option(
    "--times",
    default=1,
    type=click.IntRange(min=0),
    show_default=True,
    help="How many factors of ten to apply.",
)


@click.group(cls=DigitGroup, examples=_SCALE_EXAMPLES)
@click.pass_obj
def scale(app: AppContext) -> None:
    """Multiply or divide by powers of ten."""


@scale.command(
    examples="""\
  digitlist scale up 23
  digitlist scale up 0
  digitlist -q scale up 5 --times 20"""
)
@click.argument("text")
@_times_option
@click.pass_obj
def up(app: AppContext, text: str, times: int) -> None:
    """Multiply TEXT by ten (zero stays zero)."""
    app.emit(app.arithmetic.scale(text, "up", times=times))


@scale.command(
    examples="""\
  digitlist scale down 23
  digitlist scale down 8
  digitlist -q scale down 123456 --times 3"""
)
@click.argument("text")
@_times_option
@click.pass_obj
def down(app: AppContext, text: str, times: int) -> None:
    """Divide TEXT by ten, dropping the remainder."""
    app.emit(app.arithmetic.scale(text, "down", times=times))
