"""Command: day 2, FizzBuzz answered by a worker thread."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sixtydays.commands._base import SixtyCommand

if TYPE_CHECKING:
    from sixtydays.commands._context import AppContext


@click.command(
    cls=SixtyCommand,
    examples="""\
  sixtydays fizzbuzz 15
  sixtydays fizzbuzz 10 30
  sixtydays --json fizzbuzz 1 5""",
)
@click.argument("bounds", nargs=-1, type=int, required=True)
@click.pass_obj
def fizzbuzz(app: AppContext, bounds: tuple[int, ...]) -> None:
    """Play FizzBuzz from START to STOP inclusive (START defaults to 1).

    Usage: fizzbuzz [START] STOP
    """
    from sixtydays.services.fizzbuzz import FizzBuzzService

    if len(bounds) > 2:
        raise click.UsageError("expected at most two numbers: [START] STOP")
    start, stop = (1, bounds[0]) if len(bounds) == 1 else bounds
    app.emit(FizzBuzzService(app.workspace).sequence(start, stop))
