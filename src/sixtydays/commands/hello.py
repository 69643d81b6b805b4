"""Command: day 1, hello world."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sixtydays.commands._base import SixtyCommand

if TYPE_CHECKING:
    from sixtydays.commands._context import AppContext


@click.command(
    cls=SixtyCommand,
    examples="""\
  sixtydays hello
  sixtydays hello --name Ada""",
)
@click.option("--name", default=None, help="Who to greet (default: World).")
@click.pass_obj
def hello(app: AppContext, name: str | None) -> None:
    """Print a greeting."""
    from sixtydays.services.greeting import GreetingService

    app.emit(GreetingService(app.workspace).hello(name))
