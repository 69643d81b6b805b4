"""Command: day 25, mutation through a shared reference."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sixtydays.commands._base import SixtyCommand

if TYPE_CHECKING:
    from sixtydays.commands._context import AppContext


@click.command(
    cls=SixtyCommand,
    examples="""\
  sixtydays references
  sixtydays references --start 10""",
)
@click.option("--start", default=43, show_default=True, type=int, help="Initial value.")
@click.pass_obj
def references(app: AppContext, start: int) -> None:
    """Walk through aliasing and mutation via a reference cell."""
    from sixtydays.services.references import ReferencesService

    app.emit(ReferencesService(app.workspace).walkthrough(start))
