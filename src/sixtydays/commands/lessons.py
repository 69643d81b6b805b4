"""Command: browse the lesson catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sixtydays.commands._base import SixtyCommand

if TYPE_CHECKING:
    from sixtydays.commands._context import AppContext


@click.command(
    cls=SixtyCommand,
    examples="""\
  sixtydays lessons
  sixtydays lessons 8""",
)
@click.argument("day", required=False, type=int)
@click.pass_obj
def lessons(app: AppContext, day: int | None) -> None:
    """List all lessons, or show the lesson for DAY."""
    from sixtydays.services.lessons import LessonService

    svc = LessonService(app.workspace)
    app.emit(svc.list() if day is None else svc.get(day))
