"""Command group: days 11-13, cards stored in SQLite."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from sixtydays.commands._base import SixtyGroup
from sixtydays.domain.cards import MAX_ID

if TYPE_CHECKING:
    from sixtydays.commands._context import AppContext

_CARDS_EXAMPLES = """\
  sixtydays cards create "Learn click" --description "groups, options, context"
  sixtydays cards list --limit 10
  sixtydays cards get 1
  sixtydays cards update 1 --url https://click.palletsprojects.com/
  sixtydays cards update 1 --clear-url
  sixtydays cards delete 1"""

_CARD_ID = click.IntRange(0, MAX_ID)


@click.group(cls=SixtyGroup, examples=_CARDS_EXAMPLES)
def cards() -> None:
    """Create, list, read, update and delete cards."""


@cards.command()
@click.argument("title")
@click.option("--description", default="", help="Free-form description.")
@click.option("--url", default=None, help="Related http(s) link.")
@click.pass_obj
def create(app: AppContext, title: str, description: str, url: str | None) -> None:
    """Create a card titled TITLE."""
    from sixtydays.services.cards import CardService

    payload: dict[str, Any] = {"title": title, "description": description}
    if url is not None:
        payload["url"] = url
    app.emit(CardService(app.workspace).create(payload))


@cards.command(name="list")
@click.option("--offset", default=0, show_default=True, type=click.IntRange(0, MAX_ID))
@click.option("--limit", default=None, type=click.IntRange(min=1), help="Page size.")
@click.pass_obj
def list_cards(app: AppContext, offset: int, limit: int | None) -> None:
    """List cards ordered by ID."""
    from sixtydays.services.cards import CardService

    app.emit(CardService(app.workspace).list(offset=offset, limit=limit))


@cards.command()
@click.argument("card_id", type=_CARD_ID)
@click.pass_obj
def get(app: AppContext, card_id: int) -> None:
    """Show the card with CARD_ID."""
    from sixtydays.services.cards import CardService

    app.emit(CardService(app.workspace).get(card_id))


@cards.command()
@click.argument("card_id", type=_CARD_ID)
@click.option("--title", default=None, help="New title.")
@click.option("--description", default=None, help="New description.")
@click.option("--url", default=None, help="New http(s) link.")
@click.option("--clear-url", is_flag=True, help="Remove the link.")
@click.pass_obj
def update(
    app: AppContext,
    card_id: int,
    title: str | None,
    description: str | None,
    url: str | None,
    clear_url: bool,
) -> None:
    """Change some fields of the card with CARD_ID."""
    from sixtydays.services.cards import CardService

    if url is not None and clear_url:
        raise click.UsageError("--url and --clear-url are mutually exclusive")

    changes: dict[str, Any] = {}
    if title is not None:
        changes["title"] = title
    if description is not None:
        changes["description"] = description
    if url is not None:
        changes["url"] = url
    if clear_url:
        changes["url"] = None
    if not changes:
        raise click.UsageError("nothing to update")
    app.emit(CardService(app.workspace).patch(card_id, changes))


@cards.command()
@click.argument("card_id", type=_CARD_ID)
@click.pass_obj
def delete(app: AppContext, card_id: int) -> None:
    """Delete the card with CARD_ID."""
    from sixtydays.services.cards import CardService

    app.emit(CardService(app.workspace).delete(card_id))
