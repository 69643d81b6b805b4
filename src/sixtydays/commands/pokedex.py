"""Command: day 6, look a Pokémon up on PokeAPI."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sixtydays.commands._base import SixtyCommand

if TYPE_CHECKING:
    from sixtydays.commands._context import AppContext


@click.command(
    cls=SixtyCommand,
    examples="""\
  sixtydays pokedex pikachu
  sixtydays --json pokedex "Mr Mime"
  SIXTYDAYS_POKEDEX__BASE_URL=http://localhost:9000/api/v2 sixtydays pokedex ditto""",
)
@click.argument("name")
@click.pass_obj
def pokedex(app: AppContext, name: str) -> None:
    """Fetch a Pokémon by NAME (or national dex number)."""
    from sixtydays.services.pokedex import PokedexService

    app.emit(PokedexService(app.workspace).lookup(name))
