"""Subcommand modules for sixtydays.

register_commands() imports lazily so ``sixtydays --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root group."""
    # --- Groups ---
    from sixtydays.commands.cards import cards
    from sixtydays.commands.orders import orders

    cli.add_command(cards)
    cli.add_command(orders)

    # --- Standalone commands ---
    from sixtydays.commands.fizzbuzz import fizzbuzz
    from sixtydays.commands.hello import hello
    from sixtydays.commands.lessons import lessons
    from sixtydays.commands.pokedex import pokedex
    from sixtydays.commands.references import references
    from sixtydays.commands.serve import serve

    cli.add_command(lessons)
    cli.add_command(hello)
    cli.add_command(fizzbuzz)
    cli.add_command(pokedex)
    cli.add_command(references)
    cli.add_command(serve)
