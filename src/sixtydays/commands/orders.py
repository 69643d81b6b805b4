"""Command group: day 8, orders priced under promotions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sixtydays.commands._base import SixtyGroup
from sixtydays.domain.orders import PROMOTIONS

if TYPE_CHECKING:
    from sixtydays.commands._context import AppContext


@click.group(
    cls=SixtyGroup,
    examples="""\
  sixtydays orders demo
  sixtydays orders quote --customer Ann --fidelity 1100 --item banana:4:0.5 --promo fidelity
  sixtydays orders quote --customer Joe --item banana:30:0.5 --item apple:10:1.5 --promo best""",
)
def orders() -> None:
    """Price orders with interchangeable promotion strategies."""


@orders.command()
@click.option("--customer", required=True, help="Customer name.")
@click.option("--fidelity", default=0, show_default=True, type=int, help="Fidelity points.")
@click.option(
    "--item",
    "items",
    multiple=True,
    metavar="PRODUCT:QTY:PRICE",
    help="Line item (repeatable).",
)
@click.option(
    "--promo",
    "promotion",
    type=click.Choice(sorted(PROMOTIONS)),
    default=None,
    help="Promotion to apply.",
)
@click.pass_obj
def quote(
    app: AppContext,
    customer: str,
    fidelity: int,
    items: tuple[str, ...],
    promotion: str | None,
) -> None:
    """Compute total, discount and amount due for a cart."""
    from sixtydays.services.orders import OrderService

    app.emit(
        OrderService(app.workspace).quote(
            customer, items, fidelity=fidelity, promotion=promotion
        )
    )


@orders.command()
@click.pass_obj
def demo(app: AppContext) -> None:
    """Replay the classic promotion scenarios."""
    from sixtydays.services.orders import OrderService

    app.emit(OrderService(app.workspace).demo())
