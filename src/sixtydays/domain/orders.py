"""Orders and promotions (day 8): the strategy pattern with plain functions.

A promotion is any callable ``Order -> float`` returning the discount.
The order does not know which promotion it carries; swapping strategies
means passing a different function.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

FIDELITY_THRESHOLD = 1000
FIDELITY_RATE = 0.05
BULK_QUANTITY = 20
BULK_RATE = 0.10
LARGE_ORDER_DISTINCT = 10
LARGE_ORDER_RATE = 0.07


@dataclass(frozen=True)
class Customer:
    name: str
    fidelity: int = 0


@dataclass(frozen=True)
class LineItem:
    product: str
    quantity: int
    price: float

    def __post_init__(self) -> None:
        if self.quantity < 0:
            msg = f"quantity must be >= 0, got {self.quantity}"
            raise ValueError(msg)
        if self.price < 0:
            msg = f"price must be >= 0, got {self.price}"
            raise ValueError(msg)

    @property
    def total(self) -> float:
        return self.quantity * self.price

    def __str__(self) -> str:
        return f"<LineItem product:{self.product} quantity:{self.quantity} price:{self.price:.2f}>"


Promotion = Callable[["Order"], float]


@dataclass(frozen=True)
class Order:
    """A customer's cart plus an optional promotion."""

    customer: Customer
    cart: Sequence[LineItem] = field(default_factory=tuple)
    promotion: Promotion | None = None

    @property
    def total(self) -> float:
        return sum(item.total for item in self.cart)

    @property
    def discount(self) -> float:
        if self.promotion is None:
            return 0.0
        return self.promotion(self)

    @property
    def due(self) -> float:
        return self.total - self.discount

    def __str__(self) -> str:
        return f"<Order total: {self.total:.2f} due: {self.due:.2f}>"

    __repr__ = __str__


def fidelity_promo(order: Order) -> float:
    """5% discount for customers with 1000 or more fidelity points."""
    if order.customer.fidelity >= FIDELITY_THRESHOLD:
        return order.total * FIDELITY_RATE
    return 0.0


def bulk_item_promo(order: Order) -> float:
    """10% discount on each line item with 20 or more units."""
    discount = 0.0
    for item in order.cart:
        if item.quantity >= BULK_QUANTITY:
            discount += item.total * BULK_RATE
    return discount


def large_order_promo(order: Order) -> float:
    """7% discount for orders with 10 or more distinct products."""
    distinct = {item.product for item in order.cart}
    if len(distinct) >= LARGE_ORDER_DISTINCT:
        return order.total * LARGE_ORDER_RATE
    return 0.0


def best_promo(order: Order) -> float:
    """Best discount available among the individual promotions."""
    return max(promo(order) for promo in (fidelity_promo, bulk_item_promo, large_order_promo))


PROMOTIONS: dict[str, Promotion] = {
    "fidelity": fidelity_promo,
    "bulk": bulk_item_promo,
    "large": large_order_promo,
    "best": best_promo,
}


def parse_line_item(text: str) -> LineItem:
    """Parse ``product:quantity:price`` into a LineItem.

    The product may itself contain colons; quantity and price are taken
    from the right.

    Raises:
        ValueError: Malformed text, non-numeric fields, or negative values.
    """
    parts = text.rsplit(":", 2)
    if len(parts) != 3 or not parts[0].strip():
        msg = f"expected product:quantity:price, got {text!r}"
        raise ValueError(msg)
    product, quantity, price = parts
    try:
        return LineItem(product.strip(), int(quantity), float(price))
    except ValueError as exc:
        msg = f"invalid line item {text!r}: {exc}"
        raise ValueError(msg) from exc
