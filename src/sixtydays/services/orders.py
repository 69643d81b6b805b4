"""OrderService: day 8, pricing orders under interchangeable promotions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sixtydays.domain.orders import (
    PROMOTIONS,
    Customer,
    LineItem,
    Order,
    bulk_item_promo,
    fidelity_promo,
    large_order_promo,
    parse_line_item,
)
from sixtydays.services.base import BaseService
from sixtydays.services.result import ServiceResult
from sixtydays.services.telemetry import traced


def _money(value: float) -> float:
    return round(value, 2)


def order_to_dict(order: Order, promotion: str | None) -> dict[str, Any]:
    return {
        "customer": order.customer.name,
        "fidelity": order.customer.fidelity,
        "items": [
            {
                "product": item.product,
                "quantity": item.quantity,
                "price": item.price,
                "total": _money(item.total),
            }
            for item in order.cart
        ],
        "promotion": promotion,
        "total": _money(order.total),
        "discount": _money(order.discount),
        "due": _money(order.due),
    }


class OrderService(BaseService):
    @traced
    def quote(
        self,
        customer: str,
        items: Sequence[str],
        *,
        fidelity: int = 0,
        promotion: str | None = None,
    ) -> ServiceResult:
        """Price a cart given as ``product:quantity:price`` strings."""
        op = "quote"
        promo = None
        if promotion is not None:
            promo = PROMOTIONS.get(promotion)
            if promo is None:
                return ServiceResult.failure(
                    op,
                    "UNKNOWN_PROMOTION",
                    f"Unknown promotion: {promotion!r}",
                    available=sorted(PROMOTIONS),
                )

        cart: list[LineItem] = []
        for raw in items:
            try:
                cart.append(parse_line_item(raw))
            except ValueError as exc:
                return ServiceResult.failure(op, "INVALID_ITEM", str(exc), item=raw)

        order = Order(Customer(customer, fidelity), tuple(cart), promo)
        warnings = [] if cart else ["Empty cart"]
        data = order_to_dict(order, promotion)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def demo(self) -> ServiceResult:
        """The classic walkthrough: who gets which discount, and why."""
        joe = Customer("John Doe", 0)
        ann = Customer("Ann Smith", 1100)
        cart = (
            LineItem("banana", 4, 0.5),
            LineItem("apple", 10, 1.5),
            LineItem("watermelon", 5, 5.0),
        )
        banana_cart = (LineItem("banana", 30, 0.5), LineItem("apple", 10, 1.5))
        large_cart = tuple(LineItem(chr(ord("A") + i), 1, 1.0) for i in range(10))

        scenarios = [
            ("Joe has no fidelity points", Order(joe, cart, fidelity_promo), "fidelity"),
            ("Ann has 1100 fidelity points", Order(ann, cart, fidelity_promo), "fidelity"),
            ("Joe buys 30 bananas", Order(joe, banana_cart, bulk_item_promo), "bulk"),
            ("Joe buys 10 distinct items", Order(joe, large_cart, large_order_promo), "large"),
            ("Only 3 distinct items", Order(joe, cart, large_order_promo), "large"),
        ]
        items = [
            {"scenario": label, "summary": str(order), **order_to_dict(order, name)}
            for label, order, name in scenarios
        ]
        return ServiceResult(ok=True, op="orders_demo", data={"items": items, "count": len(items)})
