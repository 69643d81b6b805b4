"""Tests for orders and promotion strategies."""

import pytest

from sixtydays.domain.orders import (
    PROMOTIONS,
    Customer,
    LineItem,
    Order,
    best_promo,
    bulk_item_promo,
    fidelity_promo,
    large_order_promo,
    parse_line_item,
)

JOE = Customer("John Doe", 0)
ANN = Customer("Ann Smith", 1100)
CART = (
    LineItem("banana", 4, 0.5),
    LineItem("apple", 10, 1.5),
    LineItem("watermelon", 5, 5.0),
)


class TestLineItem:
    def test_total(self) -> None:
        assert LineItem("apple", 10, 1.5).total == pytest.approx(15.0)

    def test_str(self) -> None:
        assert str(LineItem("apple", 10, 1.5)) == (
            "<LineItem product:apple quantity:10 price:1.50>"
        )

    def test_negative_quantity_rejected(self) -> None:
        with pytest.raises(ValueError, match="quantity"):
            LineItem("apple", -1, 1.0)

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValueError, match="price"):
            LineItem("apple", 1, -0.5)


class TestOrder:
    def test_total_and_due_without_promotion(self) -> None:
        order = Order(JOE, CART)
        assert order.total == pytest.approx(42.0)
        assert order.discount == 0.0
        assert order.due == pytest.approx(42.0)

    def test_str(self) -> None:
        assert str(Order(ANN, CART, fidelity_promo)) == "<Order total: 42.00 due: 39.90>"

    def test_empty_cart(self) -> None:
        order = Order(JOE)
        assert order.total == 0
        assert order.due == 0


class TestPromotions:
    def test_fidelity_needs_points(self) -> None:
        assert fidelity_promo(Order(JOE, CART)) == 0.0
        assert fidelity_promo(Order(ANN, CART)) == pytest.approx(2.1)

    def test_fidelity_threshold_inclusive(self) -> None:
        order = Order(Customer("Edge", 1000), CART)
        assert fidelity_promo(order) == pytest.approx(2.1)

    def test_bulk_item_only_discounts_bulk_lines(self) -> None:
        cart = (LineItem("banana", 30, 0.5), LineItem("apple", 10, 1.5))
        order = Order(JOE, cart, bulk_item_promo)
        assert order.discount == pytest.approx(1.5)
        assert str(order) == "<Order total: 30.00 due: 28.50>"

    def test_large_order(self) -> None:
        cart = tuple(LineItem(chr(ord("A") + i), 1, 1.0) for i in range(10))
        order = Order(JOE, cart, large_order_promo)
        assert order.discount == pytest.approx(0.7)
        assert str(order) == "<Order total: 10.00 due: 9.30>"

    def test_large_order_counts_distinct_products(self) -> None:
        assert large_order_promo(Order(JOE, CART)) == 0.0
        repeated = tuple(LineItem("A", 1, 1.0) for _ in range(12))
        assert large_order_promo(Order(JOE, repeated)) == 0.0

    def test_best_promo_picks_maximum(self) -> None:
        cart = (LineItem("banana", 30, 0.5), LineItem("apple", 10, 1.5))
        assert best_promo(Order(ANN, CART)) == pytest.approx(2.1)
        assert best_promo(Order(JOE, cart)) == pytest.approx(1.5)
        assert best_promo(Order(JOE, CART)) == 0.0

    def test_registry(self) -> None:
        assert set(PROMOTIONS) == {"fidelity", "bulk", "large", "best"}


class TestParseLineItem:
    def test_valid(self) -> None:
        item = parse_line_item("banana:4:0.5")
        assert item == LineItem("banana", 4, 0.5)

    def test_product_with_colon(self) -> None:
        assert parse_line_item("tea:earl grey:2:3.0").product == "tea:earl grey"

    @pytest.mark.parametrize("text", ["banana", "banana:4", ":4:0.5", "banana:x:0.5", "b:1:y"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_line_item(text)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="quantity"):
            parse_line_item("banana:-1:0.5")
