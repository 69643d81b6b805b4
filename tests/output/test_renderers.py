"""Tests for the op-specific Rich renderers."""

from sixtydays.output.renderers import render_quiet, render_result
from sixtydays.services.result import ServiceError, ServiceResult


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


class TestRenderQuiet:
    def test_listing_ids(self) -> None:
        result = _ok("list_cards", items=[{"id": 1}, {"id": 2}])
        assert render_quiet(result) == "1\n2"

    def test_lesson_days(self) -> None:
        result = _ok("list_lessons", items=[{"day": 1}, {"day": 25}])
        assert render_quiet(result) == "1\n25"

    def test_items_without_ids(self) -> None:
        result = _ok("fizzbuzz", items=[{"number": 1, "answer": "1"}])
        assert render_quiet(result) == "OK: fizzbuzz"

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False, op="get_card", error=ServiceError(code="NOT_FOUND", message="gone")
        )
        assert render_quiet(result) == "ERROR: get_card — gone"


class TestRenderResult:
    def test_hello(self) -> None:
        assert render_result(_ok("hello", message="Hello World!!")) == "Hello World!!"

    def test_fizzbuzz_lines(self) -> None:
        items = [{"number": n, "answer": a} for n, a in [(3, "Fizz"), (4, "4"), (5, "Buzz")]]
        output = render_result(_ok("fizzbuzz", items=items))
        assert output.splitlines() == ["Fizz", "4", "Buzz"]

    def test_fizzbuzz_verbose_shows_numbers(self) -> None:
        result = _ok("fizzbuzz", items=[{"number": 15, "answer": "FizzBuzz"}])
        output = render_result(result, verbose=True)
        assert "15" in output
        assert "FizzBuzz" in output

    def test_quote(self) -> None:
        result = _ok(
            "quote",
            customer="Ann",
            fidelity=1100,
            promotion="fidelity",
            items=[{"product": "apple", "quantity": 10, "price": 1.5, "total": 15.0}],
            total=15.0,
            discount=0.75,
            due=14.25,
        )
        output = render_result(result)
        assert "Ann" in output
        assert "apple" in output
        assert "14.25" in output

    def test_orders_demo(self) -> None:
        scenario = {
            "scenario": "Ann, fidelity",
            "promotion": "fidelity",
            "items": [],
            "summary": "<Order total: 42.00 due: 39.90>",
        }
        output = render_result(_ok("orders_demo", items=[scenario]))
        assert "Ann, fidelity" in output
        assert "<Order total: 42.00 due: 39.90>" in output

    def test_pokemon_panel(self) -> None:
        result = _ok(
            "pokedex",
            id=25,
            name="pikachu",
            height=4,
            weight=60,
            base_experience=112,
            types=["electric"],
            abilities=["static", "lightning-rod (hidden)"],
            stats={"hp": 35},
            moves_count=1,
            sprite=None,
        )
        output = render_result(result)
        assert "#25 Pikachu" in output
        assert "electric" in output
        assert "hp" in output

    def test_card(self) -> None:
        result = _ok(
            "patch_card",
            id=7,
            title="Learn rich",
            description="",
            url=None,
            created="2024-01-01T00:00:00+00:00",
            modified="2024-01-02T00:00:00+00:00",
            fields_changed=["title"],
        )
        output = render_result(result)
        assert "OK" in output
        assert "Learn rich" in output
        assert "fields_changed: title" in output
        assert "url" not in output

    def test_card_table(self) -> None:
        items = [{"id": 1, "title": "One", "url": None, "modified": "x"}]
        output = render_result(_ok("list_cards", items=items, count=1, total=3, offset=0))
        assert "One" in output
        assert "1 of 3 cards" in output

    def test_references(self) -> None:
        steps = [{"step": 1, "action": "start", "value": 43}]
        output = render_result(_ok("references", steps=steps, final=43))
        assert "start" in output
        assert "final: 43" in output

    def test_generic_fallback(self) -> None:
        output = render_result(_ok("something_else", answer=42))
        assert "something_else" in output
        assert "answer: 42" in output

    def test_error_detail_only_when_verbose(self) -> None:
        result = ServiceResult(
            ok=False,
            op="get_card",
            error=ServiceError(code="NOT_FOUND", message="gone", detail={"id": 9}),
        )
        assert "id: 9" not in render_result(result)
        assert "id: 9" in render_result(result, verbose=True)

    def test_verbose_telemetry_tree(self) -> None:
        span = {
            "name": "CardService.get",
            "duration_ms": 1.5,
            "annotations": {},
            "children": [{"name": "query", "duration_ms": 0.5, "children": []}],
        }
        result = ServiceResult(
            ok=True, op="hello", data={"message": "hi"}, meta={"telemetry": span}
        )
        output = render_result(result, verbose=True)
        assert "CardService.get" in output
        assert "query" in output
        assert "CardService.get" not in render_result(result)
