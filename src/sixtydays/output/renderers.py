"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO. Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sixtydays.output.console import create_console, get_output, style_for_answer

if TYPE_CHECKING:
    from rich.console import Console

    from sixtydays.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: ids for listings, else a status line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        ids = [_extract_id(item) for item in items]
        if any(ids):
            return "\n".join(i for i in ids if i)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    if isinstance(item, dict):
        for key in ("id", "day"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sd.ok"), Text(f"  {result.op}", style="sd.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="sd.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="sd.id")
    elif key == "title":
        v = Text(str(value), style="sd.title")
    elif key in ("total", "discount", "due"):
        v = Text(f"{value:.2f}", style="sd.money")
    else:
        v = Text(str(value))
    console.print(k + v)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block including the telemetry span tree."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = Text(" " * indent)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="sd.error") + Text(f"  {result.op}", style="sd.op")
    console.print(line + Text(f" — {msg}"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Exercise renderers ────────────────────────────────────────────────


def _render_hello(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text(str(result.data.get("message", ""))))
    if verbose:
        _render_meta(console, result)


def _render_fizzbuzz(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for item in result.data.get("items", []):
        answer = str(item.get("answer", ""))
        if verbose:
            line = Text(f"{item.get('number'):>6}  ", style="dim")
            line.append(answer, style=style_for_answer(answer))
        else:
            line = Text(answer, style=style_for_answer(answer))
        console.print(line)
    if verbose:
        _render_meta(console, result)


def _order_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Product", style="sd.title")
    table.add_column("Qty", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Total", justify="right", style="sd.money")
    for item in items:
        table.add_row(
            Text(str(item.get("product", ""))),
            str(item.get("quantity", "")),
            f"{item.get('price', 0):.2f}",
            f"{item.get('total', 0):.2f}",
        )
    return table


def _render_quote(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "customer", d.get("customer", ""))
    _field(console, "fidelity", d.get("fidelity", 0))
    _field(console, "promotion", d.get("promotion") or "none")
    if d.get("items"):
        console.print(_order_table(d["items"]))
    for key in ("total", "discount", "due"):
        _field(console, key, d.get(key, 0.0))
    if verbose:
        _render_meta(console, result)


def _render_orders_demo(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for scenario in result.data.get("items", []):
        console.print(Text(str(scenario.get("scenario", "")), style="sd.title"))
        if verbose:
            console.print(_order_table(scenario.get("items", [])))
        promo = scenario.get("promotion") or "none"
        console.print(Text(f"  {promo}: {scenario.get('summary', '')}"))
    if verbose:
        _render_meta(console, result)


def _render_pokemon(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    lines = [
        f"types: {', '.join(d.get('types', [])) or '-'}",
        f"abilities: {', '.join(d.get('abilities', [])) or '-'}",
        f"height: {d.get('height')}  weight: {d.get('weight')}",
        f"base experience: {d.get('base_experience')}",
        f"moves: {d.get('moves_count', 0)}",
    ]
    stats = d.get("stats") or {}
    if stats:
        lines.append("")
        lines.extend(f"{name:<16}{value:>4}" for name, value in stats.items())
    if d.get("sprite"):
        lines.append("")
        lines.append(f"sprite: {d['sprite']}")
    title = f"#{d.get('id', '?')} {str(d.get('name', '?')).title()}"
    panel = Panel(Text("\n".join(lines)), title=Text(title), border_style="dim", expand=False)
    console.print(panel)
    if verbose:
        _render_meta(console, result)


def _render_references(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Step")
    table.add_column("Value", style="sd.id")
    for step in result.data.get("steps", []):
        table.add_row(str(step.get("step")), str(step.get("action")), str(step.get("value")))
    console.print(table)
    _field(console, "final", result.data.get("final"))
    if verbose:
        _render_meta(console, result)


def _render_lessons(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Day", justify="right", style="sd.id")
    table.add_column("Lesson", style="sd.title")
    table.add_column("Try")
    for lesson in result.data.get("items", []):
        table.add_row(str(lesson.get("day")), str(lesson.get("title")), str(lesson.get("command")))
    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} lessons")


# ── Card renderers ────────────────────────────────────────────────────


def _render_card(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create/get/replace/patch/delete card results."""
    _status_line(console, result)
    for key in ("id", "title", "description", "url", "created", "modified"):
        value = result.data.get(key)
        if value not in (None, ""):
            _field(console, key, value)
    if result.data.get("fields_changed") is not None:
        _field(console, "fields_changed", ", ".join(result.data["fields_changed"]) or "-")
    if verbose:
        _render_meta(console, result)


def _render_card_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    items = d.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="sd.id", no_wrap=True, justify="right")
    table.add_column("Title", style="sd.title")
    table.add_column("URL")
    if verbose:
        table.add_column("Modified", style="dim")
    for item in items:
        row: list[Any] = [
            str(item.get("id", "")),
            Text(str(item.get("title", ""))),
            Text(str(item.get("url") or "")),
        ]
        if verbose:
            row.append(str(item.get("modified", "")))
        table.add_row(*row)
    console.print(table)
    shown = d.get("count", len(items))
    console.print(f"\n{shown} of {d.get('total', shown)} cards (offset {d.get('offset', 0)})")
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "hello": _render_hello,
    "fizzbuzz": _render_fizzbuzz,
    "quote": _render_quote,
    "orders_demo": _render_orders_demo,
    "pokedex": _render_pokemon,
    "references": _render_references,
    "list_lessons": _render_lessons,
    "get_lesson": _render_generic,
    "create_card": _render_card,
    "get_card": _render_card,
    "replace_card": _render_card,
    "patch_card": _render_card,
    "delete_card": _render_card,
    "list_cards": _render_card_table,
}
