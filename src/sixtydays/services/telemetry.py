"""Telemetry primitives: Span, @traced, trace_span.

A single ContextVar read per call when disabled. When enabled via
--verbose, builds a span tree with timings and injects it into
ServiceResult.meta["telemetry"].
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from sixtydays.services.result import ServiceResult

log = structlog.get_logger("sixtydays.telemetry")

_enabled: ContextVar[bool] = ContextVar("_telemetry_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)


@dataclass
class Span:
    """Timing span with nested children and free-form annotations."""

    name: str
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "duration_ms": round(self.duration_ms, 2),
        }
        if self.annotations:
            out["annotations"] = self.annotations
        if self.children:
            out["children"] = [c.to_dict() for c in self.children]
        return out


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Open a child span under the current one; yields None when disabled."""
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name)
    parent.children.append(child)
    token = _current_span.set(child)
    try:
        yield child
    finally:
        child.end()
        _current_span.reset(token)


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach the span tree to its ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        span = Span(name=func.__qualname__)
        token = _current_span.set(span)
        try:
            result = func(*args, **kwargs)
        except Exception:
            span.end()
            log.debug("span.complete", span_name=span.name, duration_ms=span.duration_ms, ok=False)
            raise
        finally:
            _current_span.reset(token)

        span.end()
        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": span.to_dict()}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
            ok = result.ok  # type: ignore[attr-defined]
        else:
            ok = True
        log.debug(
            "span.complete",
            span_name=span.name,
            duration_ms=round(span.duration_ms, 2),
            ok=ok,
            children=len(span.children),
        )
        return result

    return wrapper


def enable_telemetry() -> None:
    """Enable telemetry (called by AppContext when --verbose is set)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
