"""Tests for telemetry spans and the @traced decorator."""

from collections.abc import Generator

import pytest

from sixtydays.services.result import ServiceResult
from sixtydays.services.telemetry import (
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@pytest.fixture
def _telemetry() -> Generator[None]:
    enable_telemetry()
    yield
    disable_telemetry()


class _Timed:
    @traced
    def run(self) -> ServiceResult:
        with trace_span("inner") as span:
            if span is not None:
                span.annotate("n", 3)
        return ServiceResult(ok=True, op="timed")

    @traced
    def plain(self) -> int:
        return 7


class TestTraced:
    def test_disabled_leaves_meta_empty(self) -> None:
        assert _Timed().run().meta is None

    @pytest.mark.usefixtures("_telemetry")
    def test_enabled_injects_span_tree(self) -> None:
        result = _Timed().run()
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "_Timed.run"
        assert tree["children"][0]["name"] == "inner"
        assert tree["children"][0]["annotations"] == {"n": 3}

    @pytest.mark.usefixtures("_telemetry")
    def test_non_result_return_untouched(self) -> None:
        assert _Timed().plain() == 7

    @pytest.mark.usefixtures("_telemetry")
    def test_span_reset_after_call(self) -> None:
        _Timed().run()
        with trace_span("after") as span:
            assert span is None

    def test_trace_span_without_parent_yields_none(self) -> None:
        with trace_span("orphan") as span:
            assert span is None
