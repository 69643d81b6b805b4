"""FizzBuzzService: day 2, answers computed by a worker thread."""

from __future__ import annotations

from typing import Any

from sixtydays.domain.fizzbuzz import fizzbuzz
from sixtydays.infrastructure.workers import QueueWorker
from sixtydays.services.base import BaseService
from sixtydays.services.result import ServiceResult
from sixtydays.services.telemetry import trace_span, traced


class FizzBuzzService(BaseService):
    def worker(self) -> QueueWorker[int, str]:
        """A fresh worker thread answering FizzBuzz requests."""
        return QueueWorker(
            fizzbuzz,
            timeout=self.settings.fizzbuzz.timeout_seconds,
            name="fizzbuzz-worker",
        )

    @traced
    def sequence(self, start: int, stop: int) -> ServiceResult:
        """Answers for every number in ``[start, stop]``, in order."""
        op = "fizzbuzz"
        if start > stop:
            return ServiceResult.failure(
                op,
                "INVALID_RANGE",
                f"start ({start}) must not be greater than stop ({stop})",
                start=start,
                stop=stop,
            )
        limit = self.settings.fizzbuzz.max_count
        if stop - start + 1 > limit:
            return ServiceResult.failure(
                op,
                "INVALID_RANGE",
                f"range {start}..{stop} has more than {limit} numbers",
                start=start,
                stop=stop,
                max_count=limit,
            )

        items: list[dict[str, Any]] = []
        with trace_span("worker") as span, self.worker() as worker:
            for number in range(start, stop + 1):
                try:
                    answer = worker.ask(number)
                except TimeoutError as exc:
                    return ServiceResult.failure(op, "TIMEOUT", str(exc), number=number)
                items.append({"number": number, "answer": answer})
            if span is not None:
                span.annotate("requests", len(items))

        return ServiceResult(
            ok=True,
            op=op,
            data={"start": start, "stop": stop, "items": items, "count": len(items)},
        )
