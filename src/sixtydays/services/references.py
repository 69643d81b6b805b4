"""ReferencesService: day 25, mutation through a shared reference."""

from __future__ import annotations

from typing import Any

from sixtydays.domain.references import Ref, decrement
from sixtydays.services.base import BaseService
from sixtydays.services.result import ServiceResult
from sixtydays.services.telemetry import traced


class ReferencesService(BaseService):
    @traced
    def walkthrough(self, start: int = 43) -> ServiceResult:
        """Replay the lesson step by step and record what each step shows."""
        steps: list[dict[str, Any]] = []

        def record(action: str, value: Any) -> None:
            steps.append({"step": len(steps) + 1, "action": action, "value": value})

        ref: Ref[int] | None = None
        record("reference not set yet", ref)

        number = Ref(start)
        ref = number
        record("read through the reference", ref.value)
        record("same object", ref is number)

        number.value += 1
        record("increment the original", number.value)
        record("read through the reference again", ref.value)

        decrement(ref)
        record("decrement(ref) inside a function", number.value)

        return ServiceResult(
            ok=True,
            op="references",
            data={"start": start, "steps": steps, "final": number.value},
        )
