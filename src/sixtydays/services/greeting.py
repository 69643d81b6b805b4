"""GreetingService: day 1, hello world."""

from __future__ import annotations

from sixtydays.services.base import BaseService
from sixtydays.services.result import ServiceResult
from sixtydays.services.telemetry import traced

DEFAULT_SUBJECT = "World"


class GreetingService(BaseService):
    @traced
    def hello(self, name: str | None = None) -> ServiceResult:
        subject = (name or "").strip() or DEFAULT_SUBJECT
        return ServiceResult(ok=True, op="hello", data={"message": f"Hello {subject}!!"})
