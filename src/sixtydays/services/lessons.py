"""LessonService: browse the catalog of days."""

from __future__ import annotations

from sixtydays.domain.lessons import LESSONS, find_lesson
from sixtydays.services.base import BaseService
from sixtydays.services.result import ServiceResult


class LessonService(BaseService):
    def list(self) -> ServiceResult:
        items = [lesson.to_dict() for lesson in LESSONS]
        return ServiceResult(ok=True, op="list_lessons", data={"items": items, "count": len(items)})

    def get(self, day: int) -> ServiceResult:
        lesson = find_lesson(day)
        if lesson is None:
            return ServiceResult.failure(
                "get_lesson",
                "NOT_FOUND",
                f"No lesson for day {day}",
                available=[lesson.day for lesson in LESSONS],
            )
        return ServiceResult(ok=True, op="get_lesson", data=lesson.to_dict())
