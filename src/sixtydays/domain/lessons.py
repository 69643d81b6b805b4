"""Catalog of the day-numbered lessons and the command that runs each."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Lesson:
    day: int
    slug: str
    title: str
    command: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


LESSONS: tuple[Lesson, ...] = (
    Lesson(1, "hello", "Hello world", "sixtydays hello"),
    Lesson(2, "fizzbuzz", "FizzBuzz through a worker thread and queues", "sixtydays fizzbuzz 1 15"),
    Lesson(6, "pokedex", "Decoding a JSON API into models", "sixtydays pokedex pikachu"),
    Lesson(8, "orders", "Strategy pattern with functions", "sixtydays orders demo"),
    Lesson(11, "cards-models", "Validated card models", "sixtydays cards create TITLE"),
    Lesson(12, "cards-store", "Persisting cards with SQLAlchemy Core", "sixtydays cards list"),
    Lesson(13, "cards-api", "A REST API for cards", "sixtydays serve"),
    Lesson(25, "references", "Mutation through shared references", "sixtydays references"),
)


def find_lesson(day: int) -> Lesson | None:
    for lesson in LESSONS:
        if lesson.day == day:
            return lesson
    return None
