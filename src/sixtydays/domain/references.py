"""Mutable reference cell (day 25).

Python names are references already, but ints are immutable: rebinding a
parameter never reaches the caller. Wrapping the value in a cell gives
the caller and callee one shared, mutable slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Ref(Generic[T]):
    value: T


def decrement(ref: Ref[int]) -> None:
    """Decrease the referenced value by one, visible to every holder of *ref*."""
    ref.value -= 1


def increment(ref: Ref[int]) -> None:
    ref.value += 1
