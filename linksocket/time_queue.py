"""A queue that releases items only once their time has come."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Generic, TypeVar

from linksocket.clock import Instant

T = TypeVar("T")


@dataclass
class ItemContainer(Generic[T]):
    """An item together with the moment it becomes available."""

    instant: Instant
    item: T


class TimeQueue(Generic[T]):
    """Holds items by time; the earliest is released once its moment passes."""

    def __init__(self) -> None:
        self._heap: list[tuple[Instant, int, ItemContainer[T]]] = []
        self._counter = itertools.count()

    def add_item(self, instant: Instant, item: T) -> None:
        """Queue an item to become available at the given moment."""
        container = ItemContainer(instant, item)
        heapq.heappush(self._heap, (instant, next(self._counter), container))

    def has_item(self) -> bool:
        """Whether the earliest item's moment has arrived."""
        return bool(self._heap) and self._heap[0][0] <= Instant.now()

    def pop_item(self) -> T | None:
        """Remove and return the earliest item if it is ready, else None."""
        if not self.has_item():
            return None
        return heapq.heappop(self._heap)[2].item

    def peek_entry(self) -> ItemContainer[T] | None:
        """The earliest entry, ready or not, without removing it."""
        return self._heap[0][2] if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)