"""Min-priority queue with first-in first-out tie-breaking."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Any, List, Tuple


class MinPriorityQueue:
    """Heap ordered by ascending priority.

    Entries are ``(priority, sequence, item)``. ``sequence`` only grows, so
    items with equal priority leave in insertion order and the items
    themselves are never compared.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Any]] = []
        self._counter: int = 0

    def push(self, priority: float, item: Any) -> None:
        heappush(self._heap, (priority, self._counter, item))
        self._counter += 1

    def pop(self) -> Any:
        """Remove and return the item with the lowest priority."""

        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heappop(self._heap)[2]

    def peek(self) -> Any:
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        return self._heap[0][2]

    def clear(self) -> None:
        self._heap.clear()
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["MinPriorityQueue"]
