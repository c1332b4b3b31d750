"""A min-heap of integers."""

from __future__ import annotations

import heapq


class MinInts:
    """Min-heap of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        """Report whether the heap is empty."""
        return not self._items

    def push(self, x: int) -> None:
        """Push x onto the heap."""
        heapq.heappush(self._items, x)

    def pop(self) -> int:
        """Remove and return the minimum element; IndexError if empty."""
        return heapq.heappop(self._items)