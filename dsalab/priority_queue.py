"""A binary min-heap keyed on integer priorities."""

from __future__ import annotations

from typing import Any


class PriorityQueue:
    """Values ordered by priority; the lowest priority comes out first."""

    __slots__ = ("_heap",)

    def __init__(self) -> None:
        self._heap: list[tuple[Any, int]] = []

    def insert(self, item: Any, priority: int) -> None:
        """Add ``item`` with the given ``priority``."""
        self._heap.append((item, priority))
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> Any:
        """Remove and return the item with the lowest priority."""
        if not self._heap:
            raise IndexError("attempt to extract from an empty queue")
        min_item = self._heap[0][0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return min_item

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[parent][1] <= heap[index][1]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and heap[left][1] < heap[smallest][1]:
                smallest = left
            if right < size and heap[right][1] < heap[smallest][1]:
                smallest = right
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest