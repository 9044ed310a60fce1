"""Binary min-heap keyed by integers, carrying a payload per entry."""

from __future__ import annotations

from typing import Any


class MinHeap:
    """A min-heap of (key, payload) entries ordered by key alone."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, Any]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def insert(self, key: int, payload: Any = None) -> None:
        """Add an entry with the given key and payload."""
        self._heap.append((key, payload))
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> tuple[int, Any]:
        """Return the smallest-key entry without removing it; IndexError when empty."""
        if not self._heap:
            raise IndexError("peek into an empty heap")
        return self._heap[0]

    def get(self) -> tuple[int, Any]:
        """Remove and return the smallest-key entry; IndexError when empty."""
        top = self.peek()
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def _sift_up(self, idx: int) -> None:
        heap = self._heap
        while idx > 0:
            parent = (idx - 1) >> 1
            if heap[parent][0] <= heap[idx][0]:
                break
            heap[parent], heap[idx] = heap[idx], heap[parent]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        heap = self._heap
        count = len(heap)
        while True:
            smallest = idx
            left, right = 2 * idx + 1, 2 * idx + 2
            if left < count and heap[left][0] < heap[smallest][0]:
                smallest = left
            if right < count and heap[right][0] < heap[smallest][0]:
                smallest = right
            if smallest == idx:
                return
            heap[idx], heap[smallest] = heap[smallest], heap[idx]
            idx = smallest