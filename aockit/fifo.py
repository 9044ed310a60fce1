"""First-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class Queue:
    """A FIFO queue of arbitrary items."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add item at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front; IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)