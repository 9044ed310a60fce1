"""Last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class Stack:
    """A LIFO stack of arbitrary items."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put item on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)