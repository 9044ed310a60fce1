"""Circular doubly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class DListNode:
    """A node of a circular doubly linked list.

    A node that links only to itself is an empty list; such a node is used as
    the list head, and the values of the other nodes are reached from it.
    """

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: DListNode = self
        self.next: DListNode = self

    def __repr__(self) -> str:
        return f"DListNode({self.value!r})"

    def _insert_between(self, before: DListNode, after: DListNode) -> None:
        before.next = self
        self.prev = before
        self.next = after
        after.prev = self

    @staticmethod
    def _check_free(node: DListNode) -> None:
        if node.next is not node:
            raise ValueError("node is already in a list")

    def append(self, node: DListNode) -> None:
        """Insert node directly after this one."""
        self._check_free(node)
        node._insert_between(self, self.next)

    def prepend(self, node: DListNode) -> None:
        """Insert node directly before this one (at the tail when this is the head)."""
        self._check_free(node)
        node._insert_between(self.prev, self)

    def remove(self) -> None:
        """Unlink this node from its list, leaving it as an empty list of its own."""
        before, after = self.prev, self.next
        before.next = after
        after.prev = before
        self.prev = self
        self.next = self

    def is_empty(self) -> bool:
        """True when no other node is linked to this one."""
        return self.next is self

    def __iter__(self) -> Iterator[Any]:
        """Yield the values of the other nodes, starting after this one."""
        node = self.next
        while node is not self:
            following = node.next
            yield node.value
            node = following