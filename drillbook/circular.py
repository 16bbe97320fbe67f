"""A circular singly linked list kept in ascending order."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable, Iterator

from drillbook.singly import Node

__all__ = ["SortedCircularList"]


class SortedCircularList:
    """Ascending values in a ring whose last node points back to ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """One lap of the ring, starting at the smallest value."""
        return islice(self._cycle(), self._size)

    def __repr__(self) -> str:
        return f"SortedCircularList({list(self)!r})"

    def _cycle(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def insert(self, value: Any) -> Node:
        """Insert ``value`` at its sorted place and return its node."""
        node = Node(value)
        head = self.head
        if head is None:
            node.next = node
            self.head = node
        elif value < head.value:
            last = head
            while last.next is not head:
                assert last.next is not None
                last = last.next
            node.next = head
            last.next = node
            self.head = node
        else:
            cursor = head
            while cursor.next is not head and cursor.next.value < value:
                assert cursor.next is not None
                cursor = cursor.next
            node.next = cursor.next
            cursor.next = node
        self._size += 1
        return node

    def take(self, count: int) -> list[Any]:
        """The first ``count`` values met walking round the ring from ``head``."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count and self.head is None:
            raise IndexError("cannot walk an empty ring")
        return list(islice(self._cycle(), count))