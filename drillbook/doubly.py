"""Doubly linked lists with insertion and removal at either end or in the middle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

__all__ = ["DoublyNode", "DoublyLinkedList"]


@dataclass(eq=False, repr=False)
class DoublyNode:
    """One cell of a doubly linked list; nodes compare by identity."""

    value: Any
    prev: DoublyNode | None = None
    next: DoublyNode | None = None

    def __repr__(self) -> str:
        return f"DoublyNode({self.value!r})"


class DoublyLinkedList:
    """A chain of :class:`DoublyNode` objects walkable in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def push_front(self, value: Any) -> DoublyNode:
        """Put ``value`` before the head and return its node."""
        node = DoublyNode(value, None, self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1
        return node

    def append(self, value: Any) -> DoublyNode:
        """Put ``value`` after the tail and return its node."""
        node = DoublyNode(value, self.tail, None)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1
        return node

    def _node_at(self, index: int) -> DoublyNode:
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        node = self.head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at(self, index: int, value: Any) -> DoublyNode:
        """Insert ``value`` so that it ends up at 0-based ``index``."""
        if index == 0:
            return self.push_front(value)
        if index == self._size:
            return self.append(value)
        following = self._node_at(index)
        previous = following.prev
        node = DoublyNode(value, previous, following)
        assert previous is not None
        previous.next = node
        following.prev = node
        self._size += 1
        return node

    def _unlink(self, node: DoublyNode) -> Any:
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def pop_front(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        return self._unlink(self.head)

    def pop_back(self) -> Any:
        """Remove the last node and return its value."""
        if self.tail is None:
            raise IndexError("pop from empty list")
        return self._unlink(self.tail)

    def remove_at(self, index: int) -> Any:
        """Remove the node at 0-based ``index`` and return its value."""
        return self._unlink(self._node_at(index))

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self.head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self.head, self.tail = self.tail, self.head