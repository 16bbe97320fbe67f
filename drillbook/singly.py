"""Singly linked lists: insertion, removal, sorted insertion, merging and cycle detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

__all__ = ["Node", "SinglyLinkedList", "has_cycle", "merge_sorted"]


@dataclass(eq=False, repr=False)
class Node:
    """One cell of a singly linked list; nodes compare by identity."""

    value: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class SinglyLinkedList:
    """A chain of :class:`Node` objects reachable from ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Put ``value`` before the current head and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def append(self, value: Any) -> Node:
        """Put ``value`` after the last node and return its node."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def node_at(self, index: int) -> Node:
        """Return the node at 0-based ``index``."""
        if index < 0:
            raise IndexError("list index out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("list index out of range")

    def insert_at(self, index: int, value: Any) -> Node:
        """Insert ``value`` so that it ends up at 0-based ``index``."""
        if index == 0:
            return self.push_front(value)
        if index < 0:
            raise IndexError("list index out of range")
        return self.insert_after(self.node_at(index - 1), value)

    def insert_after(self, node: Node, value: Any) -> Node:
        """Insert ``value`` right after ``node`` and return the new node."""
        created = Node(value, node.next)
        node.next = created
        return created

    def insert_sorted(self, value: Any) -> Node:
        """Insert ``value`` keeping an ascending list ascending."""
        if self.head is None or value < self.head.value:
            return self.push_front(value)
        cursor = self.head
        while cursor.next is not None and cursor.next.value < value:
            cursor = cursor.next
        return self.insert_after(cursor, value)

    def pop_front(self) -> Any:
        """Remove the head node and return its value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        removed = self.head
        self.head = removed.next
        removed.next = None
        return removed.value

    def format(self, separator: str = "-->") -> str:
        """Values joined by ``separator``."""
        return separator.join(str(value) for value in self)


def has_cycle(head: Node | None) -> bool:
    """Detect a loop with a slow and a fast pointer."""
    slow = fast = head
    while slow is not None and fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> SinglyLinkedList:
    """Merge two ascending sequences into a new ascending list.

    On equal values the one from ``second`` is taken first.
    """
    merged = SinglyLinkedList()
    tail: Node | None = None

    def put(value: Any) -> None:
        nonlocal tail
        node = Node(value)
        if tail is None:
            merged.head = node
        else:
            tail.next = node
        tail = node

    left_iter, right_iter = iter(first), iter(second)
    missing = object()
    left = next(left_iter, missing)
    right = next(right_iter, missing)
    while left is not missing and right is not missing:
        if left < right:
            put(left)
            left = next(left_iter, missing)
        else:
            put(right)
            right = next(right_iter, missing)
    while left is not missing:
        put(left)
        left = next(left_iter, missing)
    while right is not missing:
        put(right)
        right = next(right_iter, missing)
    return merged