"""A growable array that doubles its capacity when full and halves it when sparse."""

from __future__ import annotations

from typing import Any, Iterator

__all__ = ["Vector", "INITIAL_CAPACITY"]

INITIAL_CAPACITY = 4


class Vector:
    """Ordered items with an explicit capacity that grows and shrinks by halves."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._capacity = INITIAL_CAPACITY

    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def append(self, item: Any) -> None:
        """Add ``item`` at the end, doubling the capacity when it is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(item)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def get(self, index: int) -> Any:
        """Item at ``index``, or None when the index is out of range."""
        return self._items[index] if self._in_range(index) else None

    def set(self, index: int, item: Any) -> None:
        """Replace the item at ``index``."""
        if not self._in_range(index):
            raise IndexError("vector index out of range")
        self._items[index] = item

    def delete(self, index: int) -> None:
        """Remove the item at ``index``; halve the capacity once a quarter full."""
        if not self._in_range(index):
            raise IndexError("vector index out of range")
        del self._items[index]
        total = len(self._items)
        if total > 0 and total == self._capacity // 4:
            self._capacity //= 2