"""Classic comparison sorts, each returning a new ascending list."""

from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")

__all__ = ["exchange_sort", "insertion_sort", "bubble_sort", "selection_sort"]


def exchange_sort(values: Iterable[T]) -> list[T]:
    """Compare each position with every later one and swap when out of order."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Grow a sorted prefix by shifting larger items one place right."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Swap the smallest remaining item into each position in turn."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Select the minimum of the unsorted tail and swap it to the front."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items