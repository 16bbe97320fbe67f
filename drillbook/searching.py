"""Searching sorted sequences."""

from __future__ import annotations

from typing import Sequence

__all__ = ["binary_search", "fibonacci_search"]


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] < key:
            low = mid + 1
        elif values[mid] == key:
            return mid
        else:
            high = mid - 1
    return None


def fibonacci_search(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None.

    The range is narrowed by Fibonacci numbers instead of halves.
    """
    size = len(values)
    if size == 0:
        return None
    fib_m2, fib_m1 = 0, 1
    fib_m = fib_m2 + fib_m1
    while fib_m < size:
        fib_m2, fib_m1 = fib_m1, fib_m
        fib_m = fib_m2 + fib_m1

    offset = -1
    while fib_m > 1:
        i = min(offset + fib_m2, size - 1)
        if values[i] < key:
            fib_m = fib_m1
            fib_m1 = fib_m2
            fib_m2 = fib_m - fib_m1
            offset = i
        elif values[i] > key:
            fib_m = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib_m - fib_m1
        else:
            return i

    if fib_m1 and offset + 1 < size and values[offset + 1] == key:
        return offset + 1
    return None