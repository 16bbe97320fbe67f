"""Small integer exercises: base conversion, factorials, primes and friends."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

__all__ = [
    "ArithmeticResult",
    "octal_to_binary",
    "factorial",
    "decimal_to_binary",
    "fibonacci_triangle",
    "gcd",
    "is_prime",
    "basic_operations",
    "is_armstrong",
    "binary_power",
    "calculate",
    "determinant_2x2",
    "max_subarray_sum",
]


@dataclass(frozen=True)
class ArithmeticResult:
    """Sum, difference, product and quotient of two integers."""

    total: int
    difference: int
    product: int
    quotient: float

    def __str__(self) -> str:
        return "\n".join(
            (
                f"Sum = {self.total}",
                f"Difference = {self.difference}",
                f"Multiplication = {self.product}",
                f"Division = {self.quotient:.2f}",
            )
        )


def octal_to_binary(octal: int) -> int:
    """Read the decimal digits of ``octal`` as base 8 and spell the value in binary digits.

    The result is an integer whose decimal digits are the binary digits,
    e.g. ``octal_to_binary(10)`` gives ``1000``. The sign is carried over.
    """
    sign = -1 if octal < 0 else 1
    value = sum(
        int(digit) * 8**power for power, digit in enumerate(reversed(str(abs(octal))))
    )
    if value == 0:
        return 0
    return sign * int(format(value, "b"))


def factorial(number: int) -> int:
    """Return ``number!``; anything below 1 gives 1."""
    return math.prod(range(1, number + 1))


def decimal_to_binary(number: int) -> str:
    """Return the binary digits of ``number``; negative numbers give an empty string."""
    if number == 0:
        return "0"
    if number < 0:
        return ""
    return format(number, "b")


def _fibonacci_row(length: int) -> Iterator[int]:
    previous, current = 0, 1
    yield current
    for _ in range(length - 1):
        previous, current = current, previous + current
        yield current


def fibonacci_triangle(rows: int) -> list[list[int]]:
    """Return ``rows`` rows; row ``n`` holds the first ``n`` Fibonacci numbers from 1."""
    return [list(_fibonacci_row(length)) for length in range(1, rows + 1)]


def gcd(first: int, second: int) -> int:
    """Greatest common divisor of two positive integers."""
    if first < 1 or second < 1:
        raise ValueError("gcd is defined here for positive integers only")
    return math.gcd(first, second)


def is_prime(number: int) -> bool:
    """Trial division up to ``number // 2``; 0 and 1 are not prime.

    As with plain trial division, numbers below 0 have no divisor in range
    and are reported prime.
    """
    if number in (0, 1):
        return False
    return all(number % divisor for divisor in range(2, number // 2 + 1))


def basic_operations(first: int, second: int) -> ArithmeticResult:
    """Sum, difference, product and floating quotient of two integers."""
    if second == 0:
        quotient = math.copysign(math.inf, first) if first else math.nan
    else:
        quotient = first / second
    return ArithmeticResult(first + second, first - second, first * second, quotient)


def is_armstrong(number: int) -> bool:
    """True when ``number`` equals the sum of the cubes of its digits."""
    if number < 0:
        return False
    return number == sum(int(digit) ** 3 for digit in str(number))


def binary_power(base: int, exponent: int) -> int:
    """``base ** exponent`` by repeated squaring; exponents below 1 give 1."""
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def _truncating_division(first: int, second: int) -> int:
    quotient = abs(first) // abs(second)
    return quotient if (first < 0) == (second < 0) else -quotient


def calculate(first: int, operator: str, second: int) -> int:
    """Apply ``+``, ``-``, ``*`` or ``/`` (division truncates toward zero)."""
    if operator == "+":
        return first + second
    if operator == "-":
        return first - second
    if operator == "*":
        return first * second
    if operator == "/":
        if second == 0:
            raise ZeroDivisionError("division by zero")
        return _truncating_division(first, second)
    raise ValueError("The entered operation cannot be performed.")


def determinant_2x2(a1: int, b1: int, a2: int, b2: int) -> int:
    """Determinant of the matrix ``| a1 b1 | a2 b2 |``."""
    return a1 * b2 - a2 * b1


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best