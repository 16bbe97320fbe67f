import math

import pytest

from drillbook.arithmetic import (
    ArithmeticResult,
    basic_operations,
    binary_power,
    calculate,
    decimal_to_binary,
    determinant_2x2,
    factorial,
    fibonacci_triangle,
    gcd,
    is_armstrong,
    is_prime,
    max_subarray_sum,
    octal_to_binary,
)


@pytest.mark.parametrize("octal", [1, 7, 10, 17, 123, 777, 4000])
def test_octal_to_binary_matches_base_conversion(octal):
    result = octal_to_binary(octal)
    assert int(str(result), 2) == int(str(octal), 8)


def test_octal_to_binary_zero_and_sign():
    assert octal_to_binary(0) == 0
    assert octal_to_binary(-17) == -octal_to_binary(17)


@pytest.mark.parametrize("number", [0, 1, 5, 12, 20])
def test_factorial_matches_math(number):
    assert factorial(number) == math.factorial(number)


def test_factorial_of_negative_is_one():
    assert factorial(-3) == 1


@pytest.mark.parametrize("number", [1, 2, 9, 255, 1024])
def test_decimal_to_binary_round_trip(number):
    digits = decimal_to_binary(number)
    assert int(digits, 2) == number
    assert digits[0] == "1"


def test_decimal_to_binary_zero_and_negative():
    assert decimal_to_binary(0) == "0"
    assert decimal_to_binary(-4) == ""


def test_fibonacci_triangle_shape_and_recurrence():
    rows = fibonacci_triangle(8)
    assert [len(row) for row in rows] == list(range(1, 9))
    for shorter, longer in zip(rows, rows[1:]):
        assert longer[: len(shorter)] == shorter
    last = rows[-1]
    assert last[0] == 1 and last[1] == 1
    for left, middle, right in zip(last, last[1:], last[2:]):
        assert right == left + middle


def test_fibonacci_triangle_empty():
    assert fibonacci_triangle(0) == []


@pytest.mark.parametrize("first,second", [(12, 18), (7, 13), (100, 75), (1, 1)])
def test_gcd_matches_math(first, second):
    assert gcd(first, second) == math.gcd(first, second)


def test_gcd_rejects_non_positive():
    with pytest.raises(ValueError):
        gcd(0, 5)


@pytest.mark.parametrize("number", [0, 1])
def test_zero_and_one_are_not_prime(number):
    assert is_prime(number) is False


@pytest.mark.parametrize("factors", [(2, 2), (3, 7), (11, 13), (5, 5, 3)])
def test_products_are_not_prime(factors):
    assert is_prime(math.prod(factors)) is False


@pytest.mark.parametrize("number", [2, 3, 13, 97])
def test_primes_are_prime(number):
    assert is_prime(number) is True


def test_basic_operations_invariants():
    first, second = 7, 2
    result = basic_operations(first, second)
    assert result.total + result.difference == 2 * first
    assert result.product == first * second
    assert math.isclose(result.quotient * second, first)


def test_basic_operations_text():
    text = str(basic_operations(7, 2))
    assert text.splitlines()[-1] == "Division = 3.50"


def test_basic_operations_zero_divisor():
    result = basic_operations(3, 0)
    assert isinstance(result, ArithmeticResult)
    assert result.quotient == math.inf
    assert math.isnan(basic_operations(0, 0).quotient)


@pytest.mark.parametrize("number", [0, 1, 153, 370, 371, 407])
def test_armstrong_numbers(number):
    assert is_armstrong(number) is True


@pytest.mark.parametrize("number", [10, 154, 372, -153])
def test_not_armstrong_numbers(number):
    assert is_armstrong(number) is False


@pytest.mark.parametrize("base,exponent", [(2, 10), (3, 0), (-3, 5), (7, 13), (0, 4)])
def test_binary_power_matches_pow(base, exponent):
    assert binary_power(base, exponent) == base**exponent


@pytest.mark.parametrize("first,second", [(6, 3), (-9, 4), (0, 5)])
def test_calculate_matches_operators(first, second):
    assert calculate(first, "+", second) == first + second
    assert calculate(first, "-", second) == first - second
    assert calculate(first, "*", second) == first * second


def test_calculate_division_truncates_toward_zero():
    assert calculate(-7, "/", 2) == -3
    assert calculate(8, "/", 4) == 8 // 4


def test_calculate_errors():
    with pytest.raises(ValueError):
        calculate(1, "%", 2)
    with pytest.raises(ZeroDivisionError):
        calculate(1, "/", 0)


def test_determinant_identity_and_row_swap():
    assert determinant_2x2(1, 0, 0, 1) == 1
    a1, b1, a2, b2 = 3, 8, 4, 6
    assert determinant_2x2(a2, b2, a1, b1) == -determinant_2x2(a1, b1, a2, b2)
    assert determinant_2x2(2, 4, 1, 2) == 0


def test_max_subarray_sum_classic():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_sum_invariants():
    positives = [3, 1, 4, 1, 5]
    assert max_subarray_sum(positives) == sum(positives)
    negatives = [-8, -3, -6]
    assert max_subarray_sum(negatives) == max(negatives)


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])