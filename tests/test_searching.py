import pytest

from drillbook.searching import binary_search, fibonacci_search

ARRAY = [10, 22, 35, 40, 45, 50, 80, 82, 85, 90, 100, 235]


@pytest.mark.parametrize("key", ARRAY)
def test_binary_search_finds_every_element(key):
    assert binary_search(ARRAY, key) == ARRAY.index(key)


@pytest.mark.parametrize("key", ARRAY)
def test_fibonacci_search_finds_every_element(key):
    assert fibonacci_search(ARRAY, key) == ARRAY.index(key)


def test_fibonacci_search_pinned_example():
    assert fibonacci_search(ARRAY, 235) == 11


@pytest.mark.parametrize("key", [0, 11, 41, 101, 236])
def test_missing_elements(key):
    assert binary_search(ARRAY, key) is None
    assert fibonacci_search(ARRAY, key) is None


def test_empty_sequence():
    assert binary_search([], 5) is None
    assert fibonacci_search([], 5) is None


@pytest.mark.parametrize("size", range(1, 15))
def test_all_sizes(size):
    values = list(range(0, 3 * size, 3))
    for index, value in enumerate(values):
        assert binary_search(values, value) == index
        assert binary_search(values, value + 1) is None
        assert fibonacci_search(values, value) == index
        assert fibonacci_search(values, value + 1) is None


def test_duplicates_give_matching_index():
    values = [1, 2, 2, 2, 3]
    assert values[binary_search(values, 2)] == 2
    assert values[fibonacci_search(values, 2)] == 2