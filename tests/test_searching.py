import pytest

from algokit.searching import (
    binary_search,
    count_occurrences,
    linear_search,
    lower_bound,
    upper_bound,
)

SORTED = [10, 20, 40, 40, 40, 70, 100, 130, 560]
UNSORTED = [10, 20, 40, 70, 100]


def test_bounds_of_forty_from_source():
    assert lower_bound(SORTED, 40) == 2
    assert upper_bound(SORTED, 40) == 5
    assert count_occurrences(SORTED, 40) == 3


@pytest.mark.parametrize("key", SORTED)
def test_binary_search_finds_present(key):
    assert binary_search(SORTED, key) is True


@pytest.mark.parametrize("key", [0, 15, 41, 561])
def test_binary_search_misses_absent(key):
    assert binary_search(SORTED, key) is False
    assert count_occurrences(SORTED, key) == 0


@pytest.mark.parametrize("key", [5, 10, 40, 55, 100, 560, 600])
def test_bounds_partition_sequence(key):
    low = lower_bound(SORTED, key)
    high = upper_bound(SORTED, key)
    assert low <= high
    assert all(value < key for value in SORTED[:low])
    assert all(value == key for value in SORTED[low:high])
    assert all(value > key for value in SORTED[high:])
    assert count_occurrences(SORTED, key) == SORTED.count(key)


def test_bounds_on_empty_sequence():
    assert lower_bound([], 3) == upper_bound([], 3)
    assert binary_search([], 3) is False


@pytest.mark.parametrize("key", UNSORTED)
def test_linear_search_finds_present(key):
    index = linear_search(UNSORTED, key)
    assert UNSORTED[index] == key


def test_linear_search_returns_first_match():
    values = [3, 1, 3, 2]
    assert linear_search(values, 3) == values.index(3)
    assert linear_search(iter(values), 2) == values.index(2)


def test_linear_search_absent():
    assert linear_search(UNSORTED, 55) is None
    assert linear_search([], 1) is None