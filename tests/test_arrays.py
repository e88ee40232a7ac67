import random

import pytest

from algokit.arrays import (
    PrefixSums,
    max_subarray_sum_brute,
    max_subarray_sum_kadane,
    max_subarray_sum_prefix,
    sort_zero_one_two,
    trapped_water,
)


def _random_lists(count, seed):
    rng = random.Random(seed)
    return [[rng.randint(-20, 20) for _ in range(rng.randint(1, 12))] for _ in range(count)]


def test_prefix_sums_match_slices():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    sums = PrefixSums(values)
    assert len(sums) == len(values)
    for left in range(1, len(values) + 1):
        for right in range(left, len(values) + 1):
            assert sums.range_sum(left, right) == sum(values[left - 1 : right])


def test_prefix_whole_range_is_total():
    values = [10, 20, 30]
    assert PrefixSums(values).range_sum(1, 3) == sum(values)


@pytest.mark.parametrize("left, right", [(0, 2), (1, 4), (3, 2)])
def test_prefix_sums_reject_bad_ranges(left, right):
    with pytest.raises(IndexError):
        PrefixSums([1, 2, 3]).range_sum(left, right)


def test_brute_and_prefix_agree():
    for values in _random_lists(50, 1):
        assert max_subarray_sum_brute(values) == max_subarray_sum_prefix(values)


def test_kadane_agrees_when_a_value_is_positive():
    for values in _random_lists(50, 2):
        values.append(1)
        assert max_subarray_sum_kadane(values) == max_subarray_sum_brute(values)


def test_brute_is_at_least_every_element():
    for values in _random_lists(20, 3):
        assert max_subarray_sum_brute(values) >= max(values)


def test_all_negative_inputs():
    values = [-5, -2, -8]
    assert max_subarray_sum_brute(values) == max(values)
    assert max_subarray_sum_prefix(values) == max(values)
    assert max_subarray_sum_kadane(values) == 0


@pytest.mark.parametrize(
    "function",
    [max_subarray_sum_brute, max_subarray_sum_prefix, max_subarray_sum_kadane],
)
def test_empty_input_raises(function):
    with pytest.raises(ValueError):
        function([])


@pytest.mark.parametrize(
    "values",
    [
        [0, 1, 2, 2, 1, 1, 1],
        [0, 1, 0, 2, 1, 1, 1],
        [2, 1, 1, 0, 1, 2, 2, 1, 1, 1],
        [2, 1, 0, 0, 2, 1, 2, 0, 1, 1, 0, 2, 0, 2],
        [],
    ],
)
def test_sort_zero_one_two(values):
    original = list(values)
    assert sort_zero_one_two(values) == sorted(values)
    assert values == original


def test_sort_zero_one_two_rejects_other_values():
    with pytest.raises(ValueError):
        sort_zero_one_two([0, 3, 1])


def test_trapped_water_worked_example():
    assert trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


@pytest.mark.parametrize("heights", [[], [1, 2, 3, 4], [4, 3, 2, 1], [5]])
def test_no_water_without_a_basin(heights):
    assert trapped_water(heights) == 0


def test_trapped_water_is_symmetric():
    heights = [3, 0, 2, 0, 4, 1, 0, 2]
    assert trapped_water(heights) == trapped_water(heights[::-1])