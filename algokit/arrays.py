"""Array exercises: prefix sums, maximum subarray sums, 0/1/2 sorting and trapped water."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


class PrefixSums:
    """Answers inclusive range-sum queries over a fixed list in constant time.

    Positions are numbered from 1.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the elements at positions ``left`` to ``right``, both included."""
        if not 1 <= left <= right <= len(self):
            raise IndexError(f"range {left}..{right} outside 1..{len(self)}")
        return self._prefix[right] - self._prefix[left - 1]


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return items


def max_subarray_sum_brute(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run, found by summing every run."""
    items = _non_empty(values)
    size = len(items)
    return max(
        sum(items[start : end + 1]) for start in range(size) for end in range(start, size)
    )


def max_subarray_sum_prefix(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run, found by differences of prefix sums."""
    items = _non_empty(values)
    prefix = [0, *accumulate(items)]
    return max(
        prefix[end] - prefix[start]
        for end in range(1, len(prefix))
        for start in range(end)
    )


def max_subarray_sum_kadane(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run by Kadane's algorithm.

    The running sum restarts at zero whenever it drops below zero, so the
    result is never negative: an all-negative input gives 0.
    """
    items = _non_empty(values)
    current = 0
    best = 0
    for value in items:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def sort_zero_one_two(values: Iterable[int]) -> list[int]:
    """Sort a list of 0s, 1s and 2s in one pass (Dutch national flag)."""
    items = list(values)
    if any(value not in (0, 1, 2) for value in items):
        raise ValueError("values must all be 0, 1 or 2")
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def trapped_water(heights: Iterable[int]) -> int:
    """Units of water held between bars of the given heights."""
    bars = list(heights)
    result = 0
    left_max = right_max = 0
    lo, hi = 0, len(bars) - 1
    while lo <= hi:
        if bars[lo] < bars[hi]:
            if bars[lo] > left_max:
                left_max = bars[lo]
            else:
                result += left_max - bars[lo]
            lo += 1
        else:
            if bars[hi] > right_max:
                right_max = bars[hi]
            else:
                result += right_max - bars[hi]
            hi -= 1
    return result