"""Greedy algorithms: activity selection, fractional knapsack, job sequencing, optimal merging."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from operator import itemgetter
from typing import Optional


def max_activities(intervals: Iterable[Sequence[int]]) -> int:
    """Most ``(start, end)`` activities one person can do, choosing by earliest end.

    An activity may start at the moment the previous one ends.
    """
    chosen = 0
    finish: Optional[int] = None
    for start, end in sorted(intervals, key=itemgetter(1)):
        if finish is None or start >= finish:
            finish = end
            chosen += 1
    return chosen


def fractional_knapsack(items: Iterable[Sequence[float]], capacity: float) -> float:
    """Best profit from ``(profit, weight)`` items when items may be split.

    Items are taken in order of profit per unit weight, the last one in part.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    goods = [(profit, weight) for profit, weight in items]
    if any(weight <= 0 for _, weight in goods):
        raise ValueError("weights must be positive")
    remaining = capacity
    total = 0.0
    for profit, weight in sorted(goods, key=lambda item: item[0] / item[1], reverse=True):
        if weight <= remaining:
            total += profit
            remaining -= weight
        elif remaining > 0:
            total += profit * remaining / weight
            remaining = 0
    return total


def job_sequencing(jobs: Iterable[Sequence[int]]) -> tuple[list[int], int]:
    """Schedule unit-time ``(profit, deadline)`` jobs to maximise profit.

    Jobs are taken by falling profit, each into the latest free slot before its
    deadline. Returns the job numbers (counted from 1) in slot order and the
    total profit.
    """
    items = [(profit, deadline) for profit, deadline in jobs]
    ranked = sorted(range(len(items)), key=lambda index: items[index][0], reverse=True)
    slots: list[Optional[int]] = [None] * len(items)
    total = 0
    for index in ranked:
        profit, deadline = items[index]
        for slot in range(min(len(items), deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = index + 1
                total += profit
                break
    return [job for job in slots if job is not None], total


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Least total cost of merging files pairwise, a merge costing the sum of the two sizes."""
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total