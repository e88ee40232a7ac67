import pytest

from algokit.greedy import (
    fractional_knapsack,
    job_sequencing,
    max_activities,
    optimal_merge_cost,
)


def test_optimal_merge_worked_example():
    assert optimal_merge_cost([2, 4, 7, 9, 12]) == 74


def test_optimal_merge_order_does_not_matter():
    assert optimal_merge_cost([12, 2, 9, 4, 7]) == optimal_merge_cost([2, 4, 7, 9, 12])


@pytest.mark.parametrize("sizes", [[], [5]])
def test_optimal_merge_with_nothing_to_merge(sizes):
    assert optimal_merge_cost(sizes) == 0


def test_two_files_cost_their_sum():
    assert optimal_merge_cost([3, 8]) == 3 + 8


def test_disjoint_activities_are_all_chosen():
    intervals = [(0, 1), (1, 2), (2, 3), (5, 9)]
    assert max_activities(intervals) == len(intervals)


def test_identical_activities_allow_only_one():
    assert max_activities([(1, 4)] * 5) == 1


def test_no_activities():
    assert max_activities([]) == 0


def test_activities_never_exceed_count():
    intervals = [(1, 3), (2, 5), (4, 7), (6, 9), (8, 10)]
    chosen = max_activities(intervals)
    assert 1 <= chosen <= len(intervals)
    assert max_activities(reversed(intervals)) == chosen


def test_fractional_knapsack_classic_example():
    assert fractional_knapsack([(60, 10), (100, 20), (120, 30)], 50) == pytest.approx(240)


def test_fractional_knapsack_takes_everything_that_fits():
    items = [(10, 2), (7, 3), (4, 1)]
    assert fractional_knapsack(items, 100) == pytest.approx(sum(p for p, _ in items))


def test_fractional_knapsack_zero_capacity():
    assert fractional_knapsack([(10, 2)], 0) == 0


def test_fractional_knapsack_invalid():
    with pytest.raises(ValueError):
        fractional_knapsack([(10, 0)], 5)
    with pytest.raises(ValueError):
        fractional_knapsack([(10, 2)], -1)


def test_job_sequencing_classic_example():
    jobs = [(100, 2), (19, 1), (27, 2), (25, 1), (15, 3)]
    order, total = job_sequencing(jobs)
    assert order == [3, 1, 5]
    assert total == 142


def test_job_sequencing_total_matches_chosen_jobs():
    jobs = [(20, 4), (10, 1), (40, 1), (30, 1), (5, 2)]
    order, total = job_sequencing(jobs)
    assert len(set(order)) == len(order)
    assert total == sum(jobs[job - 1][0] for job in order)


def test_job_with_zero_deadline_is_never_scheduled():
    order, total = job_sequencing([(50, 0)])
    assert order == []
    assert total == 0