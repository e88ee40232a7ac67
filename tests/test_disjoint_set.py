import pytest

from algokit.disjoint_set import UnionFind, run_queries


def test_initial_singletons():
    sets = UnionFind(5)
    assert sets.set_count() == 5
    assert all(sets.find(i) == i for i in range(5))
    assert all(sets.set_size(i) == 1 for i in range(5))


def test_union_merges_and_counts():
    sets = UnionFind(6)
    sets.union(0, 1)
    sets.union(2, 3)
    sets.union(1, 3)
    assert sets.same_set(0, 2)
    assert not sets.same_set(0, 4)
    assert sets.set_size(3) == 4
    assert sets.set_count() == 3


def test_union_same_set_is_noop():
    sets = UnionFind(3)
    sets.union(0, 1)
    sets.union(1, 0)
    assert sets.set_count() == 2
    assert sets.set_size(0) == 2


def test_sizes_sum_to_total():
    sets = UnionFind(10)
    for a, b in [(0, 1), (2, 3), (4, 5), (1, 3), (7, 8)]:
        sets.union(a, b)
    roots = {sets.find(i) for i in range(10)}
    assert len(roots) == sets.set_count()
    assert sum(sets.set_size(r) for r in roots) == 10


def test_chain_collapses_to_one_set():
    n = 50
    sets = UnionFind(n)
    for i in range(n - 1):
        sets.union(i, i + 1)
    assert sets.set_count() == 1
    assert sets.set_size(0) == n
    assert len({sets.find(i) for i in range(n)}) == 1


def test_out_of_range_raises():
    sets = UnionFind(3)
    with pytest.raises(IndexError):
        sets.find(3)
    with pytest.raises(IndexError):
        sets.union(-1, 0)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        UnionFind(-1)


def test_run_queries():
    commands = [
        ("union", 1, 2),
        ("find", 1, 2),
        ("find", 1, 3),
        ("union", 2, 3),
        ("find", 1, 3),
    ]
    assert run_queries(3, commands) == [True, False, True]


def test_run_queries_only_unions():
    assert run_queries(4, [("union", 1, 4), ("union", 2, 3)]) == []