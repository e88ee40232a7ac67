import math

import pytest

from algokit.mathematics import (
    cartesian_product,
    gcd,
    prime_sum_pair,
    tower_of_hanoi,
)


def _is_prime(n):
    return n > 1 and all(n % d for d in range(2, math.isqrt(n) + 1))


@pytest.mark.parametrize("first, second", [(48, 18), (100, 75), (17, 5), (21, 21), (7, 49)])
def test_gcd_agrees_with_stdlib(first, second):
    assert gcd(first, second) == math.gcd(first, second)


def test_gcd_zero_divisor():
    with pytest.raises(ValueError):
        gcd(12, 0)


@pytest.mark.parametrize(
    "number, expected", [(24, (5, 19)), (100, (3, 97)), (1, None)]
)
def test_prime_sum_source_examples(number, expected):
    assert prime_sum_pair(number) == expected


@pytest.mark.parametrize("number", [4, 6, 10, 28, 50, 98])
def test_prime_sum_even_numbers(number):
    pair = prime_sum_pair(number)
    assert pair is not None
    smaller, larger = pair
    assert smaller + larger == number
    assert _is_prime(smaller) and _is_prime(larger)
    assert smaller <= larger


@pytest.mark.parametrize("number", [0, 2, 3, 11])
def test_prime_sum_impossible(number):
    assert prime_sum_pair(number) is None


def test_cartesian_product_source_example():
    assert cartesian_product([1, 2, 3], [4, 5]) == [
        (1, 4), (1, 5), (2, 4), (2, 5), (3, 4), (3, 5)
    ]


def test_cartesian_product_with_empty():
    assert cartesian_product([1, 2], []) == []


def test_hanoi_single_disk():
    assert tower_of_hanoi(1) == [(1, "A", "C")]


def test_hanoi_no_disks():
    assert tower_of_hanoi(0) == []


@pytest.mark.parametrize("disks", [2, 3, 5])
def test_hanoi_moves_are_legal_and_complete(disks):
    moves = tower_of_hanoi(disks)
    assert len(moves) == 2 ** disks - 1
    pegs = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    for disk, src, dest in moves:
        assert pegs[src][-1] == disk
        pegs[src].pop()
        assert not pegs[dest] or pegs[dest][-1] > disk
        pegs[dest].append(disk)
    assert pegs["C"] == list(range(disks, 0, -1))


def test_hanoi_negative():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)