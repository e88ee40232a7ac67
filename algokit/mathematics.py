"""Euclid's GCD, Goldbach pairs, Cartesian products and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import product
from typing import Any, Optional


def gcd(first: int, second: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    if second == 0:
        raise ValueError("second number must not be zero")
    while first % second:
        first, second = second, first % second
    return abs(second)


def prime_sum_pair(number: int) -> Optional[tuple[int, int]]:
    """Two primes adding up to ``number``, the smaller as small as possible, or ``None``."""
    if number < 4:
        return None
    sieve = [False, False] + [True] * (number - 2)
    candidate = 2
    while candidate * candidate < number:
        if sieve[candidate]:
            for multiple in range(candidate * candidate, number, candidate):
                sieve[multiple] = False
        candidate += 1
    for smaller in range(2, number):
        if sieve[smaller] and sieve[number - smaller]:
            return smaller, number - smaller
    return None


def cartesian_product(first: Iterable[Any], second: Iterable[Any]) -> list[tuple[Any, Any]]:
    """Every pair with an element of ``first`` followed by one of ``second``."""
    return list(product(first, second))


def tower_of_hanoi(
    disks: int, source: str = "A", helper: str = "B", target: str = "C"
) -> list[tuple[int, str, str]]:
    """Moves ``(disk, from, to)`` that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")

    def moves(n: int, src: str, via: str, dest: str) -> Iterator[tuple[int, str, str]]:
        if n == 0:
            return
        yield from moves(n - 1, src, dest, via)
        yield n, src, dest
        yield from moves(n - 1, via, src, dest)

    return list(moves(disks, source, helper, target))