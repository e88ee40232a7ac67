"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations

from collections.abc import Iterable


class UnionFind:
    """A collection of disjoint sets over the items ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._size = [1] * size
        self._count = size

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} out of range")

    def find(self, item: int) -> int:
        """Representative of the set holding ``item``."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def same_set(self, first: int, second: int) -> bool:
        """Whether both items belong to the same set."""
        return self.find(first) == self.find(second)

    def set_size(self, item: int) -> int:
        """Number of items in the set holding ``item``."""
        return self._size[self.find(item)]

    def set_count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def union(self, first: int, second: int) -> None:
        """Merge the sets holding the two items."""
        x = self.find(first)
        y = self.find(second)
        if x == y:
            return
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._count -= 1


def run_queries(size: int, commands: Iterable[tuple[str, int, int]]) -> list[bool]:
    """Apply ``("union", x, y)`` commands and answer every other command as a same-set query.

    Items are numbered from 1 to ``size``.
    """
    sets = UnionFind(size + 1)
    answers: list[bool] = []
    for operation, first, second in commands:
        if operation == "union":
            sets.union(first, second)
        else:
            answers.append(sets.same_set(first, second))
    return answers