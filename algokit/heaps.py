"""Max-heaps held in lists: sift-down, heap construction, heap sort and k largest."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from typing import Any


def heapify(values: list[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` elements to restore the max-heap."""
    if not 0 <= size <= len(values):
        raise ValueError(f"size {size} out of range 0..{len(values)}")
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """A new list holding ``values`` arranged as a max-heap."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        heapify(items, len(items), index)
    return items


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """A new list of ``values`` in ascending order, sorted by heap sort."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items


def k_largest(values: Iterable[Any], k: int) -> list[Any]:
    """The ``k`` largest values in descending order."""
    return heapq.nlargest(max(k, 0), values)


class MaxHeap:
    """A max-heap that supports insertion and removal of the root."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = build_max_heap(values)

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop_root(self) -> Any:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            heapify(self._items, len(self._items), 0)
        return root

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """The heap's array representation, root first."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"