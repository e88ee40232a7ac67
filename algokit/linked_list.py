"""A singly linked list with positional insert and delete, reversal and palindrome checks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose positions are numbered from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, position: int) -> Node:
        node = self.head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_front(self, value: Any) -> None:
        """Put ``value`` before the current head."""
        self.head = Node(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def append(self, value: Any) -> None:
        """Put ``value`` after the current tail."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1 to ``len + 1``)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range 1..{self._size + 1}")
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.append(value)
        else:
            previous = self._node_at(position - 1)
            previous.next = Node(value, previous.next)
            self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at ``position`` (1 to ``len``) and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range 1..{self._size}")
        if position == 1:
            assert self.head is not None
            removed = self.head
            self.head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        if self.head is None:
            self._tail = None
        self._size -= 1
        return removed.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[Node] = None
        current = self.head
        self._tail = current
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def middle(self) -> Any:
        """Value of the middle node; the second of the two middles for even lengths."""
        if self.head is None:
            raise ValueError("empty list has no middle")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            assert slow is not None
            slow = slow.next
            fast = fast.next.next
        assert slow is not None
        return slow.value

    def is_palindrome(self) -> bool:
        """Whether the values read the same forwards and backwards."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            assert slow is not None
            slow = slow.next
            fast = fast.next.next
        stack: list[Any] = []
        while slow is not None:
            stack.append(slow.value)
            slow = slow.next
        return all(front == back for front, back in zip(self, reversed(stack)))


def segregate_even_odd(values: Iterable[int]) -> LinkedList:
    """Build a list from ``values``: the first is the head, later evens go to the front
    and later odds to the back."""
    items = iter(values)
    result = LinkedList()
    first = next(items, None)
    if first is None:
        return result
    result.append(first)
    for value in items:
        if value % 2 == 0:
            result.push_front(value)
        else:
            result.append(value)
    return result