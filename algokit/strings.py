"""String reversal, length-first sorting and palindrome checks."""

from __future__ import annotations

from collections.abc import Iterable


def reverse_string(text: str) -> str:
    """The characters of ``text`` in reverse order."""
    return text[::-1]


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Longer strings first; strings of equal length in lexicographic order."""
    return sorted(strings, key=lambda s: (-len(s), s))


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same forwards and backwards."""
    return all(text[i] == text[-1 - i] for i in range(len(text) // 2))