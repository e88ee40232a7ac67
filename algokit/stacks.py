"""Stack and queue exercises: infix to postfix, redundant parentheses, queue reversal."""

from __future__ import annotations

from collections import deque
from typing import Any

_OPERATORS = frozenset("+-*/")


def precedence(symbol: str) -> int:
    """Binding strength of an operator; ``(`` is 0 and anything else -1."""
    if symbol == "(":
        return 0
    if symbol in ("+", "-"):
        return 1
    if symbol in ("*", "/"):
        return 2
    if symbol == "^":
        return 3
    return -1


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Postfix form of an infix expression of single-character operands.

    Operators of equal precedence, ``^`` included, group to the left.
    Whitespace is ignored.
    """
    stack: list[str] = []
    result: list[str] = []
    for symbol in expression:
        if symbol.isspace():
            continue
        if _is_operand(symbol):
            result.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                result.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            while stack and precedence(symbol) <= precedence(stack[-1]):
                result.append(stack.pop())
            stack.append(symbol)
    if "(" in stack:
        raise ValueError("unmatched '(' in expression")
    result.extend(reversed(stack))
    return "".join(result)


def has_redundant_parentheses(expression: str) -> bool:
    """Whether some pair of parentheses encloses no operator of its own."""
    stack: list[str] = []
    redundant = False
    for symbol in expression:
        if symbol in _OPERATORS or symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            if stack and stack[-1] == "(":
                redundant = True
            while stack and stack[-1] in _OPERATORS:
                stack.pop()
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
    return redundant


def reverse_queue(queue: deque[Any]) -> deque[Any]:
    """A new queue with the items of ``queue`` in reverse order; ``queue`` is untouched."""
    stack = list(queue)
    reversed_queue: deque[Any] = deque()
    while stack:
        reversed_queue.append(stack.pop())
    return reversed_queue


def reverse_queue_recursive(queue: deque[Any]) -> None:
    """Reverse ``queue`` in place by taking the front off, reversing the rest, and re-adding it."""
    if not queue:
        return
    front = queue.popleft()
    reverse_queue_recursive(queue)
    queue.append(front)