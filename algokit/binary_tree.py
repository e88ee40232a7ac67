"""Binary trees: BST insertion, traversals, height, diameter and the largest BST subtree."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class BinaryNode:
    """A node of a binary tree."""

    value: int
    left: Optional["BinaryNode"] = None
    right: Optional["BinaryNode"] = None


def bst_insert(root: Optional[BinaryNode], value: int) -> BinaryNode:
    """Insert ``value`` into a BST, ignoring duplicates; return the root."""
    if root is None:
        return BinaryNode(value)
    if value < root.value:
        root.left = bst_insert(root.left, value)
    elif value > root.value:
        root.right = bst_insert(root.right, value)
    return root


def bst_insert_with_duplicates(root: Optional[BinaryNode], value: int) -> BinaryNode:
    """Insert ``value`` into a BST, sending equal values to the right; return the root."""
    if root is None:
        return BinaryNode(value)
    if value < root.value:
        root.left = bst_insert_with_duplicates(root.left, value)
    else:
        root.right = bst_insert_with_duplicates(root.right, value)
    return root


def _inorder(node: Optional[BinaryNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Optional[BinaryNode]) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[BinaryNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: Optional[BinaryNode]) -> list[int]:
    """Values in left-root-right order."""
    return list(_inorder(root))


def preorder(root: Optional[BinaryNode]) -> list[int]:
    """Values in root-left-right order."""
    return list(_preorder(root))


def postorder(root: Optional[BinaryNode]) -> list[int]:
    """Values in left-right-root order."""
    return list(_postorder(root))


def morris_inorder(root: Optional[BinaryNode]) -> list[int]:
    """In-order values without recursion or a stack; the tree is restored afterwards."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.value)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            result.append(current.value)
            current = current.right
    return result


def level_order(root: Optional[BinaryNode]) -> list[int]:
    """Values level by level, left to right."""
    if root is None:
        return []
    result: list[int] = []
    pending = deque([root])
    while pending:
        node = pending.popleft()
        result.append(node.value)
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return result


def height(root: Optional[BinaryNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _height_and_diameter(node: Optional[BinaryNode]) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(node.left)
    right_height, right_diameter = _height_and_diameter(node.right)
    return (
        max(left_height, right_height) + 1,
        max(left_diameter, right_diameter, left_height + right_height),
    )


def diameter(root: Optional[BinaryNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def build_level_order(values: Iterable[Optional[int]]) -> Optional[BinaryNode]:
    """Build a tree from a level-order listing where ``None`` marks a missing child.

    After the root, each node takes the next two values as its left and right
    children. Values running out mean no further children.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = BinaryNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, None)
        if left is not None:
            node.left = BinaryNode(left)
            pending.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = BinaryNode(right)
            pending.append(node.right)
    return root


def build_preorder(values: Iterable[Optional[int]]) -> Optional[BinaryNode]:
    """Build a tree from a pre-order listing where ``None`` marks an empty subtree."""
    items = iter(values)

    def build() -> Optional[BinaryNode]:
        value = next(items, None)
        if value is None:
            return None
        node = BinaryNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


@dataclass
class _BstInfo:
    is_bst: bool
    maximum: float
    minimum: float
    root: Optional[BinaryNode]
    size: int


def _bst_info(node: Optional[BinaryNode]) -> _BstInfo:
    if node is None:
        return _BstInfo(True, -math.inf, math.inf, None, 0)
    left = _bst_info(node.left)
    right = _bst_info(node.right)
    is_bst = left.is_bst and right.is_bst and left.maximum < node.value < right.minimum
    maximum = max(node.value, left.maximum, right.maximum)
    minimum = min(node.value, left.minimum, right.minimum)
    if is_bst:
        return _BstInfo(True, maximum, minimum, node, left.size + right.size + 1)
    best = left if left.size > right.size else right
    return _BstInfo(False, maximum, minimum, best.root, best.size)


def largest_bst(root: Optional[BinaryNode]) -> tuple[Optional[BinaryNode], int]:
    """Root and node count of the largest subtree that is a binary search tree."""
    info = _bst_info(root)
    return info.root, info.size