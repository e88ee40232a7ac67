"""N-ary trees: building from a pre-order encoding, description, diameter and node distance."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

END_OF_CHILDREN = -1


@dataclass(eq=False)
class TreeNode:
    """A node with any number of ordered children."""

    value: int
    children: list["TreeNode"] = field(default_factory=list)


def build_generic_tree(encoding: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from values in pre-order, each node closed by a ``-1``."""
    root: Optional[TreeNode] = None
    stack: list[TreeNode] = []
    for value in encoding:
        if value == END_OF_CHILDREN:
            if not stack:
                raise ValueError("unmatched -1 in encoding")
            stack.pop()
            continue
        node = TreeNode(value)
        if stack:
            stack[-1].children.append(node)
        elif root is not None:
            raise ValueError("encoding holds more than one root")
        else:
            root = node
        stack.append(node)
    return root


def describe(root: Optional[TreeNode]) -> list[str]:
    """One line per node in pre-order, such as ``"10->20, 30, ."``."""
    lines: list[str] = []

    def visit(node: TreeNode) -> None:
        children = "".join(f"{child.value}, " for child in node.children)
        lines.append(f"{node.value}->{children}.")
        for child in node.children:
            visit(child)

    if root is not None:
        visit(root)
    return lines


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between two nodes."""
    if root is None:
        return 0
    best = 0

    def depth(node: TreeNode) -> int:
        nonlocal best
        highest = second = -1
        for child in node.children:
            child_depth = depth(child)
            if child_depth >= highest:
                second, highest = highest, child_depth
            elif child_depth >= second:
                second = child_depth
        best = max(best, highest + second + 2)
        return highest + 1

    depth(root)
    return best


def path_to_node(root: Optional[TreeNode], key: int) -> list[int]:
    """Values from the node holding ``key`` up to the root; empty when absent."""
    if root is None:
        return []
    if root.value == key:
        return [root.value]
    for child in root.children:
        path = path_to_node(child, key)
        if path:
            path.append(root.value)
            return path
    return []


def node_distance(root: Optional[TreeNode], first: int, second: int) -> int:
    """Number of edges between the nodes holding ``first`` and ``second``."""
    first_path = path_to_node(root, first)
    second_path = path_to_node(root, second)
    for key, path in ((first, first_path), (second, second_path)):
        if not path:
            raise ValueError(f"value {key} is not in the tree")
    common = 0
    for a, b in zip(reversed(first_path), reversed(second_path)):
        if a != b:
            break
        common += 1
    return len(first_path) + len(second_path) - 2 * common