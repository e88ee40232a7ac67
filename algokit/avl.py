"""A self-balancing AVL search tree with insertion, deletion and lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    key: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_Node], key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    _update(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _minimum(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(root: Optional[_Node], key: Any) -> Optional[_Node]:
    if root is None:
        return None
    if key < root.key:
        root.left = _delete(root.left, key)
    elif key > root.key:
        root.right = _delete(root.right, key)
    elif root.left is None or root.right is None:
        child = root.left if root.left is not None else root.right
        if child is None:
            return None
        root = child
    else:
        successor = _minimum(root.right)
        root.key = successor.key
        root.right = _delete(root.right, successor.key)

    _update(root)
    balance = _balance(root)
    if balance > 1:
        assert root.left is not None
        if _balance(root.left) < 0:
            root.left = _rotate_left(root.left)
        return _rotate_right(root)
    if balance < -1:
        assert root.right is not None
        if _balance(root.right) > 0:
            root.right = _rotate_right(root.right)
        return _rotate_left(root)
    return root


def _preorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


class AVLTree:
    """A set of distinct keys kept in a height-balanced binary search tree."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key``; a key already present is left as it is."""
        if key in self:
            return
        self._root = _insert(self._root, key)
        self._size += 1

    def delete(self, key: Any) -> None:
        """Remove ``key``; a key that is absent is ignored."""
        if key not in self:
            return
        self._root = _delete(self._root, key)
        self._size -= 1

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def preorder(self) -> list[Any]:
        """Keys in root-left-right order."""
        return list(_preorder(self._root))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"AVLTree({self.preorder()!r})"