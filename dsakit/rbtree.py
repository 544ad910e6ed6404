"""Red-black tree with insertion and balancing."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, Optional


class Color(Enum):
    RED = 0
    BLACK = 1


class _Node:
    __slots__ = ("data", "color", "parent", "left", "right")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.color = Color.RED
        self.parent: Optional[_Node] = None
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _is_red(node: Optional[_Node]) -> bool:
    return node is not None and node.color is Color.RED


class RedBlackTree:
    """Red-black tree; equal elements go to the right subtree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def __repr__(self) -> str:
        return f"RedBlackTree({list(self)!r})"

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self)

    def _rotate_left(self, node: _Node) -> None:
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self._root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node) -> None:
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self._root = pivot
        elif node is node.parent.right:
            node.parent.right = pivot
        else:
            node.parent.left = pivot
        pivot.right = node
        node.parent = pivot

    def _fix_insert(self, node: _Node) -> None:
        while node is not self._root and _is_red(node.parent):
            parent = node.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if _is_red(uncle):
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_right(node.parent.parent)
            else:
                uncle = grand.left
                if _is_red(uncle):
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_left(node.parent.parent)
        self._root.color = Color.BLACK

    def insert(self, data: Any) -> None:
        """Add ``data`` and rebalance."""
        node = _Node(data)
        self._size += 1
        if self._root is None:
            node.color = Color.BLACK
            self._root = node
            return
        current = self._root
        while True:
            if data < current.data:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        node.parent = current
        self._fix_insert(node)

    def _nodes_in_order(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node
                node = node.right

    def in_order(self) -> Iterator[Any]:
        """Yield elements in ascending order."""
        return (node.data for node in self._nodes_in_order())

    def colored_in_order(self) -> Iterator[tuple[Any, Color]]:
        """Yield ``(element, color)`` pairs in ascending order."""
        return ((node.data, node.color) for node in self._nodes_in_order())

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        if self._root is None:
            return -1
        best = 0
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best