"""Treap: a binary search tree ordered by key and heap-ordered by random priority."""

from __future__ import annotations

import random
from typing import Any, Iterator, Optional

MAX_PRIORITY = 100


class _Node:
    __slots__ = ("data", "priority", "left", "right")

    def __init__(self, data: Any, priority: int) -> None:
        self.data = data
        self.priority = priority
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


class Treap:
    """Treap whose nodes carry priorities drawn uniformly from ``0..100``.

    A node's priority is never lower than its children's. Equal keys go to
    the right subtree. Traversals yield ``(element, priority)`` pairs.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Treap({[data for data, _ in self.in_order()]!r})"

    def __str__(self) -> str:
        if self._root is None:
            return ""
        return "".join(f"({d}, {p}) -> " for d, p in self.in_order()) + "nullptr"

    def insert(self, data: Any) -> None:
        """Add ``data`` with a fresh random priority."""
        self._root = self._insert(self._root, data)
        self._size += 1

    def _insert(self, node: Optional[_Node], data: Any) -> _Node:
        if node is None:
            return _Node(data, self._rng.randint(0, MAX_PRIORITY))
        if data < node.data:
            node.left = self._insert(node.left, data)
        else:
            node.right = self._insert(node.right, data)
        if node.left is not None and node.left.priority > node.priority:
            node = _rotate_right(node)
        elif node.right is not None and node.right.priority > node.priority:
            node = _rotate_left(node)
        return node

    def remove(self, data: Any) -> None:
        """Remove one node holding ``data``; absent values are ignored."""
        self._root, removed = self._remove(self._root, data)
        if removed:
            self._size -= 1

    def _remove(self, node: Optional[_Node], data: Any) -> tuple[Optional[_Node], bool]:
        if node is None:
            return None, False
        if data < node.data:
            node.left, removed = self._remove(node.left, data)
            return node, removed
        if data > node.data:
            node.right, removed = self._remove(node.right, data)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        if node.left.priority > node.right.priority:
            node = _rotate_right(node)
            node.right, removed = self._remove(node.right, data)
        else:
            node = _rotate_left(node)
            node.left, removed = self._remove(node.left, data)
        return node, removed

    def in_order(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(element, priority)`` left subtree, node, right subtree."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node.data, node.priority
                node = node.right

    def pre_order(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(element, priority)`` node, left subtree, right subtree."""
        yield from self._pre_order(self._root)

    def _pre_order(self, node: Optional[_Node]) -> Iterator[tuple[Any, int]]:
        if node is None:
            return
        yield node.data, node.priority
        yield from self._pre_order(node.left)
        yield from self._pre_order(node.right)

    def iterative_pre_order(self) -> Iterator[tuple[Any, int]]:
        """Pre-order traversal driven by an explicit stack."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data, node.priority
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(element, priority)`` left subtree, right subtree, node."""
        yield from self._post_order(self._root)

    def _post_order(self, node: Optional[_Node]) -> Iterator[tuple[Any, int]]:
        if node is None:
            return
        yield from self._post_order(node.left)
        yield from self._post_order(node.right)
        yield node.data, node.priority

    def iterative_post_order(self) -> Iterator[tuple[Any, int]]:
        """Post-order traversal driven by an explicit stack."""
        stack: list[_Node] = []
        last: Optional[_Node] = None
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            peek = stack[-1]
            if peek.right is not None and last is not peek.right:
                node = peek.right
            else:
                yield peek.data, peek.priority
                last = stack.pop()

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty treap."""
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