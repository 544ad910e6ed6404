"""Unbalanced binary search tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree; equal elements go to the right subtree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self.in_order())!r})"

    def __str__(self) -> str:
        return "".join(f"({value})->" for value in self.level_order())

    def insert(self, data: Any) -> None:
        """Add ``data`` as a new leaf."""
        node = _Node(data)
        if self._root is None:
            self._root = node
            self._size += 1
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
        self._size += 1

    def _search(self, data: Any) -> tuple[Optional[_Node], Optional[_Node]]:
        """Return ``(parent, node)`` for the first node holding ``data``."""
        parent: Optional[_Node] = None
        current = self._root
        while current is not None and current.data != data:
            parent = current
            current = current.left if data < current.data else current.right
        return parent, current

    def __contains__(self, data: Any) -> bool:
        return self._search(data)[1] is not None

    def _replace_child(self, parent: Optional[_Node], old: _Node,
                       new: Optional[_Node]) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, data: Any) -> None:
        """Remove one node holding ``data``; absent values are ignored."""
        parent, current = self._search(data)
        if current is None:
            return
        if current.left is None or current.right is None:
            child = current.left if current.left is not None else current.right
            self._replace_child(parent, current, child)
        else:
            succ_parent = current
            succ = current.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            if succ_parent.left is succ:
                succ_parent.left = succ.right
            else:
                succ_parent.right = succ.right
            succ.left = current.left
            succ.right = current.right
            self._replace_child(parent, current, succ)
        self._size -= 1

    def in_order(self) -> Iterator[Any]:
        """Yield elements left subtree, node, right subtree."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node.data
                node = node.right

    def pre_order(self) -> Iterator[Any]:
        """Yield elements node, left subtree, right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[Any]:
        """Yield elements left subtree, right subtree, node."""
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
                yield peek.data
                last = stack.pop()

    def level_order(self) -> Iterator[Any]:
        """Yield elements breadth first, left to right."""
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.data
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)