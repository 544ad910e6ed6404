"""Heaps, linked lists, stacks and queues."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from dsakit.dynarray import DynamicArray


class MaxHeap:
    """Binary max-heap kept in a list; the root holds the largest element."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements in storage (level) order."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"

    def _sift_up(self, pos: int) -> None:
        items = self._items
        while pos > 0:
            parent = (pos - 1) // 2
            if not items[pos] > items[parent]:
                return
            items[pos], items[parent] = items[parent], items[pos]
            pos = parent

    def _sift_down(self, pos: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = pos
            for child in (2 * pos + 1, 2 * pos + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == pos:
                return
            items[pos], items[largest] = items[largest], items[pos]
            pos = largest

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("Heap is empty")

    def insert(self, data: Any) -> None:
        """Add ``data`` to the heap."""
        self._items.append(data)
        self._sift_up(len(self._items) - 1)

    def get_max(self) -> Any:
        """Return the root element without removing it."""
        self._require_items()
        return self._items[0]

    def get_min(self) -> Any:
        """Return the root element; the heap orders by maximum, so this is the maximum."""
        return self.get_max()

    def extract_max(self) -> Any:
        """Remove and return the root element."""
        self._require_items()
        items = self._items
        top = items[0]
        items[0], items[-1] = items[-1], items[0]
        items.pop()
        self._sift_down(0)
        return top

    def extract_min(self) -> Any:
        """Remove and return the root element; the same as :meth:`extract_max`."""
        return self.extract_max()

    def update(self, pos: int, new_data: Any) -> None:
        """Replace the element at ``pos``.

        A smaller value is sifted up and any other value is sifted down.
        """
        if not 0 <= pos < len(self._items):
            raise IndexError("Heap is empty or index out of range")
        old = self._items[pos]
        self._items[pos] = new_data
        if new_data < old:
            self._sift_up(pos)
        else:
            self._sift_down(pos)

    def heapify(self) -> None:
        """Restore the heap order over the whole storage."""
        for pos in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(pos)

    def load(self, values: Iterable[Any]) -> None:
        """Replace the storage with ``values`` as given; call :meth:`heapify` to order it."""
        self._items = list(values)


@dataclass
class _Node:
    element: Any
    next: Optional["_Node"] = None


def _walk(node: Optional[_Node]) -> Iterator[Any]:
    while node is not None:
        yield node.element
        node = node.next


class LinkedList:
    """Singly linked list with constant-time insertion at both ends."""

    def __init__(self) -> None:
        self._first: Optional[_Node] = None
        self._last: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._first)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_back(self, element: Any) -> None:
        """Append ``element`` at the end."""
        node = _Node(element)
        if self._last is None:
            self._first = self._last = node
        else:
            self._last.next = node
            self._last = node
        self._size += 1

    def push_front(self, element: Any) -> None:
        """Put ``element`` at the front."""
        node = _Node(element, self._first)
        self._first = node
        if self._last is None:
            self._last = node
        self._size += 1


class LinkedStack:
    """LIFO stack on linked nodes; iterates from the top down."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._top)

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"

    def push(self, element: Any) -> None:
        """Put ``element`` on top."""
        self._top = _Node(element, self._top)
        self._size += 1

    def top(self) -> Any:
        """Return the top element."""
        if self._top is None:
            raise IndexError("top of empty stack")
        return self._top.element

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.element


class LinkedQueue:
    """FIFO queue on linked nodes; iterates from the front."""

    def __init__(self) -> None:
        self._first: Optional[_Node] = None
        self._last: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._first)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"

    def push(self, element: Any) -> None:
        """Add ``element`` at the back."""
        node = _Node(element)
        if self._last is None:
            self._first = self._last = node
        else:
            self._last.next = node
            self._last = node
        self._size += 1

    def front(self) -> Any:
        """Return the front element."""
        if self._first is None:
            raise IndexError("front of empty queue")
        return self._first.element

    def pop(self) -> Any:
        """Remove and return the front element."""
        if self._first is None:
            raise IndexError("pop from empty queue")
        node = self._first
        self._first = node.next
        if self._first is None:
            self._last = None
        self._size -= 1
        return node.element


class ArrayStack:
    """LIFO stack stored in a :class:`DynamicArray`; iterates bottom to top."""

    def __init__(self) -> None:
        self._array = DynamicArray()

    def __len__(self) -> int:
        return len(self._array)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._array)

    def __repr__(self) -> str:
        return f"ArrayStack({list(self)!r})"

    def push(self, element: Any) -> None:
        """Put ``element`` on top."""
        self._array.push_back(element)

    def top(self) -> Any:
        """Return the top element."""
        if not len(self._array):
            raise IndexError("top of empty stack")
        return self._array[len(self._array) - 1]

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not len(self._array):
            raise IndexError("pop from empty stack")
        return self._array.pop_back()