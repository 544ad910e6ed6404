"""A growable array with an explicit capacity and a choice of growth policy."""

from __future__ import annotations

import heapq
import random
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Iterator, Union

DEFAULT_CAPACITY = 5


class GrowthPolicy(Enum):
    """How the capacity grows when a full array receives another element."""

    PLUS_ONE = 1
    PLUS_TWO = 2
    GROW_1_5 = 3
    GROW_1_7 = 4
    DOUBLE = 5

    def next_capacity(self, capacity: int) -> int:
        """Return the capacity this policy chooses after ``capacity``."""
        grown = {
            GrowthPolicy.PLUS_ONE: lambda c: c + 1,
            GrowthPolicy.PLUS_TWO: lambda c: c + 2,
            GrowthPolicy.GROW_1_5: lambda c: int(c * 1.5),
            GrowthPolicy.GROW_1_7: lambda c: int(c * 1.7),
            GrowthPolicy.DOUBLE: lambda c: c * 2,
        }[self](capacity)
        # Small capacities would otherwise never grow under the fractional policies.
        return max(grown, capacity + 1)


PolicyLike = Union[GrowthPolicy, int]


class DynamicArray:
    """Sequence that tracks a capacity and grows it by a policy when full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 policy: PolicyLike = GrowthPolicy.GROW_1_5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._policy = GrowthPolicy(policy)
        self._items: list[Any] = []

    @property
    def policy(self) -> GrowthPolicy:
        return self._policy

    def capacity(self) -> int:
        """Number of elements the array can hold before it has to grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return (f"DynamicArray({self._items!r}, capacity={self._capacity}, "
                f"policy={self._policy.name})")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for size {len(self._items)}")

    def _reserve_one(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity = self._policy.next_capacity(self._capacity)

    def push_back(self, element: Any) -> None:
        """Append ``element`` at the end."""
        self._reserve_one()
        self._items.append(element)

    def push_front(self, element: Any) -> None:
        """Put ``element`` before every other element."""
        self._reserve_one()
        self._items.insert(0, element)

    def pop_back(self) -> Any:
        """Remove and return the last element; an empty array is left as is."""
        if not self._items:
            return None
        return self._items.pop()

    def pop_front(self) -> Any:
        """Remove and return the first element; an empty array is left as is."""
        if not self._items:
            return None
        return self._items.pop(0)

    def insert(self, index: int, element: Any) -> None:
        """Insert ``element`` at an existing ``index``.

        Index 0 puts the element in front; the last index appends it after
        the current last element.
        """
        self._check_index(index)
        if index == 0:
            self.push_front(element)
        elif index == len(self._items) - 1:
            self.push_back(element)
        else:
            self._reserve_one()
            self._items.insert(index, element)

    def erase(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._check_index(index)
        if index == 0:
            self.pop_front()
        elif index == len(self._items) - 1:
            self.pop_back()
        else:
            del self._items[index]


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> DynamicArray:
    """Merge two sorted sequences into a new sorted array.

    On ties the element from ``first`` comes first.
    """
    merged = DynamicArray()
    for element in heapq.merge(first, second):
        merged.push_back(element)
    return merged


def growth_trace(total: int = 100_000, policy: PolicyLike = GrowthPolicy.DOUBLE,
                 rng: random.Random | None = None) -> Iterator[tuple[int, int, int]]:
    """Fill an array in batches of 1000 random values.

    Yields ``(batch, capacity, size)`` after each batch.
    """
    rng = rng or random.Random()
    array = DynamicArray(policy=policy)
    for batch in range(total // 1000):
        for _ in range(1000):
            array.push_back(rng.randint(0, 1000))
        yield batch, array.capacity(), len(array)


def write_growth_trace(path: str | Path = "data.txt", total: int = 100_000,
                       policy: PolicyLike = GrowthPolicy.DOUBLE,
                       rng: random.Random | None = None) -> None:
    """Write the growth trace as lines of ``batch capacity size``."""
    with open(path, "w", encoding="utf-8") as out:
        for batch, capacity, size in growth_trace(total, policy, rng):
            out.write(f"{batch} {capacity} {size}\n")