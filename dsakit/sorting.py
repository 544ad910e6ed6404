"""Merge sort, quick sort and a small timing helper."""

from __future__ import annotations

import heapq
import random
import time
from typing import Any, Callable, Iterable, MutableSequence


def merge_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with a top-down, stable merge sort."""
    _merge_sort(values, 0, len(values) - 1)


def _merge_sort(values: MutableSequence[Any], begin: int, end: int) -> None:
    if begin >= end:
        return
    middle = (begin + end) // 2
    _merge_sort(values, begin, middle)
    _merge_sort(values, middle + 1, end)
    values[begin:end + 1] = list(
        heapq.merge(values[begin:middle + 1], values[middle + 1:end + 1])
    )


def _partition(values: MutableSequence[Any], begin: int, end: int) -> int:
    """Lomuto partition around the last element; return the pivot's place."""
    pivot = values[end]
    store = begin
    for j in range(begin, end):
        if values[j] <= pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[end] = values[end], values[store]
    return store


def _quick_sort(values: MutableSequence[Any],
                choose_pivot: Callable[[int, int], int] | None) -> None:
    # An explicit stack keeps already sorted input from exhausting recursion.
    pending = [(0, len(values) - 1)]
    while pending:
        begin, end = pending.pop()
        if begin >= end:
            continue
        if choose_pivot is not None:
            pivot = choose_pivot(begin, end)
            values[pivot], values[end] = values[end], values[pivot]
        split = _partition(values, begin, end)
        pending.append((split + 1, end))
        pending.append((begin, split - 1))


def quick_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with quick sort using the last element as pivot."""
    _quick_sort(values, None)


def randomized_quick_sort(values: MutableSequence[Any],
                          rng: random.Random | None = None) -> None:
    """Sort ``values`` in place with quick sort using a random pivot."""
    rng = rng or random.Random()
    _quick_sort(values, rng.randint)


def random_values(count: int, upper: int = 100_000,
                  rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random integers drawn uniformly from ``0..upper``."""
    rng = rng or random.Random()
    return [rng.randint(0, upper) for _ in range(count)]


def time_sort(sort: Callable[[list[Any]], Any], values: Iterable[Any],
              repeats: int = 10) -> list[int]:
    """Time ``sort`` on a fresh copy of ``values`` each run; nanoseconds per run."""
    original = list(values)
    timings = []
    for _ in range(repeats):
        work = list(original)
        start = time.perf_counter_ns()
        sort(work)
        timings.append(max(0, time.perf_counter_ns() - start))
    return timings