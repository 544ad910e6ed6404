"""Adjacency matrices: products, boolean closure and shortest paths."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Sequence

Matrix = list[list[int]]
INF = math.inf


def adjacency_matrix(n: int, edges: Iterable[Sequence[int]],
                     directed: bool = True) -> Matrix:
    """Build an ``n`` by ``n`` 0/1 matrix from ``(u, v)`` pairs; self-loops are dropped."""
    matrix = [[0] * n for _ in range(n)]
    for u, v, *_ in edges:
        if u != v:
            matrix[u][v] = 1
            if not directed:
                matrix[v][u] = 1
    return matrix


def weighted_matrix(n: int, edges: Iterable[Sequence[int]]) -> list[list[float]]:
    """Build a directed weight matrix from ``(u, v, w)`` triples.

    The diagonal is 0, missing edges are :data:`INF`, self-loops are dropped.
    """
    matrix: list[list[float]] = [[0 if i == j else INF for j in range(n)] for i in range(n)]
    for u, v, w in edges:
        if u != v:
            matrix[u][v] = w
    return matrix


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the integer matrix product ``a`` times ``b``."""
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def boolean_or(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Element-wise logical OR as a 0/1 matrix."""
    return [[int(bool(x or y)) for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def boolean_and(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Element-wise logical AND as a 0/1 matrix."""
    return [[int(bool(x and y)) for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def transpose(a: Sequence[Sequence[int]]) -> Matrix:
    """Return the transpose of ``a``."""
    return [list(col) for col in zip(*a)]


def neighbours(matrix: Sequence[Sequence[int]], index: int) -> list[int]:
    """Nodes ``i`` whose entry in ``matrix`` times the unit vector at ``index`` is 1.

    Applied to the transpose of an adjacency matrix this lists the nodes
    that ``index`` connects to.
    """
    product = [row[index] for row in matrix]
    return [i for i, value in enumerate(product) if value == 1]


def matrix_powers(a: Sequence[Sequence[int]], steps: int) -> Iterator[tuple[int, Matrix]]:
    """Yield ``(k, a**k)`` for ``k`` from 1 to ``steps``."""
    power = [list(row) for row in a]
    for exponent in range(1, steps + 1):
        if exponent > 1:
            power = multiply(power, a)
        yield exponent, power


def iva(a: Sequence[Sequence[int]], steps: int) -> Matrix:
    """Return ``a`` OR ``a**2`` OR ... OR ``a**steps`` as a 0/1 matrix."""
    result = boolean_or(a, a)
    for _, power in matrix_powers(a, steps):
        result = boolean_or(result, power)
    return result


def reachability_matrix(a: Sequence[Sequence[int]]) -> Matrix:
    """Reflexive-transitive closure: entry ``[i][j]`` is 1 if ``j`` is reachable from ``i``."""
    n = len(a)
    identity = [[int(i == j) for j in range(n)] for i in range(n)]
    return boolean_or(identity, iva(a, n))


def shortest_paths(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest path lengths by Floyd-Warshall; unreachable pairs stay :data:`INF`."""
    dist = [list(row) for row in matrix]
    n = len(dist)
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == INF:
                continue
            for j in range(n):
                if through[j] != INF and via + through[j] < row[j]:
                    row[j] = via + through[j]
    return dist


def _cell(value: float) -> str:
    return "." if value == INF else str(value)


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render one indented line per row; :data:`INF` is shown as ``.``."""
    return "".join(
        "    " + " ".join(_cell(value) for value in row) + "\n" for row in matrix
    )


def format_adjacency_list(matrix: Sequence[Sequence[float]]) -> str:
    """Render ``i: j j ...`` lines for every entry that is neither 0 nor :data:`INF`."""
    lines = []
    for i, row in enumerate(matrix):
        targets = "".join(f"{j} " for j, value in enumerate(row) if value not in (0, INF))
        lines.append(f"{i}: {targets}\n")
    return "".join(lines)