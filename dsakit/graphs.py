"""Weighted graphs: Bellman-Ford distances and minimum spanning trees."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Optional, Sequence

INF = math.inf


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest distances undefined."""


class Edge(NamedTuple):
    """An undirected weighted edge."""

    u: int
    v: int
    weight: int


def bellman_ford(n: int, edges: Iterable[Sequence[int]], source: int) -> list[float]:
    """Return the shortest distance from ``source`` to every node.

    ``edges`` holds directed ``(u, v, weight)`` triples. Unreachable nodes
    get :data:`INF`. Raises :class:`NegativeCycleError` if a negative cycle
    can still be relaxed after ``n - 1`` rounds.
    """
    if not 0 <= source < n:
        raise ValueError(f"source {source} is not a node of a graph with {n} nodes")
    triples = [(u, v, w) for u, v, w in edges]
    dist: list[float] = [INF] * n
    dist[source] = 0
    for _ in range(n - 1):
        for u, v, w in triples:
            if dist[u] != INF and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
    for u, v, w in triples:
        if dist[u] != INF and dist[u] + w < dist[v]:
            raise NegativeCycleError(
                "the graph contains a negative cycle; distances are not reliable"
            )
    return dist


class UnionFind:
    """Disjoint sets with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return False if they were already one."""
        xr, yr = self.find(x), self.find(y)
        if xr == yr:
            return False
        if self._rank[xr] < self._rank[yr]:
            self._parent[xr] = yr
        elif self._rank[xr] > self._rank[yr]:
            self._parent[yr] = xr
        else:
            self._parent[yr] = xr
            self._rank[xr] += 1
        return True


class WeightedGraph:
    """Undirected weighted graph stored as an adjacency matrix."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of nodes must not be negative")
        self._weights: list[list[Optional[int]]] = [[None] * n for _ in range(n)]

    @property
    def n(self) -> int:
        return len(self._weights)

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.n:
            raise IndexError(f"node {node} out of range for {self.n} nodes")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Set the weight of edge ``u``-``v``; self-loops are ignored."""
        self._check_node(u)
        self._check_node(v)
        if u == v:
            return
        self._weights[u][v] = weight
        self._weights[v][u] = weight

    def has_edge(self, u: int, v: int) -> bool:
        self._check_node(u)
        self._check_node(v)
        return self._weights[u][v] is not None

    def edges(self) -> list[Edge]:
        """Every edge once, as ``(u, v, weight)`` with ``u < v``, in row order."""
        return [
            Edge(u, v, row[v])
            for u, row in enumerate(self._weights)
            for v in range(u + 1, self.n)
            if row[v] is not None
        ]

    def kruskal(self) -> list[Edge]:
        """Minimum spanning forest by Kruskal's algorithm, in the order chosen."""
        forest = UnionFind(self.n)
        return [
            edge
            for edge in sorted(self.edges(), key=lambda e: e.weight)
            if forest.union(edge.u, edge.v)
        ]

    def prim(self) -> list[Edge]:
        """Minimum spanning tree of node 0's component by Prim's algorithm.

        Returns ``(parent, node, weight)`` for each node after 0 that joined the tree.
        """
        n = self.n
        if n == 0:
            return []
        parent: list[Optional[int]] = [None] * n
        key: list[float] = [INF] * n
        in_tree = [False] * n
        key[0] = 0
        for _ in range(n - 1):
            candidates = [v for v in range(n) if not in_tree[v] and key[v] < INF]
            if not candidates:
                break
            u = min(candidates, key=key.__getitem__)
            in_tree[u] = True
            for v, w in enumerate(self._weights[u]):
                if w is not None and not in_tree[v] and w < key[v]:
                    key[v] = w
                    parent[v] = u
        return [
            Edge(p, v, self._weights[v][p])
            for v, p in enumerate(parent)
            if v > 0 and p is not None
        ]

    def __str__(self) -> str:
        return "".join(
            "".join("- " if w is None else f"{w} " for w in row) + "\n"
            for row in self._weights
        )