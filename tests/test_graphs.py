import math
import random

import pytest

from dsakit.graphs import (
    Edge,
    NegativeCycleError,
    UnionFind,
    WeightedGraph,
    bellman_ford,
)

EXAMPLE_EDGES = [
    (0, 1, 6), (0, 2, 7), (1, 2, 8), (1, 3, 5), (1, 4, -4),
    (2, 3, -3), (2, 4, 9), (3, 1, -2), (4, 0, 2), (4, 3, 7),
]


def test_bellman_ford_worked_example():
    assert bellman_ford(5, EXAMPLE_EDGES, 0) == [0, 2, 7, 4, -2]


def test_bellman_ford_distances_are_relaxed():
    dist = bellman_ford(5, EXAMPLE_EDGES, 0)
    for u, v, w in EXAMPLE_EDGES:
        assert dist[v] <= dist[u] + w


def test_bellman_ford_second_example_invariant():
    edges = [(3, 2, 6), (5, 3, 1), (0, 1, 5), (1, 5, -3), (1, 2, -1), (3, 4, -2), (2, 4, 3)]
    dist = bellman_ford(6, edges, 0)
    assert dist[0] == 0
    assert all(d < math.inf for d in dist)
    for u, v, w in edges:
        assert dist[v] <= dist[u] + w


def test_bellman_ford_negative_cycle():
    edges = [(0, 1, 1), (1, 2, -1), (2, 3, -1), (3, 0, -1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford(4, edges, 0)


def test_bellman_ford_unreachable_is_inf():
    dist = bellman_ford(3, [(0, 1, 4)], 0)
    assert dist[2] == math.inf
    assert dist[1] == 4


@pytest.mark.parametrize("source", [-1, 5])
def test_bellman_ford_bad_source(source):
    with pytest.raises(ValueError):
        bellman_ford(5, EXAMPLE_EDGES, source)


def test_union_find_union_and_find():
    uf = UnionFind(5)
    assert uf.union(0, 1) is True
    assert uf.union(1, 2) is True
    assert uf.union(0, 2) is False
    assert uf.find(0) == uf.find(2)
    assert uf.find(3) == 3
    assert uf.find(3) != uf.find(0)


def test_add_edge_overwrites_and_ignores_self_loops():
    g = WeightedGraph(3)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 0, 3)
    g.add_edge(2, 2, 9)
    assert g.edges() == [(0, 1, 3)]
    assert g.has_edge(1, 0)
    assert not g.has_edge(2, 2)


def test_add_edge_out_of_range():
    g = WeightedGraph(3)
    with pytest.raises(IndexError):
        g.add_edge(0, 3, 1)


def test_triangle_mst():
    g = WeightedGraph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 2)
    g.add_edge(0, 2, 3)
    assert g.kruskal() == [Edge(0, 1, 1), Edge(1, 2, 2)]
    assert {frozenset((e.u, e.v)) for e in g.prim()} == {
        frozenset((e.u, e.v)) for e in g.kruskal()
    }


def _random_connected_graph(n, seed):
    rng = random.Random(seed)
    g = WeightedGraph(n)
    for v in range(1, n):
        g.add_edge(rng.randrange(v), v, rng.randint(1, 100))
    for _ in range(2 * n):
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v and not g.has_edge(u, v):
            g.add_edge(u, v, rng.randint(1, 100))
    return g


@pytest.mark.parametrize("seed", range(5))
def test_kruskal_and_prim_agree_on_total_weight(seed):
    g = _random_connected_graph(11, seed)
    k = g.kruskal()
    p = g.prim()
    assert len(k) == len(p) == 10
    assert sum(e.weight for e in k) == sum(e.weight for e in p)


@pytest.mark.parametrize("seed", range(5))
def test_prim_result_is_spanning_tree(seed):
    g = _random_connected_graph(10, seed)
    uf = UnionFind(10)
    for u, v, w in g.prim():
        assert g.has_edge(u, v)
        assert uf.union(u, v)
    assert len({uf.find(i) for i in range(10)}) == 1


def test_disconnected_graph():
    g = WeightedGraph(4)
    g.add_edge(0, 1, 4)
    g.add_edge(2, 3, 7)
    assert g.kruskal() == [Edge(0, 1, 4), Edge(2, 3, 7)]
    assert g.prim() == [Edge(0, 1, 4)]