# dsakit

A small library of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## What is inside

| Module            | Contents |
|-------------------|----------|
| `dsakit.dynarray` | `DynamicArray` with an explicit capacity and a `GrowthPolicy`; `merge_sorted`; `growth_trace` and `write_growth_trace` |
| `dsakit.sorting`  | `merge_sort`, `quick_sort`, `randomized_quick_sort` (all in place), `random_values`, `time_sort` |
| `dsakit.linear`   | `MaxHeap`, `LinkedList`, `LinkedStack`, `LinkedQueue`, `ArrayStack` |
| `dsakit.matrix`   | `adjacency_matrix`, `weighted_matrix`, `multiply`, `boolean_or`, `boolean_and`, `transpose`, `neighbours`, `matrix_powers`, `iva`, `reachability_matrix`, `shortest_paths`, `format_matrix`, `format_adjacency_list` |
| `dsakit.graphs`   | `bellman_ford`, `NegativeCycleError`, `UnionFind`, `WeightedGraph` with `kruskal` and `prim` |
| `dsakit.kmeans`   | `Point`, `KMeans`, `load_dataset`, and the `dsakit-kmeans` command |
| `dsakit.bst`      | `BinarySearchTree` with in-, pre-, post- and level-order traversals |
| `dsakit.rbtree`   | `RedBlackTree` and its `Color` enum |
| `dsakit.treap`    | `Treap` with random priorities and recursive and iterative traversals |

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Containers support `len()` and iteration.

```python
from dsakit.dynarray import DynamicArray, GrowthPolicy, merge_sorted

array = DynamicArray(capacity=2, policy=GrowthPolicy.DOUBLE)
for value in (1, 2, 3):
    array.push_back(value)
array.capacity()                        # 4
list(merge_sorted([1, 3, 5], [2, 4, 6]))  # [1, 2, 3, 4, 5, 6]
```

`MaxHeap` keeps the largest element at the root. `get_min` and
`extract_min` are aliases of `get_max` and `extract_max`.

```python
from dsakit.linear import MaxHeap, LinkedQueue

heap = MaxHeap()
for value in (14, 3, 23, 8, 2, 19, 6):
    heap.insert(value)
heap.extract_max()   # 23
heap.get_max()       # 19

queue = LinkedQueue()
queue.push("first")
queue.push("second")
queue.front()        # "first"
```

Search trees place equal elements in the right subtree.

```python
from dsakit.bst import BinarySearchTree
from dsakit.rbtree import RedBlackTree

tree = BinarySearchTree()
for value in (12, 15, 3, 4, 2):
    tree.insert(value)
4 in tree                  # True
tree.remove(3)
list(tree.level_order())   # [12, 4, 15, 2]

rb = RedBlackTree()
for value in (12, 15, 3, 4, 2, 1, 7, 33, 6):
    rb.insert(value)
list(rb)                   # [1, 2, 3, 4, 6, 7, 12, 15, 33]
```

Graph algorithms:

```python
from dsakit.graphs import bellman_ford, NegativeCycleError, WeightedGraph

edges = [(0, 1, 6), (0, 2, 7), (1, 2, 8), (1, 3, 5), (1, 4, -4),
         (2, 3, -3), (2, 4, 9), (3, 1, -2), (4, 0, 2), (4, 3, 7)]
try:
    distances = bellman_ford(5, edges, 0)   # [0, 2, 7, 4, -2]
except NegativeCycleError:
    distances = None

graph = WeightedGraph(4)
graph.add_edge(0, 1, 3)
graph.add_edge(1, 2, 1)
graph.add_edge(0, 2, 5)
graph.add_edge(2, 3, 2)
graph.kruskal()   # [Edge(u=1, v=2, weight=1), Edge(u=2, v=3, weight=2), Edge(u=0, v=1, weight=3)]
graph.prim()      # [Edge(u=0, v=1, weight=3), Edge(u=1, v=2, weight=1), Edge(u=2, v=3, weight=2)]
```

Matrices are plain lists of lists; missing weights are `math.inf`.

```python
from dsakit.matrix import adjacency_matrix, reachability_matrix, weighted_matrix, shortest_paths

a = adjacency_matrix(3, [(0, 1), (1, 2)])
reachability_matrix(a)   # [[1, 1, 1], [0, 1, 1], [0, 0, 1]]
shortest_paths(weighted_matrix(3, [(0, 1, 2), (1, 2, 3), (0, 2, 9)]))[0]   # [0, 2, 5]
```

Sorting works in place:

```python
from dsakit.sorting import merge_sort, quick_sort, time_sort, random_values

values = [5, 2, 9, 1]
merge_sort(values)      # values is now [1, 2, 5, 9]
time_sort(quick_sort, random_values(10_000), repeats=10)   # nanoseconds per run
```

## Clustering from the command line

`dsakit-kmeans` reads a tab-separated file whose first line is a header and
uses columns 4 and 9 to 14 as features (empty or unparsable cells count as
0). It clusters the rows and prints the size of each cluster and the final
centroids. If the file cannot be read or holds no rows it prints
`Error uploading file.`

```
dsakit-kmeans Data.txt
dsakit-kmeans Data.txt -k 3 --iterations 50 --seed 1
```

The path defaults to `Data.txt`, `-k` to 5 and `--iterations` to 100;
`--seed` makes the initial centroids reproducible.

## What it does not do

`RedBlackTree` supports insertion, traversal and height only; it has no
removal or lookup. Nothing is stored between runs, and `dsakit-kmeans` is
the only command: the other modules are used from Python.