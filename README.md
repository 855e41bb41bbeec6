# classicalgos

A small collection of classic algorithms. Each one lives in its own module
and comes with a command-line demonstration:

| Module | What it does |
| --- | --- |
| `classicalgos.binary_search` | Binary search over an ascending sequence |
| `classicalgos.knapsack` | Greedy fractional knapsack by value-to-weight ratio |
| `classicalgos.merge_sort` | Stable top-down merge sort |
| `classicalgos.kruskal` | Kruskal's minimum spanning tree with a union-find |
| `classicalgos.optimal_merge` | Optimal merge pattern cost using a min-heap |
| `classicalgos.quick_sort` | In-place quick sort with Lomuto (last-element) partitioning |

The package needs Python 3.10 or later and has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Binary search

```python
from classicalgos.binary_search import binary_search

ids = [101, 205, 312, 450, 567, 601, 720, 899, 945, 1024]
binary_search(ids, 567)   # 4
binary_search(ids, 500)   # None
```

`binary_search(ids, target)` returns the index of `target` in the ascending
sequence `ids`, or `None` when it is absent.

### Fractional knapsack

```python
from classicalgos.knapsack import Item, fractional_knapsack

result = fractional_knapsack(50.0, [Item(60, 10), Item(100, 20), Item(120, 30)])
result.total_weight   # 50.0
result.total_value    # 240.0
```

- `Item(value, weight)` is frozen. It computes `ratio = value / weight`. It
  raises `ValueError` if the weight is not positive.
- Items are taken in descending order of ratio. The first item that does not
  fit whole is taken in part, and loading stops there. A negative capacity
  raises `ValueError`.
- The `KnapsackResult` has these fields:
  - `steps`: a list of `LoadStep` entries.
  - `total_weight`
  - `total_value`
- Each `LoadStep` records:
  - `item`: the item's 1-based position in ratio order.
  - `weight` and `value`: the weight loaded and the value gained.
  - `fraction`: the share of the item taken.
  - `full`: whether the whole item was loaded.

### Sorting

```python
from classicalgos.merge_sort import merge, merge_sort
from classicalgos.quick_sort import partition, quick_sort

merge_sort([70, 50, 30, 10, 20, 40, 60])   # new list: [10, 20, 30, 40, 50, 60, 70]
merge([1, 4, 9], [2, 3, 10])              # [1, 2, 3, 4, 9, 10]

data = [10, 7, 8, 9, 1, 5]
quick_sort(data)                          # sorts data in place, returns None
```

- `merge_sort` accepts any iterable and returns a new sorted list. It is
  stable.
- `merge` merges two ascending iterables. When elements are equal, the one
  from the left iterable comes first.
- `quick_sort` sorts a mutable sequence in place.
- `partition(values, low, high)` performs a single partitioning step. It
  moves the pivot `values[high]` to its final position within
  `values[low:high + 1]` and returns that position.

### Kruskal's minimum spanning tree

```python
from classicalgos.kruskal import Edge, kruskal_mst

edges = [
    Edge(0, 1, 2), Edge(0, 3, 6), Edge(1, 2, 3), Edge(1, 4, 5),
    Edge(1, 3, 8), Edge(2, 4, 7), Edge(3, 4, 9),
]
kruskal_mst(5, edges)
# [Edge(0, 1, 2), Edge(1, 2, 3), Edge(1, 4, 5), Edge(0, 3, 6)]
```

`kruskal_mst(vertex_count, edges)` considers edges in order of increasing
weight. It keeps each edge that joins two different components, and it stops
once `vertex_count - 1` edges have been chosen. The edges come back in the
order they were chosen. A disconnected graph yields a spanning forest.

`kruskal_mst` raises `ValueError` in two cases:
- an edge names a vertex outside `0 .. vertex_count - 1`;
- the vertex count is negative.

`DisjointSet(size)` is the union-find structure behind it:
- `find(i)` returns the representative of the set holding `i`, with path
  compression.
- `union(x, y)` joins two sets by rank. It returns `False` if they were
  already joined.

### Optimal merge pattern

```python
from classicalgos.optimal_merge import optimal_merge_cost

optimal_merge_cost([20, 30, 10, 5, 30])   # 205
```

`optimal_merge_cost` repeatedly merges the two smallest sizes and returns the
total cost of all merges. A single size costs 0. An empty input raises
`ValueError`.

## Command-line demonstrations

Each module installs a command:

```
classicalgos-binary-search [TARGET]
classicalgos-knapsack [--capacity CAPACITY]
classicalgos-merge-sort [VALUES ...]
classicalgos-quick-sort [VALUES ...]
classicalgos-optimal-merge [SIZES ...]
classicalgos-kruskal
```

- `classicalgos-binary-search` lists the built-in product IDs and looks up
  `TARGET`. If no target is given, it prompts for one on standard input.
- `classicalgos-knapsack` prints the loading plan for the three example
  items, with a default capacity of 50.
- The two sorting commands and `classicalgos-optimal-merge` work on the
  integers given on the command line. With none, they use a built-in example.
- `classicalgos-kruskal` prints the spanning tree of the example graph above.

## Limitations

The commands are demonstrations only:
- The product index searched by `classicalgos-binary-search` is a fixed
  built-in list.
- The knapsack items and the Kruskal graph cannot be supplied from the
  command line or read from a file.
- Nothing is stored between runs.