# algolab

A small collection of classic algorithms written in plain Python with no
third-party dependencies. It is meant for studying how the algorithms work
and for comparing how they behave on real input.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `algolab.sorting` | `bubble_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `build_max_heap`, `heap_sort` |
| `algolab.timing` | `TimingRecord`, `time_sort`, `format_records`, `write_plot_data`, and the `algolab-timing` command |
| `algolab.horspool` | `shift_table` and `horspool_search` for substring search |
| `algolab.traversal` | `bfs_reachable` and `dfs_order` over adjacency matrices |
| `algolab.paths` | `dijkstra` single-source shortest paths, `floyd` all-pairs shortest paths, `warshall` transitive closure |
| `algolab.spanning` | `Edge`, `SpanningTree`, and minimum spanning trees by `kruskal` and `prim` |
| `algolab.queens` | `all_solutions`, `first_solution`, `board_rows` and `format_board` for the N-queens puzzle |
| `algolab.knapsack` | `KnapsackResult`, the table-based `knapsack_01` and the value-density `greedy_knapsack` |
| `algolab.challenges` | `maximum_toys` and `picking_numbers` |

Vertices, items, rows and columns are all numbered from 0. Functions that take
a list or matrix return a new result and leave their argument unchanged.
Matrices must be square; otherwise a `ValueError` is raised.

## Examples

### Sorting

Every sort accepts any iterable and returns a new sorted list.
`build_max_heap` returns the values arranged as a max-heap.

```python
from algolab.sorting import merge_sort, heap_sort, build_max_heap

merge_sort([5, 2, 9, 1])   # [1, 2, 5, 9]
heap_sort([3, 1, 2])       # [1, 2, 3]
build_max_heap([1, 2, 3])  # [3, 2, 1]
```

### String search

`horspool_search` returns the index of the first occurrence, or `-1`.
`shift_table` gives the shift for each character of the pattern except its
last position; other characters shift by the full pattern length.

```python
from algolab.horspool import horspool_search

horspool_search("the quick brown fox", "brown")  # 10
horspool_search("abc", "xyz")                    # -1
```

### Traversal

```python
from algolab.traversal import bfs_reachable, dfs_order

graph = [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
bfs_reachable(graph, 0)  # [1, 2]
dfs_order(graph)         # [0, 1, 2]
```

`bfs_reachable` lists, in ascending order, the vertices reached along at least
one edge, so the start vertex appears only when it lies on a cycle.
`dfs_order` visits every vertex, starting a new search from each unvisited
vertex in turn and following entries equal to 1.

### Shortest paths and closure

```python
from algolab.paths import dijkstra, floyd, warshall

dijkstra([[0, 3, 111], [3, 0, 1], [111, 1, 0]], 0)  # [0, 3, 4]
floyd([[0, 3, 999], [3, 0, 1], [999, 1, 0]])         # [[0, 3, 4], [3, 0, 1], [4, 1, 0]]
warshall([[0, 1, 0], [0, 0, 1], [0, 0, 0]])          # [[0, 1, 1], [0, 0, 1], [0, 0, 0]]
```

`dijkstra` treats the value `infinity` (default 111) as a missing edge.

### Spanning trees

```python
from algolab.spanning import kruskal, prim

cost = [[0, 2, 3], [2, 0, 1], [3, 1, 0]]
tree = prim(cost, 0)
tree.cost    # 3
tree.edges   # (Edge(u=0, v=1, cost=2), Edge(u=1, v=2, cost=1))
```

`kruskal(cost, infinity=111)` treats entries at or above `infinity` as missing
edges; `prim(cost, source)` treats a cost of 0 as a missing edge. Both raise
`ValueError` when the graph is not connected. A `SpanningTree` holds its edges
in the order they were chosen and reports their total as `cost`.

### N-queens

A placement is a tuple giving the column of the queen in each row.

```python
from algolab.queens import all_solutions, first_solution, format_board

solutions = list(all_solutions(4))  # [(1, 3, 0, 2), (2, 0, 3, 1)]
print(format_board(solutions[0]))
first_solution(3)                   # None
```

`all_solutions` is a generator in lexicographic order; `board_rows` gives the
placement as a 0/1 matrix and `format_board` as tab-separated text.

### Knapsack

```python
from algolab.knapsack import knapsack_01, greedy_knapsack

knapsack_01([2, 1, 3, 2], [12, 10, 20, 15], 5)
# KnapsackResult(items=(0, 1, 3), profit=37, weight=5)

greedy_knapsack([2, 1, 3, 2], [12, 10, 20, 15], 5)
```

`greedy_knapsack` takes items by falling value per unit weight while they
still fit; it is not guaranteed to be optimal, and weights must be positive.

### Challenges

`maximum_toys(prices, budget)` buys toys cheapest first while money remains
and returns one less than the number bought. `picking_numbers(values)` returns
the size of the longest run of sorted values spanning at most one unit, as
described in its docstring.

## Timing sorts

The `algolab-timing` command fills lists of the requested sizes with random
integers, times one of the sorts (`bubble`, `heap`, `merge`, `quick`,
`selection`) on each using CPU time, prints each timing, and writes the sizes
and timings as two-column plot data:

```
algolab-timing merge 1000 2000 4000 -o file.txt --seed 1
```

`-o/--output` names the data file (default `file.txt`) and `--seed` makes the
random input repeatable. The same is available from Python through
`time_sort`, `format_records` and `write_plot_data`.

## What this package does not do

Apart from `algolab-timing`, there are no commands: the algorithms are
functions to be called from Python, and there is no interactive prompt for
entering matrices or lists. The package writes plot data but draws no plots.