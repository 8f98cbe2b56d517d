# algosuite

A collection of classic algorithms on sequences, numbers and graphs, written
in plain Python with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algosuite.sequences`

- `josephus(n, k)` – the 1-based position that survives when every k-th of
  `n` people in a circle is removed. Raises `ValueError` if `n < 1`.
- `longest_increasing_subsequence(values)` – the length of the longest
  strictly increasing subsequence (0 for an empty sequence).
- `xor_swap(a, b)` – swaps two integers with the XOR trick and returns
  `(b, a)`.
- `bucket_sort(values)` – sorts values in the range `[0, 1)` using one bucket
  per value; any value outside that range raises `ValueError`.

```python
from algosuite.sequences import josephus, bucket_sort

josephus(14, 2)                                    # 13
bucket_sort([0.897, 0.565, 0.656, 0.1234, 0.665])  # [0.1234, 0.565, 0.656, 0.665, 0.897]
```

### `algosuite.nqueens`

- `solve_n_queens(n)` – places `n` queens by column-wise backtracking and
  returns the first board found as a list of row strings (`"Q"` for a queen,
  `"."` for an empty cell), or `None` when no placement exists (for example
  `n = 2` or `n = 3`). A negative `n` raises `ValueError`.
- `format_board(board)` – renders a board with cells separated by spaces, one
  row per line.

```python
from algosuite.nqueens import solve_n_queens, format_board

print(format_board(solve_n_queens(8)))
```

### `algosuite.primes`

- `prime_sieve(limit)` – a list whose entry `i` tells whether `i` is prime,
  for `0 <= i < limit`.
- `is_prime(n, limit=20_000_000)` – looks `n` up in a sieve of Eratosthenes
  covering numbers below `limit`; `n` outside `[0, limit)` raises
  `ValueError`. Sieves are cached, so repeated calls with the same limit do
  not rebuild them. The default limit builds a 20-million-entry sieve on first
  use; pass a smaller `limit` when that is enough.

### `algosuite.undirected`

`Graph(vertex_count)` is an undirected graph on vertices `0 .. vertex_count-1`
whose adjacency lists keep edges in the order they were added. Any vertex
outside that range raises `IndexError`.

- `add_edge(u, v)`, `neighbours(vertex)`
- `bfs(source)` – breadth-first order.
- `dfs(source)` – depth-first preorder.
- `dfs_stack(source)` – order of a stack walk that records vertices as they
  are pushed.
- `is_connected(source=0)` – whether every vertex is reachable from `source`.
- `articulation_points(source=0)` – cut vertices of the component holding
  `source`, in ascending order (Tarjan's low-link method).
- `hamiltonian_path(start)` – the first path from `start` visiting every
  vertex once, or `None`.
- `closes_cycle(path)` – whether the last vertex of `path` is adjacent to the
  first, i.e. whether a Hamiltonian path is also a cycle.

```python
from algosuite.undirected import Graph

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(1, 2)
g.add_edge(2, 3)

g.bfs(0)            # [0, 1, 2, 3]
g.dfs(0)            # [0, 1, 2, 3]
g.is_connected(0)   # True
```

### `algosuite.weighted`

Functions on square adjacency matrices (a non-square matrix raises
`ValueError`, a vertex out of range raises `IndexError`):

- `dijkstra(matrix, source)` – shortest distances from `source`; a weight of
  0 means no edge and unreachable vertices get `math.inf`.
- `floyd_warshall(matrix)` – all-pairs shortest distances; here `math.inf`
  marks a missing edge.
- `format_distance_matrix(matrix)` – renders a distance matrix, writing `INF`
  for `math.inf`.
- `prim(matrix, source)` – minimum spanning tree by Prim's algorithm, returned
  as `(parent, weight)` lists: each vertex's parent (`None` for the source) and
  the weight of the edge to it.
- `kruskal(matrix)` – minimum spanning tree edges `(u, v, weight)`, cheapest
  first, read from the upper triangle.

`prim` and `kruskal` treat 0 as no edge and raise `ValueError` if the graph is
not connected.

```python
import math
from algosuite.weighted import dijkstra, floyd_warshall, prim, kruskal

dijkstra([[0, 4, 0], [4, 0, 1], [0, 1, 0]], 0)   # [0, 4, 5]

inf = math.inf
floyd_warshall([[0, 3, inf, 7],
                [8, 0, 2, inf],
                [5, inf, 0, 1],
                [2, inf, inf, 0]])
# [[0, 3, 5, 6], [5, 0, 2, 3], [3, 6, 0, 1], [2, 5, 7, 0]]

mst = [[0, 2, 0, 6, 0],
       [2, 0, 3, 8, 5],
       [0, 3, 0, 0, 7],
       [6, 8, 0, 0, 9],
       [0, 5, 7, 9, 0]]
prim(mst, 0)    # ([None, 0, 1, 0, 1], [0, 2, 3, 6, 5])
kruskal(mst)    # [(0, 1, 2), (1, 2, 3), (1, 4, 5), (0, 3, 6)]
```

### `algosuite.directed`

`DiGraph(vertex_count)` is a directed graph on vertices
`0 .. vertex_count-1`.

- `add_edge(u, v)` – adds `u -> v`.
- `transpose()` – a new graph with every edge reversed.
- `strongly_connected_components()` – components found by Kosaraju's
  algorithm.
- `topological_sort()` – Kahn's algorithm, lower indices first on ties;
  raises `ValueError` if the graph has a cycle.

```python
from algosuite.directed import DiGraph

d = DiGraph(5)
for u, v in [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)]:
    d.add_edge(u, v)
d.strongly_connected_components()   # [[0, 1, 2], [3], [4]]
```

## What it does not do

algosuite is a library only: it installs no command-line programs and reads
nothing from standard input. Results are returned as Python values; call the
functions from your own code and print or store them as you need.