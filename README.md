# daakit

A small collection of classic algorithms with a plain Python interface and a
`daakit` command that reads whitespace-separated numbers and words from
standard input and prints the result.

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

| Module | Functions and classes |
| --- | --- |
| `daakit.sorting` | `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort` |
| `daakit.searching` | `binary_search`, `compute_lps`, `kmp_search`, `rabin_karp`, `HitKind`, `RabinKarpHit` |
| `daakit.graphs` | `dijkstra`, `prim`, `kruskal`, `floyd_warshall`, `SpanningTree` |
| `daakit.scheduling` | `sequence_jobs`, `Job`, `JobSchedule` |
| `daakit.knapsack` | `knapsack` |
| `daakit.tsp` | `travelling_salesman`, `Tour` |
| `daakit.subsets` | `subset_sums_pruned`, `subset_sums` |
| `daakit.queens` | `solve_n_queens` |
| `daakit.cli` | `main` |

### Sorting

`selection_sort`, `insertion_sort`, `merge_sort` and `quick_sort` take any
iterable and return a new sorted list; the input is left untouched.

### Searching

- `binary_search(values, key)` sorts `values` and returns an index of `key`
  in the sorted order, or `None` when it is absent.
- `compute_lps(pattern)` returns the Knuth–Morris–Pratt prefix table.
- `kmp_search(text, pattern)` returns the 1-based start of every occurrence,
  overlapping ones included. An empty pattern raises `ValueError`.
- `rabin_karp(text, pattern, modulus=13)` works on strings of decimal digits.
  Each window is hashed as its decimal value modulo `modulus`; every window
  whose hash equals the pattern's is reported as a `RabinKarpHit` with a
  1-based `position` and a `kind` of `HitKind.MATCH` or `HitKind.SPURIOUS`.
  Non-digit input or a modulus below 1 raises `ValueError`.

### Graphs

Graphs are adjacency lists: `adjacency[node]` is a sequence of
`(destination, weight)` pairs. An edge to a node outside the graph raises
`ValueError`.

- `dijkstra(adjacency, source)` returns the shortest distance to each node,
  `None` where a node cannot be reached.
- `prim(adjacency)` grows a minimum spanning tree from node 0 and returns a
  `SpanningTree` whose `edges` are `(node, parent)` pairs in the order they
  were added, with the total `weight`.
- `kruskal(adjacency)` takes the lightest edges that join two components and
  returns a `SpanningTree` of `(source, destination)` pairs.
- `floyd_warshall(matrix)` returns all-pairs shortest distances for a square
  matrix; `-1` marks a missing edge on input and an unreachable pair on output.

### Scheduling

`sequence_jobs(jobs)` takes `Job(id, deadline, profit)` items with deadlines
counted from 1. Jobs are considered by falling profit (ties by id), and each
goes into the latest free slot before its deadline. The resulting
`JobSchedule` has `assignments` (each job with its 0-based slot, or `None`),
`order` (scheduled job ids in slot order) and `profit` (their total).

### Knapsack, travelling salesman, subsets and queens

- `knapsack(items, capacity)` returns the best total profit of
  `(weight, profit)` items, each taken whole or left out.
- `travelling_salesman(matrix)` tries every tour starting and ending at node 0
  and returns the cheapest as a `Tour` with `cost`, `route` and
  `closed_route` (the route with node 0 appended). Among equal costs the first
  in lexicographic order wins. An empty or non-square matrix raises
  `ValueError`.
- `subset_sums_pruned(numbers, target)` lists subsets summing to `target`,
  never extending a subset past the target (meant for non-negative numbers);
  `subset_sums(numbers, target)` decides item by item to take or skip it.
- `solve_n_queens(n)` returns every board of `n` non-attacking queens as a
  list of rows using `Q` and `.`.

## Using the library

```python
from daakit.graphs import dijkstra, floyd_warshall
from daakit.queens import solve_n_queens
from daakit.searching import kmp_search
from daakit.sorting import quick_sort

print(quick_sort([5, 2, 9, 1]))                 # [1, 2, 5, 9]
print(kmp_search("abababc", "abab"))            # [1, 3]
print(len(solve_n_queens(8)))                   # 92

graph = [[(1, 1), (2, 6)], [(2, 3), (0, 1)], [(1, 3), (0, 6)]]
print(dijkstra(graph, 2))                       # [4, 3, 0]
print(floyd_warshall([[0, 1, 43], [1, 0, 6], [-1, -1, 0]]))
# [[0, 1, 7], [1, 0, 6], [-1, -1, 0]]
```

## Using the command line

Installing the package adds a `daakit` command. Each algorithm is a
subcommand; input is read from standard input, or from a file given with
`-i PATH` / `--input PATH` before the subcommand.

```
daakit --help
```

| Subcommand | Input |
| --- | --- |
| `selection-sort`, `insertion-sort`, `merge-sort`, `quick-sort` | n, then n integers |
| `binary-search` | n, n integers, then the key |
| `dijkstra [--source N]` | an adjacency list (see below); source defaults to 2 |
| `prim`, `kruskal` | an adjacency list |
| `floyd-warshall` | n, then an n-by-n matrix, `-1` for no edge |
| `jobs` | n, then n groups of: id deadline profit |
| `knapsack` | n, n pairs of weight and profit, then the capacity |
| `tsp` | n, then an n-by-n cost matrix |
| `subset-sum-pruned` | n and the target, then n integers |
| `subset-sum` | n, n integers, then the target |
| `n-queens` | the board size |
| `kmp` | the text, then the pattern |
| `rabin-karp [--modulus M]` | digit text, then digit pattern; modulus defaults to 13 |

An adjacency list is the number of nodes, then for each node the number of its
edges followed by a destination and a weight for each edge.

Output notes:

- `dijkstra` prints `2147483647` for a node it cannot reach.
- `prim` prints one `node parent` line per tree edge, a blank line, then the
  total weight; `kruskal` prints `source destination` lines, then the weight.
- `jobs` prints `slot id` for each job in the order considered (`-1` when it
  could not be placed), then the scheduled ids in slot order.
- `tsp` prints the cost, then the route with 1-based city numbers, such as
  `1->2->4->3->1`.
- `binary-search` prints `Found at : INDEX` or `Not Found`.
- `rabin-karp` prints `pattern found at : POS` or `spurious hit at : POS`.

For example:

```
printf '4\n0 10 15 20\n10 0 25 25\n15 25 0 30\n20 25 30 0\n' | daakit tsp
```

prints `80` and `1->2->4->3->1`.

Input that runs short, holds a non-integer where a number is expected, or is
otherwise rejected by an algorithm makes the command print an error to
standard error and exit with status 1.