# algobox

Classic algorithms and data structures, together with a handful of small
interactive console programs. Pure Python, with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algobox.disjoint_set` | `DisjointSet`: union–find over `0 .. n-1` with path compression and union by rank (`find`, `union`, `connected`, `size_of`) |
| `algobox.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, `Node`, and `has_cycle` (tortoise and hare) |
| `algobox.containers` | `IntVector`, a vector that doubles its capacity, and `BoundedStack`, which raises `OverflowError` when full |
| `algobox.sorting` | `heap_sort`, `insertion_sort`; both return a new sorted list |
| `algobox.searching` | `jump_search`, `binary_search`; both return an index or `None` |
| `algobox.shortest_paths` | `dijkstra_matrix`, `dijkstra`, `build_undirected_adjacency`, `bellman_ford`, `floyd_warshall`, `NegativeCycleError` |
| `algobox.spanning_trees` | `kruskal_mst`, `prim_mst`, `Edge` |
| `algobox.traversal` | `UndirectedGraph` with `bfs` and `dfs`, `has_directed_cycle`, `topological_sort` |
| `algobox.number_theory` | `is_prime`, `sieve`, `gcd`, `factorial_iterative`, `factorial_recursive`, `is_armstrong`, `is_harshad`, `is_perfect`, `is_palindrome_number`, `reverse_number`, `swap` |
| `algobox.nqueens` | `NQueensSolver` (`solutions`, `first_solution`, `count_solutions`) for boards up to 20, and `format_board` |
| `algobox.sudoku` | `solve_sudoku`, `is_safe`, `format_board` |
| `algobox.maze` | `generate_maze`, `solve_maze`, `format_maze` |
| `algobox.spellcheck` | `spellcheck`, `devowel` |
| `algobox.knapsack` | `fractional_knapsack`, `Item` |
| `algobox.matrices` | `add_matrices`, `multiply_matrices`, `format_matrix` |
| `algobox.patterns` | `hexagon` |
| `algobox.tictactoe` | `Board` for a two-player game |
| `algobox.guessing` | `GuessingGame`, `Feedback` |
| `algobox.rps` | `Choice`, `Outcome`, `decide` |
| `algobox.records` | `RecordStore` of `Record` entries, saved to and loaded from a tab-separated file |
| `algobox.todo` | `TodoList` |
| `algobox.report` | `Student`, `grade_for`, `format_report` |
| `algobox.sample_file` | `write_sample`, `read_back` |

## Examples

```python
from algobox.disjoint_set import DisjointSet
from algobox.number_theory import gcd, is_prime
from algobox.sorting import heap_sort

sets = DisjointSet(5)
sets.union(0, 1)
sets.union(1, 2)
sets.connected(0, 2)   # True
sets.size_of(2)        # 3

heap_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]
gcd(12, 18)                        # 6
is_prime(29)                       # True
```

```python
from algobox.nqueens import NQueensSolver, format_board

solver = NQueensSolver(8)
solver.count_solutions()                   # 92
print(format_board(solver.first_solution()))
```

### Graphs

Graph functions work on plain Python values:

- `dijkstra_matrix(graph, source)` takes a square adjacency matrix in which a
  zero entry means "no edge"; unreachable vertices get `math.inf`.
- `dijkstra(adjacency, source)` takes a mapping from each node to
  `(neighbour, weight)` pairs and returns a dict of distances. Negative weights
  raise `ValueError`. `build_undirected_adjacency(num_nodes, edges)` builds such
  a mapping for nodes `1 .. num_nodes` from `(u, v, weight)` triples.
- `bellman_ford(num_vertices, edges, source)` takes directed
  `(u, v, weight)` triples and raises `NegativeCycleError` (a `ValueError`)
  when a negative-weight cycle is reachable from the source.
- `floyd_warshall(matrix)` returns all-pairs distances; `math.inf` marks a
  missing edge.
- `kruskal_mst(num_vertices, edges)` accepts `Edge` objects or triples and
  returns the chosen edges, lightest first. `prim_mst(matrix)` returns one
  `Edge(parent, v, weight)` per vertex `v >= 1` and raises `ValueError` for a
  disconnected graph.
- `has_directed_cycle` and `topological_sort` take a vertex count and
  `(u, v)` pairs.

### Puzzles

`solve_sudoku(board)` returns a solved copy of a 9 x 9 board with zeros for
empty cells and raises `ValueError` when there is no solution.
`generate_maze(rows, cols, rng=None)` carves a maze of `#` walls with an
entrance at `(0, 1)` and an exit at `(rows-1, cols-2)`; pass a
`random.Random` for repeatable output. `solve_maze(grid)` returns a copy with
the path marked by `.`, or raises `ValueError`.

## Console programs

Installing the package provides these commands:

| Command | Program |
| --- | --- |
| `algobox-dll` | menu-driven doubly linked list |
| `algobox-numbers` | one number check per run: `prime`, `sieve`, `armstrong`, `palindrome`, `reverse`, `factorial`, `harshad`, `perfect`, `gcd A B`, `swap [A B]` |
| `algobox-tictactoe` | two-player tic-tac-toe |
| `algobox-guess` | guess a number between 1 and 100 (`--seed` fixes the secret) |
| `algobox-rps` | one round of rock, paper, scissors against the computer (`--seed` fixes its hand) |
| `algobox-records` | small record manager kept in `db.txt` (`--file` chooses another file) |
| `algobox-todo` | to-do list |
| `algobox-report` | reads students' marks and prints a grade report |
| `algobox-sample-file` | writes `sample_output.txt` (or a given filename) and prints it back |

For example:

```
algobox-numbers prime 29
algobox-numbers sieve 50
algobox-numbers gcd 12 18
```

## What it does not do

- The to-do list, the doubly linked list menu and the student report keep
  their data in memory only; nothing is saved between runs.
- The record manager writes its file only when you choose Save or Exit.
- Tic-tac-toe is for two people at one keyboard; there is no computer player.