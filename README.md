# algokit

A compact collection of classic algorithms and data structures in plain Python,
with no runtime dependencies.

## Installation

```
pip install algokit
```

## What is inside

- `algokit.sorting`: `merge_sort`, `bubble_sort`, `selection_sort`, and for
  non-negative integers `counting_sort` and `radix_sort` (negative values raise
  `ValueError`). Each returns a new sorted list.
- `algokit.linked_list`: a singly linked `ListNode` with `from_values`, `to_values`,
  `reverse_list` and `reverse_list_recursive`; and a doubly linked `LinkedList`
  with `push_front`, `append`, `find` (1-based location), `remove_at`, `remove`
  and `middle` (the second of the two middle values for an even length).
- `algokit.stack`: a bounded `Stack` with `push`, `pop`, `peek(position)` (top is 1),
  `top`, `bottom`, `is_empty` and `is_full`; it raises `StackOverflow` and
  `StackUnderflow`.
- `algokit.misc`: `factorial`, `complement` (bit flip below the highest set bit),
  `subsets_with_dup`, `trapped_water`, `TreeNode` and `preorder`, `two_sum`,
  `swap_first_letters`.
- `algokit.traversal`: `bfs`, `dfs` (both from node 0), `adjacency_rows`,
  `topo_sort_dfs`, `topo_sort_kahn`, `find_order`, `count_strongly_connected`.
- `algokit.cycles`: `has_directed_cycle`, `has_directed_cycle_kahn`,
  `has_directed_cycle_colored`, `has_undirected_cycle`, `has_undirected_cycle_bfs`,
  `can_finish`, `can_finish_kahn`.
- `algokit.coloring`: `is_bipartite`, `possible_bipartition`.
- `algokit.shortest_paths`: `dijkstra`, `dijkstra_matrix`, `bellman_ford`,
  `has_negative_cycle`, `bfs_distances`, `spfa`, `dag_shortest_paths`, with the
  `ShortestPaths` result (distances and parents) and `NegativeCycleError`.
- `algokit.routing`: `floyd_warshall`, `network_delay_time`, `find_cheapest_price`,
  `find_the_city`.
- `algokit.spanning`: `DisjointSet` (`find`, `union`), `Edge`, `has_cycle`, `kruskal`,
  `prim`, `mst_weight_kruskal`, `mst_weight_prim`.
- `algokit.grid_fill`: `flood_fill`, `flood_fill_bfs`, `num_islands`,
  `solve_surrounded`, `num_enclaves`, `closed_island`, `max_area_of_island`.
- `algokit.grid_distance`: `update_matrix`, `update_matrix_dp`, `max_distance`,
  `oranges_rotting`, `shortest_path_binary_matrix`, `color_border`.
- `algokit.union_find`: `find_circle_num`, `find_circle_num_dfs`,
  `find_redundant_connection`, `remove_stones`, `make_connected`,
  `make_connected_dfs`, `equations_possible`, `accounts_merge`.
- `algokit.graph_problems`: `euler_kind` (returning an `EulerKind`), `Employee` and
  `get_importance`, `find_judge`, `eventual_safe_nodes`, `num_of_minutes`,
  `can_visit_all_rooms`, `find_path`.
- `algokit.currency`: `Currency`, `convert` and an interactive converter.

## Conventions

- Graphs are adjacency lists: `adj[u]` lists the neighbours of node `u`, and the
  nodes are `0 .. len(adj) - 1`. In weighted lists each entry is a
  `(neighbour, weight)` pair.
- Unreachable nodes have distance `math.inf`.
- `dijkstra_matrix` and `prim` take weight matrices where `0` means no edge;
  `floyd_warshall` takes one where `-1` means no edge.
- Grid functions work on a copy of their input and return new grids.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.traversal import bfs
from algokit.shortest_paths import dijkstra

merge_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
bfs([[1, 2], [3], [], []])               # [0, 1, 2, 3]
dijkstra([[(1, 4), (2, 1)], [], [(1, 2)]], 0)   # [0, 3, 1]
```

```python
from algokit.stack import Stack

stack = Stack(5)
stack.push(1)
stack.push(2)
stack.top()   # 2
stack.pop()   # 2
```

```python
from algokit.currency import convert

convert(10, "a", "b")   # dollars to rupees at the built-in fixed rate
```

## Currency converter

The package installs an interactive converter between dollars (`a`), rupees (`b`),
euros (`c`) and pounds (`d`) that reads from standard input:

```
algokit-currency
```

The rates are fixed in the package; it does not fetch live exchange rates.

## Running the tests

```
pip install -e ".[test]"
pytest
```