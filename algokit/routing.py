"""All-pairs shortest paths and routing problems built on them.

Weight matrices mark a missing edge with ``-1``. Unreachable pairs in a
result have distance ``math.inf``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from algokit.shortest_paths import NegativeCycleError, dijkstra

NO_EDGE = -1


def _close(dist: list[list[float]]) -> None:
    """Relax every pair through every intermediate node, in place."""
    for k, via in enumerate(dist):
        for row in dist:
            through = row[k]
            if through == math.inf:
                continue
            for j, weight in enumerate(via):
                if through + weight < row[j]:
                    row[j] = through + weight


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[float]]:
    """Return all-pairs shortest distances for a weight matrix.

    ``-1`` in ``matrix`` means there is no edge. The input is left unchanged.
    Raises :class:`NegativeCycleError` if a node can reach itself at negative cost.
    """
    dist = [[math.inf if weight == NO_EDGE else weight for weight in row] for row in matrix]
    _close(dist)
    if any(row[i] < 0 for i, row in enumerate(dist)):
        raise NegativeCycleError("negative edge weight cycle")
    return dist


def network_delay_time(times: Sequence[Sequence[int]], n: int, k: int) -> int:
    """Return how long a signal from node ``k`` takes to reach all nodes ``1 .. n``.

    Each entry of ``times`` is a directed ``(u, v, w)`` edge. Returns ``-1``
    if some node is never reached.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in times:
        adj[u].append((v, w))
    distances = dijkstra(adj, k)
    worst = max(distances[1:], default=0)
    return -1 if worst == math.inf else worst


def find_cheapest_price(
    n: int, flights: Sequence[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Return the cheapest price from ``src`` to ``dst`` with at most ``k`` stops.

    Each flight is ``(from, to, price)``. Returns ``-1`` if no such route exists.
    """
    prices = [math.inf] * n
    prices[src] = 0
    for _ in range(k + 1):
        updated = prices.copy()
        for u, v, price in flights:
            if prices[u] + price < updated[v]:
                updated[v] = prices[u] + price
        prices = updated
    return -1 if prices[dst] == math.inf else prices[dst]


def find_the_city(n: int, edges: Sequence[Sequence[int]], distance_threshold: int) -> int:
    """Return the city reaching the fewest others within ``distance_threshold``.

    Edges are undirected ``(u, v, w)``. Ties go to the city with the largest
    number; ``-1`` is returned when there are no cities.
    """
    dist = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for u, v, w in edges:
        dist[u][v] = dist[v][u] = w
    _close(dist)
    counts = [
        sum(1 for j, d in enumerate(row) if j != i and d <= distance_threshold)
        for i, row in enumerate(dist)
    ]
    if not counts:
        return -1
    return max(range(n), key=lambda city: (-counts[city], city))