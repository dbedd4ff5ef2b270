"""Single-source shortest paths.

Weighted graphs are adjacency lists where ``adj[u]`` holds ``(v, weight)``
pairs; unweighted graphs hold plain node numbers. Unreachable nodes have
distance ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from algokit.traversal import Adjacency, topo_sort_dfs

WeightedAdjacency = Sequence[Sequence[Sequence[int]]]


class NegativeCycleError(ValueError):
    """Raised when a graph has a cycle of negative total weight."""


@dataclass
class ShortestPaths:
    """Distances from a source node and each node's predecessor on its path."""

    distances: list[float]
    parents: list[int | None]


def dijkstra(adj: WeightedAdjacency, source: int) -> list[float]:
    """Return distances from ``source`` using Dijkstra's algorithm with a heap."""
    distances = [math.inf] * len(adj)
    distances[source] = 0
    done = [False] * len(adj)
    heap = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        for nxt, weight in adj[node]:
            if not done[nxt] and dist + weight < distances[nxt]:
                distances[nxt] = dist + weight
                heapq.heappush(heap, (distances[nxt], nxt))
    return distances


def dijkstra_matrix(matrix: Sequence[Sequence[int]]) -> ShortestPaths:
    """Return paths from node 0 in a weight matrix where 0 means no edge."""
    n = len(matrix)
    distances = [math.inf] * n
    parents: list[int | None] = [None] * n
    done = [False] * n
    if n:
        distances[0] = 0
    for _ in range(n - 1):
        candidates = [node for node in range(n) if not done[node] and distances[node] < math.inf]
        if not candidates:
            break
        node = min(candidates, key=distances.__getitem__)
        done[node] = True
        for nxt, weight in enumerate(matrix[node]):
            if not done[nxt] and weight != 0 and distances[node] + weight < distances[nxt]:
                distances[nxt] = distances[node] + weight
                parents[nxt] = node
    return ShortestPaths(distances, parents)


def bellman_ford(n: int, edges: Iterable[Sequence[int]]) -> ShortestPaths:
    """Return paths from node 0 over directed ``(src, dst, weight)`` edges.

    Raises :class:`NegativeCycleError` if a negative cycle is reachable.
    """
    edge_list = [tuple(edge) for edge in edges]
    distances = [math.inf] * n
    parents: list[int | None] = [None] * n
    if n:
        distances[0] = 0
    for _ in range(n - 1):
        updated = False
        for src, dst, weight in edge_list:
            if distances[src] != math.inf and distances[src] + weight < distances[dst]:
                distances[dst] = distances[src] + weight
                parents[dst] = src
                updated = True
        if not updated:
            break
    for src, dst, weight in edge_list:
        if distances[src] != math.inf and distances[src] + weight < distances[dst]:
            raise NegativeCycleError("the graph has a negative edge weight cycle")
    return ShortestPaths(distances, parents)


def has_negative_cycle(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return whether a negative cycle is reachable from node 0."""
    try:
        bellman_ford(n, edges)
    except NegativeCycleError:
        return True
    return False


def bfs_distances(adj: Adjacency, source: int) -> list[float]:
    """Return edge counts from ``source`` in an unweighted graph."""
    distances = [math.inf] * len(adj)
    distances[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if distances[node] + 1 < distances[nxt]:
                distances[nxt] = distances[node] + 1
                queue.append(nxt)
    return distances


def spfa(adj: WeightedAdjacency, source: int) -> list[float]:
    """Return distances from ``source`` with the queue-based Bellman-Ford variant.

    Raises :class:`NegativeCycleError` if a negative cycle is reachable.
    """
    n = len(adj)
    distances = [math.inf] * n
    distances[source] = 0
    in_queue = [False] * n
    relaxed = [0] * n
    queue = deque([source])
    in_queue[source] = True
    while queue:
        node = queue.popleft()
        in_queue[node] = False
        for nxt, weight in adj[node]:
            if distances[node] + weight < distances[nxt]:
                distances[nxt] = distances[node] + weight
                relaxed[nxt] += 1
                if relaxed[nxt] > n:
                    raise NegativeCycleError("the graph has a negative edge weight cycle")
                if not in_queue[nxt]:
                    in_queue[nxt] = True
                    queue.append(nxt)
    return distances


def dag_shortest_paths(adj: WeightedAdjacency, source: int) -> list[float]:
    """Return distances from ``source`` in a weighted DAG, relaxing in topological order."""
    order = topo_sort_dfs([[nxt for nxt, _ in edges] for edges in adj])
    distances = [math.inf] * len(adj)
    distances[source] = 0
    for node in order:
        if distances[node] == math.inf:
            continue
        for nxt, weight in adj[node]:
            if distances[node] + weight < distances[nxt]:
                distances[nxt] = distances[node] + weight
    return distances