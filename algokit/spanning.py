"""Disjoint sets and minimum spanning trees."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple


class Edge(NamedTuple):
    """A weighted edge between two nodes."""

    source: int
    target: int
    weight: int


class DisjointSet:
    """Union-find over ``0 .. size - 1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_b] < self._rank[root_a]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_a] = root_b
            self._rank[root_b] += 1
        return True


def has_cycle(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return whether undirected ``(u, v)`` edges over ``n`` nodes form a cycle."""
    sets = DisjointSet(n)
    return any(not sets.union(a, b) for a, b in edges)


def kruskal(n: int, edges: Iterable[Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, in the order they were taken.

    Edges are ``(source, target, weight)`` triples or :class:`Edge` values.
    """
    ordered = sorted((Edge(*edge) for edge in edges), key=lambda edge: edge.weight)
    sets = DisjointSet(n)
    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) >= n - 1:
            break
        if sets.union(edge.source, edge.target):
            tree.append(edge)
    return tree


def prim(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return a minimum spanning tree of a weight matrix where 0 means no edge.

    Edge ``i - 1`` of the result joins node ``i`` to its parent in the tree.
    Raises ValueError if the graph is not connected.
    """
    n = len(matrix)
    if n == 0:
        return []
    dist = [math.inf] * n
    dist[0] = 0
    parent: list[int] = [0] * n
    done = [False] * n
    for _ in range(n):
        candidates = [node for node in range(n) if not done[node] and dist[node] < math.inf]
        if not candidates:
            raise ValueError("the graph is not connected")
        node = min(candidates, key=dist.__getitem__)
        done[node] = True
        for nxt, weight in enumerate(matrix[node]):
            if weight != 0 and not done[nxt] and weight < dist[nxt]:
                dist[nxt] = weight
                parent[nxt] = node
    return [Edge(parent[node], node, dist[node]) for node in range(1, n)]


def mst_weight_kruskal(adj: Sequence[Sequence[Sequence[int]]]) -> int:
    """Return the minimum spanning tree weight of ``adj[u] = [(v, w), ...]``.

    Raises ValueError if the graph is not connected.
    """
    n = len(adj)
    edges = [(u, v, w) for u, neighbours in enumerate(adj) for v, w in neighbours]
    tree = kruskal(n, edges)
    if len(tree) != max(n - 1, 0):
        raise ValueError("the graph is not connected")
    return sum(edge.weight for edge in tree)


def mst_weight_prim(adj: Sequence[Sequence[Sequence[int]]]) -> int:
    """Return the minimum spanning tree weight using Prim's algorithm with a heap.

    Raises ValueError if the graph is not connected.
    """
    n = len(adj)
    if n == 0:
        return 0
    done = [False] * n
    heap = [(0, 0)]
    total = 0
    reached = 0
    while heap and reached < n:
        weight, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        total += weight
        reached += 1
        for nxt, w in adj[node]:
            if not done[nxt]:
                heapq.heappush(heap, (w, nxt))
    if reached < n:
        raise ValueError("the graph is not connected")
    return total