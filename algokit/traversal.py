"""Traversals, topological orders and strongly connected components.

Graphs are adjacency lists: ``adj[u]`` lists the nodes ``u`` has edges to,
and the nodes are ``0 .. len(adj) - 1``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Adjacency = Sequence[Sequence[int]]


def _preorder(adj: Adjacency, start: int, seen: list[bool]) -> Iterator[int]:
    """Yield nodes reachable from ``start`` in depth-first preorder."""
    stack = [start]
    while stack:
        node = stack.pop()
        if seen[node]:
            continue
        seen[node] = True
        yield node
        # Reversed so the first neighbour is explored first.
        stack.extend(reversed(adj[node]))


def _postorder(adj: Adjacency, start: int, seen: list[bool]) -> Iterator[int]:
    """Yield nodes reachable from ``start`` once all their descendants are done."""
    seen[start] = True
    stack = [(start, iter(adj[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if not seen[nxt]:
                seen[nxt] = True
                stack.append((nxt, iter(adj[nxt])))
                break
        else:
            stack.pop()
            yield node


def _finish_order(adj: Adjacency) -> list[int]:
    seen = [False] * len(adj)
    order: list[int] = []
    for node in range(len(adj)):
        if not seen[node]:
            order.extend(_postorder(adj, node, seen))
    return order


def bfs(adj: Adjacency) -> list[int]:
    """Return the breadth-first order of the nodes reachable from node 0."""
    if not adj:
        return []
    seen = [False] * len(adj)
    seen[0] = True
    order = []
    queue = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            if not seen[nxt]:
                seen[nxt] = True
                queue.append(nxt)
    return order


def dfs(adj: Adjacency) -> list[int]:
    """Return the depth-first preorder of the nodes reachable from node 0."""
    if not adj:
        return []
    return list(_preorder(adj, 0, [False] * len(adj)))


def adjacency_rows(adj: Adjacency) -> list[list[int]]:
    """Return one row per node: the node followed by its neighbours."""
    return [[node, *neighbours] for node, neighbours in enumerate(adj)]


def topo_sort_dfs(adj: Adjacency) -> list[int]:
    """Return a topological order of a DAG using depth-first finishing times."""
    return _finish_order(adj)[::-1]


def topo_sort_kahn(adj: Adjacency) -> list[int]:
    """Return a topological order using Kahn's algorithm.

    Nodes on or behind a cycle never reach in-degree zero and are left out.
    """
    indegree = [0] * len(adj)
    for neighbours in adj:
        for nxt in neighbours:
            indegree[nxt] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order


def find_order(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> list[int]:
    """Return an order to take the courses in, or an empty list if none exists.

    Each prerequisite ``[a, b]`` means course ``b`` must come before ``a``.
    """
    adj: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        adj[required].append(course)
    order = topo_sort_kahn(adj)
    return order if len(order) == num_courses else []


def count_strongly_connected(adj: Adjacency) -> int:
    """Return the number of strongly connected components (Kosaraju)."""
    finish = _finish_order(adj)
    reverse: list[list[int]] = [[] for _ in adj]
    for node, neighbours in enumerate(adj):
        for nxt in neighbours:
            reverse[nxt].append(node)
    seen = [False] * len(adj)
    count = 0
    for node in reversed(finish):
        if not seen[node]:
            count += 1
            deque(_preorder(reverse, node, seen), maxlen=0)
    return count