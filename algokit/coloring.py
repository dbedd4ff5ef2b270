"""Two-colouring of graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _two_colourable(adj: Sequence[Sequence[int]], nodes: range) -> bool:
    colour: dict[int, int] = {}
    for start in nodes:
        if start in colour:
            continue
        colour[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if nxt not in colour:
                    colour[nxt] = 1 - colour[node]
                    queue.append(nxt)
                elif colour[nxt] == colour[node]:
                    return False
    return True


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Return whether an undirected graph given as adjacency lists is bipartite."""
    return _two_colourable(graph, range(len(graph)))


def possible_bipartition(n: int, dislikes: Sequence[Sequence[int]]) -> bool:
    """Return whether people ``1 .. n`` split into two groups with no dislike inside one."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in dislikes:
        adj[a].append(b)
        adj[b].append(a)
    return _two_colourable(adj, range(1, n + 1))