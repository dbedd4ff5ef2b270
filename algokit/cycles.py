"""Cycle detection in directed and undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from enum import Enum

from algokit.traversal import Adjacency, topo_sort_kahn


def has_directed_cycle(adj: Adjacency) -> bool:
    """Return whether a directed graph has a cycle, tracking the current path."""
    visited = [False] * len(adj)
    on_path = [False] * len(adj)
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if on_path[nxt]:
                    return True
                if not visited[nxt]:
                    visited[nxt] = on_path[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                on_path[node] = False
                stack.pop()
    return False


def has_directed_cycle_kahn(adj: Adjacency) -> bool:
    """Return whether a directed graph has a cycle, using Kahn's algorithm."""
    return len(topo_sort_kahn(adj)) != len(adj)


class _State(Enum):
    UNSEEN = 0
    ACTIVE = 1
    DONE = 2


def has_directed_cycle_colored(adj: Adjacency) -> bool:
    """Return whether a directed graph has a cycle, using three node states."""
    state = [_State.UNSEEN] * len(adj)
    for start in range(len(adj)):
        if state[start] is not _State.UNSEEN:
            continue
        state[start] = _State.ACTIVE
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if state[nxt] is _State.ACTIVE:
                    return True
                if state[nxt] is _State.UNSEEN:
                    state[nxt] = _State.ACTIVE
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                state[node] = _State.DONE
                stack.pop()
    return False


def has_undirected_cycle(adj: Adjacency) -> bool:
    """Return whether an undirected graph has a cycle, using depth-first search."""
    visited = [False] * len(adj)
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, node, iter(adj[nxt])))
                    break
                if nxt != parent:
                    return True
            else:
                stack.pop()
    return False


def has_undirected_cycle_bfs(adj: Adjacency) -> bool:
    """Return whether an undirected graph has a cycle, using breadth-first search."""
    visited = [False] * len(adj)
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([(start, -1)])
        while queue:
            node, parent = queue.popleft()
            for nxt in adj[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    queue.append((nxt, node))
                elif nxt != parent:
                    return True
    return False


def _course_graph(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        adj[required].append(course)
    return adj


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Return whether every course can be taken; ``[a, b]`` means ``b`` before ``a``."""
    return not has_directed_cycle(_course_graph(num_courses, prerequisites))


def can_finish_kahn(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Return whether every course can be taken, using Kahn's algorithm."""
    return not has_directed_cycle_kahn(_course_graph(num_courses, prerequisites))