"""Assorted graph problems solved with depth- and breadth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum


class EulerKind(Enum):
    """How an undirected graph can be traversed edge by edge."""

    NOT_EULERIAN = 0
    PATH = 1
    CIRCUIT = 2


def euler_kind(adj: Sequence[Sequence[int]]) -> EulerKind:
    """Classify an undirected graph as having an Euler circuit, an Euler path or neither."""
    with_edges = [node for node, neighbours in enumerate(adj) if neighbours]
    if not with_edges:
        return EulerKind.CIRCUIT
    seen = {with_edges[0]}
    stack = [with_edges[0]]
    while stack:
        node = stack.pop()
        for nxt in adj[node]:
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    if any(node not in seen for node in with_edges):
        return EulerKind.NOT_EULERIAN
    odd = sum(len(neighbours) % 2 for neighbours in adj)
    if odd == 0:
        return EulerKind.CIRCUIT
    if odd == 2:
        return EulerKind.PATH
    return EulerKind.NOT_EULERIAN


@dataclass
class Employee:
    """An employee with an importance value and direct subordinates' ids."""

    id: int
    importance: int
    subordinates: list[int] = field(default_factory=list)


def get_importance(employees: Iterable[Employee], employee_id: int) -> int:
    """Return the total importance of an employee and everyone under them."""
    by_id = {employee.id: employee for employee in employees}
    total = 0
    pending = [employee_id]
    while pending:
        employee = by_id[pending.pop()]
        total += employee.importance
        pending.extend(employee.subordinates)
    return total


def find_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Return the person ``1 .. n`` trusted by all others and trusting no one, or ``-1``."""
    trusted_by = [0] * (n + 1)
    trusts = [0] * (n + 1)
    for a, b in trust:
        trusts[a] += 1
        trusted_by[b] += 1
    for person in range(1, n + 1):
        if trusts[person] == 0 and trusted_by[person] == n - 1:
            return person
    return -1


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the nodes from which every path ends at a terminal node."""
    n = len(graph)
    remaining = [len(neighbours) for neighbours in graph]
    incoming: list[list[int]] = [[] for _ in range(n)]
    for node, neighbours in enumerate(graph):
        for nxt in neighbours:
            incoming[nxt].append(node)
    queue = deque(node for node in range(n) if remaining[node] == 0)
    safe = [False] * n
    while queue:
        node = queue.popleft()
        safe[node] = True
        for prev in incoming[node]:
            remaining[prev] -= 1
            if remaining[prev] == 0:
                queue.append(prev)
    return [node for node in range(n) if safe[node]]


def num_of_minutes(
    n: int, head_id: int, manager: Sequence[int], inform_time: Sequence[int]
) -> int:
    """Return the minutes needed for news from the head to reach every employee."""
    reports: list[list[int]] = [[] for _ in range(n)]
    for employee, boss in enumerate(manager):
        if boss != -1:
            reports[boss].append(employee)
    longest = 0
    pending = [(head_id, 0)]
    while pending:
        employee, elapsed = pending.pop()
        longest = max(longest, elapsed)
        passed_on = elapsed + inform_time[employee]
        pending.extend((report, passed_on) for report in reports[employee])
    return longest


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Return whether every room is reachable from room 0 using the keys found."""
    if not rooms:
        return True
    seen = {0}
    stack = [0]
    while stack:
        for key in rooms[stack.pop()]:
            if key not in seen:
                seen.add(key)
                stack.append(key)
    return len(seen) == len(rooms)


_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def find_path(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every route through a square maze of open ``1`` cells, corner to corner.

    Routes are strings of ``D``, ``L``, ``R`` and ``U`` moves, listed in the
    order they are found trying those moves in that order; no route visits
    a cell twice.
    """
    n = len(maze)
    if n == 0 or maze[0][0] != 1:
        return []
    paths: list[str] = []
    on_path = {(0, 0)}
    moves: list[str] = []

    def walk(i: int, j: int) -> None:
        if (i, j) == (n - 1, n - 1):
            paths.append("".join(moves))
            return
        for step, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if 0 <= ni < n and 0 <= nj < n and maze[ni][nj] == 1 and (ni, nj) not in on_path:
                on_path.add((ni, nj))
                moves.append(step)
                walk(ni, nj)
                moves.pop()
                on_path.discard((ni, nj))

    walk(0, 0)
    return paths