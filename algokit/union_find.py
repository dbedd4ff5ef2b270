"""Connectivity problems solved with disjoint sets or depth-first search."""

from __future__ import annotations

from collections.abc import Sequence

from algokit.spanning import DisjointSet


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of provinces in an adjacency matrix, using union-find."""
    n = len(is_connected)
    sets = DisjointSet(n)
    merges = sum(
        sets.union(i, j)
        for i in range(n)
        for j in range(i + 1, n)
        if is_connected[i][j]
    )
    return n - merges


def find_circle_num_dfs(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of provinces in an adjacency matrix, using depth-first search."""
    n = len(is_connected)
    seen = [False] * n
    groups = 0
    for start in range(n):
        if seen[start]:
            continue
        groups += 1
        seen[start] = True
        stack = [start]
        while stack:
            city = stack.pop()
            for other, linked in enumerate(is_connected[city]):
                if linked and not seen[other]:
                    seen[other] = True
                    stack.append(other)
    return groups


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the first edge that closes a cycle, or an empty list if none does.

    Nodes are numbered ``1 .. len(edges)``.
    """
    sets = DisjointSet(len(edges) + 1)
    for u, v in edges:
        if not sets.union(u, v):
            return [u, v]
    return []


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Return how many stones can be removed, each sharing a row or column with another."""
    sets = DisjointSet(len(stones))
    first_in_row: dict[int, int] = {}
    first_in_col: dict[int, int] = {}
    merges = 0
    for index, (x, y) in enumerate(stones):
        if x in first_in_row:
            merges += sets.union(index, first_in_row[x])
        else:
            first_in_row[x] = index
        if y in first_in_col:
            merges += sets.union(index, first_in_col[y])
        else:
            first_in_col[y] = index
    return merges


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Return the cables to move so all ``n`` computers connect, or ``-1`` if impossible."""
    if len(connections) < n - 1:
        return -1
    sets = DisjointSet(n)
    groups = n - sum(sets.union(a, b) for a, b in connections)
    return groups - 1


def make_connected_dfs(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Same as :func:`make_connected`, counting components with depth-first search."""
    if len(connections) < n - 1:
        return -1
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in connections:
        adj[a].append(b)
        adj[b].append(a)
    seen = [False] * n
    groups = 0
    for start in range(n):
        if seen[start]:
            continue
        groups += 1
        seen[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for nxt in adj[node]:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append(nxt)
    return groups - 1


def _parse_equation(equation: str) -> tuple[int, str, int]:
    if (
        len(equation) != 4
        or equation[1:3] not in ("==", "!=")
        or not ("a" <= equation[0] <= "z" and "a" <= equation[3] <= "z")
    ):
        raise ValueError(f"malformed equation: {equation!r}")
    return ord(equation[0]) - ord("a"), equation[1:3], ord(equation[3]) - ord("a")


def equations_possible(equations: Sequence[str]) -> bool:
    """Return whether equations such as ``"a==b"`` and ``"b!=c"`` can all hold."""
    parsed = [_parse_equation(equation) for equation in equations]
    sets = DisjointSet(26)
    for a, op, b in parsed:
        if op == "==":
            sets.union(a, b)
        elif a == b:
            return False
    return all(sets.find(a) != sets.find(b) for a, op, b in parsed if op == "!=")


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts that share an e-mail address.

    Each account is ``[name, email, ...]``. Each merged account is the name
    followed by its distinct e-mails in sorted order.
    """
    sets = DisjointSet(len(accounts))
    owner: dict[str, int] = {}
    for index, (_, *emails) in enumerate(accounts):
        for email in emails:
            if email in owner:
                sets.union(index, owner[email])
            else:
                owner[email] = index
    groups: dict[int, list[str]] = {}
    for email, index in owner.items():
        groups.setdefault(sets.find(index), []).append(email)
    return [[accounts[root][0], *sorted(emails)] for root, emails in groups.items()]