import itertools

import pytest

from algokit.cycles import (
    can_finish,
    can_finish_kahn,
    has_directed_cycle,
    has_directed_cycle_colored,
    has_directed_cycle_kahn,
    has_undirected_cycle,
    has_undirected_cycle_bfs,
)


def _undirected(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


@pytest.mark.parametrize(
    "adj",
    [[[1], [2], [0]], [[0]], [[1], [2], [3], [1]], [[], [2], [1]]],
)
def test_directed_cycles_found(adj):
    assert has_directed_cycle(adj) is True
    assert has_directed_cycle_kahn(adj) is True
    assert has_directed_cycle_colored(adj) is True


@pytest.mark.parametrize(
    "adj",
    [[[1, 2], [3], [3], []], [[], [], []], [], [[1], [], [1]]],
)
def test_directed_acyclic_graphs(adj):
    assert has_directed_cycle(adj) is False
    assert has_directed_cycle_kahn(adj) is False
    assert has_directed_cycle_colored(adj) is False


def test_directed_detectors_agree_on_all_small_graphs():
    pairs = [(u, v) for u in range(3) for v in range(3)]
    for bits in itertools.product([0, 1], repeat=len(pairs)):
        adj = [[] for _ in range(3)]
        for (u, v), bit in zip(pairs, bits):
            if bit:
                adj[u].append(v)
        first = has_directed_cycle(adj)
        assert has_directed_cycle_kahn(adj) == first
        assert has_directed_cycle_colored(adj) == first


def test_undirected_triangle_is_cyclic():
    adj = _undirected(3, [(0, 1), (1, 2), (2, 0)])
    assert has_undirected_cycle(adj) is True
    assert has_undirected_cycle_bfs(adj) is True


def test_undirected_forest_is_acyclic():
    adj = _undirected(6, [(0, 1), (1, 2), (1, 3), (4, 5)])
    assert has_undirected_cycle(adj) is False
    assert has_undirected_cycle_bfs(adj) is False


def test_undirected_cycle_in_second_component():
    adj = _undirected(5, [(0, 1), (2, 3), (3, 4), (4, 2)])
    assert has_undirected_cycle(adj) is True
    assert has_undirected_cycle_bfs(adj) is True


def test_undirected_matches_edge_count_rule():
    pairs = list(itertools.combinations(range(4), 2))
    for bits in itertools.product([0, 1], repeat=len(pairs)):
        edges = [pair for pair, bit in zip(pairs, bits) if bit]
        parent = list(range(4))

        def root(x):
            while parent[x] != x:
                x = parent[x]
            return x

        for u, v in edges:
            parent[root(u)] = root(v)
        components = len({root(x) for x in range(4)})
        expected = len(edges) > 4 - components
        adj = _undirected(4, edges)
        assert has_undirected_cycle(adj) is expected
        assert has_undirected_cycle_bfs(adj) is expected


def test_courses_in_chain_can_finish():
    assert can_finish(2, [[1, 0]]) is True
    assert can_finish(4, [[1, 0], [2, 1], [3, 2]]) is True
    assert can_finish_kahn(2, [[1, 0]]) is True
    assert can_finish_kahn(4, [[1, 0], [2, 1], [3, 2]]) is True


def test_mutual_prerequisites_block():
    assert can_finish(2, [[1, 0], [0, 1]]) is False
    assert can_finish_kahn(2, [[1, 0], [0, 1]]) is False


def test_self_prerequisite_blocks():
    assert can_finish(1, [[0, 0]]) is False
    assert can_finish_kahn(1, [[0, 0]]) is False


def test_no_prerequisites_can_finish():
    assert can_finish(3, []) is True
    assert can_finish_kahn(3, []) is True