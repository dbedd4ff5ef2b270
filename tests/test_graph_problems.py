import pytest

from algokit.graph_problems import (
    Employee,
    EulerKind,
    can_visit_all_rooms,
    eventual_safe_nodes,
    euler_kind,
    find_judge,
    find_path,
    get_importance,
    num_of_minutes,
)


def _undirected(n, edges):
    adj = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def test_euler_triangle_is_circuit():
    assert euler_kind(_undirected(3, [(0, 1), (1, 2), (2, 0)])) is EulerKind.CIRCUIT


def test_euler_line_is_path():
    assert euler_kind(_undirected(3, [(0, 1), (1, 2)])) is EulerKind.PATH


def test_euler_star_is_not_eulerian():
    adj = _undirected(4, [(0, 1), (0, 2), (0, 3)])
    assert euler_kind(adj) is EulerKind.NOT_EULERIAN


def test_euler_no_edges_is_circuit():
    assert euler_kind([[], [], []]) is EulerKind.CIRCUIT


def test_euler_disconnected_edges_not_eulerian():
    adj = _undirected(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
    assert euler_kind(adj) is EulerKind.NOT_EULERIAN


def test_euler_isolated_nodes_ignored():
    adj = _undirected(5, [(0, 1), (1, 2), (2, 0)])
    assert euler_kind(adj) is EulerKind.CIRCUIT


def _staff():
    return [
        Employee(1, 5, [2, 3]),
        Employee(2, 3, [4]),
        Employee(3, 3),
        Employee(4, 1),
    ]


def test_importance_of_top_is_total():
    staff = _staff()
    assert get_importance(staff, 1) == sum(e.importance for e in staff)


def test_importance_of_leaf_is_own():
    staff = _staff()
    assert get_importance(staff, 3) == staff[2].importance


def test_importance_of_middle_manager():
    staff = _staff()
    assert get_importance(staff, 2) == staff[1].importance + staff[3].importance


def test_importance_unknown_id():
    with pytest.raises(KeyError):
        get_importance(_staff(), 99)


def test_judge_found():
    assert find_judge(2, [[1, 2]]) == 2


def test_judge_trusts_someone():
    assert find_judge(3, [[1, 3], [2, 3], [3, 1]]) == -1


def test_judge_not_trusted_by_all():
    assert find_judge(3, [[1, 2]]) == -1


def test_safe_nodes_example():
    graph = [[1, 2], [2, 3], [5], [0], [5], [], []]
    assert eventual_safe_nodes(graph) == [2, 4, 5, 6]


def test_safe_nodes_all_in_dag():
    graph = [[1, 2], [2], []]
    assert eventual_safe_nodes(graph) == list(range(len(graph)))


def test_safe_nodes_none_in_cycle():
    assert eventual_safe_nodes([[1], [2], [0]]) == []


def test_minutes_single_employee():
    assert num_of_minutes(1, 0, [-1], [0]) == 0


def test_minutes_flat_team():
    inform_time = [0, 0, 1, 0, 0, 0]
    assert num_of_minutes(6, 2, [2, 2, -1, 2, 2, 2], inform_time) == inform_time[2]


def test_minutes_chain_adds_up():
    inform_time = [2, 3, 4, 0]
    assert num_of_minutes(4, 0, [-1, 0, 1, 2], inform_time) == sum(inform_time)


def test_minutes_takes_slowest_branch():
    manager = [-1, 0, 0, 1, 2]
    inform_time = [1, 5, 2, 0, 0]
    assert num_of_minutes(5, 0, manager, inform_time) == inform_time[0] + inform_time[1]


def test_rooms_all_reachable():
    assert can_visit_all_rooms([[1], [2], [3], []]) is True


def test_rooms_one_locked():
    assert can_visit_all_rooms([[1, 3], [3, 0, 1], [2], [0]]) is False


def test_find_path_example():
    maze = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]
    assert find_path(maze) == ["DDRDRR", "DRDDRR"]


def test_find_path_blocked_start():
    assert find_path([[0, 1], [1, 1]]) == []


def test_find_path_blocked_end():
    assert find_path([[1, 1], [1, 0]]) == []


def test_find_path_single_cell():
    assert find_path([[1]]) == [""]


def test_find_path_routes_are_valid():
    maze = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    steps = {"D": (1, 0), "L": (0, -1), "R": (0, 1), "U": (-1, 0)}
    paths = find_path(maze)
    assert len(paths) == len(set(paths))
    for path in paths:
        cell = (0, 0)
        visited = {cell}
        for move in path:
            di, dj = steps[move]
            cell = (cell[0] + di, cell[1] + dj)
            assert 0 <= cell[0] < 3 and 0 <= cell[1] < 3
            assert maze[cell[0]][cell[1]] == 1
            assert cell not in visited
            visited.add(cell)
        assert cell == (2, 2)
    assert "DDRR" in paths and "RRDD" in paths