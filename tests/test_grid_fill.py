import copy

import pytest

from algokit.grid_fill import (
    closed_island,
    flood_fill,
    flood_fill_bfs,
    max_area_of_island,
    num_enclaves,
    num_islands,
    solve_surrounded,
)

BINARY_GRIDS = [
    [[1, 1, 0, 0], [1, 0, 0, 1], [0, 0, 1, 1], [1, 0, 0, 0]],
    [[0, 1, 0], [1, 0, 1], [0, 1, 0]],
    [[1]],
    [[1, 1, 1], [1, 1, 1]],
    [[0, 0, 1, 0, 1], [1, 0, 1, 1, 0], [0, 1, 0, 0, 1]],
]


def _pad(grid, value):
    width = len(grid[0]) + 2
    return [[value] * width] + [[value, *row, value] for row in grid] + [[value] * width]


def _as_chars(grid, land):
    return [["1" if cell == land else "0" for cell in row] for row in grid]


def test_flood_fill_example():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    expected = [[2, 2, 2], [2, 2, 0], [2, 0, 1]]
    assert flood_fill(image, 1, 1, 2) == expected
    assert flood_fill_bfs(image, 1, 1, 2) == expected


def test_flood_fill_leaves_input_unchanged():
    image = [[1, 1, 0], [0, 1, 1]]
    snapshot = copy.deepcopy(image)
    result = flood_fill(image, 0, 0, 5)
    assert image == snapshot
    assert result[0][0] == 5


def test_flood_fill_same_colour_returns_equal_copy():
    image = [[3, 3], [3, 4]]
    result = flood_fill(image, 0, 0, 3)
    assert result == image
    assert result is not image


@pytest.mark.parametrize("grid", BINARY_GRIDS)
def test_depth_and_breadth_fill_agree(grid):
    for i, row in enumerate(grid):
        for j, _ in enumerate(row):
            assert flood_fill(grid, i, j, 7) == flood_fill_bfs(grid, i, j, 7)


@pytest.mark.parametrize("grid", BINARY_GRIDS)
def test_flood_fill_only_changes_old_colour(grid):
    old = grid[0][0]
    result = flood_fill(grid, 0, 0, 9)
    assert result[0][0] == 9
    for before, after in zip(grid, result):
        for b, a in zip(before, after):
            assert a == b or (b == old and a == 9)


def test_flood_fill_out_of_range():
    with pytest.raises(IndexError):
        flood_fill([[1]], 1, 0, 2)
    with pytest.raises(IndexError):
        flood_fill_bfs([[1]], 0, -1, 2)


def test_num_islands_example():
    grid = [
        ["1", "1", "0", "0", "0"],
        ["1", "1", "0", "0", "0"],
        ["0", "0", "1", "0", "0"],
        ["0", "0", "0", "1", "1"],
    ]
    snapshot = copy.deepcopy(grid)
    assert num_islands(grid) == 3
    assert grid == snapshot


@pytest.mark.parametrize("size", [1, 2, 5])
def test_num_islands_diagonal_cells_are_separate(size):
    grid = [["1" if i == j else "0" for j in range(size)] for i in range(size)]
    assert num_islands(grid) == size


@pytest.mark.parametrize("grid", BINARY_GRIDS)
def test_num_islands_accepts_string_rows(grid):
    chars = _as_chars(grid, 1)
    assert num_islands(["".join(row) for row in chars]) == num_islands(chars)


def test_solve_surrounded_example():
    board = [
        ["X", "X", "X", "X"],
        ["X", "O", "O", "X"],
        ["X", "X", "O", "X"],
        ["X", "O", "X", "X"],
    ]
    expected = [
        ["X", "X", "X", "X"],
        ["X", "X", "X", "X"],
        ["X", "X", "X", "X"],
        ["X", "O", "X", "X"],
    ]
    assert solve_surrounded(board) == expected


@pytest.mark.parametrize("grid", BINARY_GRIDS)
def test_solve_surrounded_invariants(grid):
    board = [["O" if cell else "X" for cell in row] for row in grid]
    result = solve_surrounded(board)
    m, n = len(board), len(board[0])
    for i in range(m):
        for j in range(n):
            if result[i][j] == "O":
                assert board[i][j] == "O"
            on_border = i in (0, m - 1) or j in (0, n - 1)
            if on_border:
                assert result[i][j] == board[i][j]
    padded = solve_surrounded(_pad(board, "X"))
    assert all(cell == "X" for row in padded for cell in row)


@pytest.mark.parametrize("grid", BINARY_GRIDS)
def test_num_enclaves_padded_with_water_counts_all_land(grid):
    land = sum(map(sum, grid))
    assert num_enclaves(_pad(grid, 0)) == land
    assert num_enclaves(grid) <= land


@pytest.mark.parametrize("grid", BINARY_GRIDS)
def test_closed_island_padded_matches_island_count(grid):
    padded = _pad(grid, 1)
    assert closed_island(padded) == num_islands(_as_chars(grid, 0))
    assert closed_island(grid) <= closed_island(padded)


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (4, 4)])
def test_max_area_of_full_grid(rows, cols):
    assert max_area_of_island([[1] * cols for _ in range(rows)]) == rows * cols


@pytest.mark.parametrize("grid", BINARY_GRIDS)
def test_max_area_bounded_by_land(grid):
    land = sum(map(sum, grid))
    area = max_area_of_island(grid)
    assert area <= land
    assert area >= min(land, 1)