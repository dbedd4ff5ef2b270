"""Breadth-first distances and border colouring on rectangular grids.

Every function works on a copy of its input.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterator, Sequence
from typing import Any

Grid = Sequence[Sequence[Any]]
Cell = tuple[int, int]

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_EIGHT_STEPS = _STEPS + ((-1, -1), (1, 1), (-1, 1), (1, -1))


def _neighbours(x: int, y: int, m: int, n: int, steps=_STEPS) -> Iterator[Cell]:
    for dx, dy in steps:
        nx, ny = x + dx, y + dy
        if 0 <= nx < m and 0 <= ny < n:
            yield nx, ny


def _bfs_distances(grid: Grid, is_source) -> list[list[float]]:
    """Return 4-directional step counts from the nearest source cell."""
    m = len(grid)
    n = len(grid[0]) if m else 0
    dist: list[list[float]] = [
        [0 if is_source(cell) else math.inf for cell in row] for row in grid
    ]
    queue = deque((i, j) for i in range(m) for j in range(n) if dist[i][j] == 0)
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, m, n):
            if dist[x][y] + 1 < dist[nx][ny]:
                dist[nx][ny] = dist[x][y] + 1
                queue.append((nx, ny))
    return dist


def update_matrix(mat: Grid) -> list[list[float]]:
    """Return each cell's distance to the nearest ``0``, by multi-source BFS.

    Cells with no ``0`` anywhere in the grid get ``math.inf``.
    """
    return _bfs_distances(mat, lambda cell: cell == 0)


def update_matrix_dp(mat: Grid) -> list[list[float]]:
    """Return each cell's distance to the nearest ``0``, by two dynamic-programming sweeps."""
    m = len(mat)
    n = len(mat[0]) if m else 0
    dist: list[list[float]] = [[0 if cell == 0 else math.inf for cell in row] for row in mat]
    for i in range(m):
        for j in range(n):
            if dist[i][j]:
                top = dist[i - 1][j] if i > 0 else math.inf
                left = dist[i][j - 1] if j > 0 else math.inf
                dist[i][j] = min(top, left) + 1
    for i in reversed(range(m)):
        for j in reversed(range(n)):
            if dist[i][j]:
                bottom = dist[i + 1][j] if i < m - 1 else math.inf
                right = dist[i][j + 1] if j < n - 1 else math.inf
                dist[i][j] = min(dist[i][j], min(bottom, right) + 1)
    return dist


def max_distance(grid: Grid) -> int:
    """Return the largest distance from a water cell (``0``) to its nearest land (``1``).

    Returns ``-1`` when the grid holds no land or no water.
    """
    cells = [cell for row in grid for cell in row]
    if all(cells) or not any(cells):
        return -1
    dist = _bfs_distances(grid, bool)
    return int(max(max(row) for row in dist))


def oranges_rotting(grid: Grid) -> int:
    """Return the minutes until no fresh orange (``1``) is left, or ``-1`` if some never rot.

    Rotten oranges (``2``) spoil their 4-directional neighbours each minute.
    """
    cells = [list(row) for row in grid]
    m = len(cells)
    n = len(cells[0]) if m else 0
    fresh = sum(cell == 1 for row in cells for cell in row)
    if not fresh:
        return 0
    queue = deque((i, j) for i in range(m) for j in range(n) if cells[i][j] == 2)
    minutes = -1
    while queue:
        minutes += 1
        for _ in range(len(queue)):
            x, y = queue.popleft()
            for nx, ny in _neighbours(x, y, m, n):
                if cells[nx][ny] == 1:
                    cells[nx][ny] = 2
                    fresh -= 1
                    queue.append((nx, ny))
    return -1 if fresh else minutes


def shortest_path_binary_matrix(grid: Grid) -> int:
    """Return the cell count of the shortest 8-directional clear path corner to corner.

    Clear cells are ``0``. Returns ``-1`` if no such path exists.
    """
    m = len(grid)
    n = len(grid[0]) if m else 0
    if not n or grid[0][0] != 0 or grid[m - 1][n - 1] != 0:
        return -1
    blocked = [[cell != 0 for cell in row] for row in grid]
    blocked[0][0] = True
    queue = deque([(0, 0)])
    steps = 0
    while queue:
        steps += 1
        for _ in range(len(queue)):
            x, y = queue.popleft()
            if (x, y) == (m - 1, n - 1):
                return steps
            for nx, ny in _neighbours(x, y, m, n, _EIGHT_STEPS):
                if not blocked[nx][ny]:
                    blocked[nx][ny] = True
                    queue.append((nx, ny))
    return -1


def color_border(grid: Grid, row: int, col: int, color: Any) -> list[list[Any]]:
    """Colour the border of the 4-connected component holding ``(row, col)``.

    A component cell is on the border if it lies on the grid's edge or is
    next to a cell outside the component.
    """
    m = len(grid)
    n = len(grid[0]) if m else 0
    if not (0 <= row < m and 0 <= col < n):
        raise IndexError(f"no cell at ({row}, {col})")
    result = [list(cells) for cells in grid]
    original = grid[row][col]
    component = {(row, col)}
    queue = deque([(row, col)])
    while queue:
        x, y = queue.popleft()
        for cell in _neighbours(x, y, m, n):
            if cell not in component and grid[cell[0]][cell[1]] == original:
                component.add(cell)
                queue.append(cell)
    for x, y in component:
        inner = sum(1 for cell in _neighbours(x, y, m, n) if cell in component)
        if inner < 4:
            result[x][y] = color
    return result