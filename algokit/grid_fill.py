"""Flood fills and region counting on rectangular grids.

Every function works on a copy of its input. Grids are sequences of rows,
and rows may be lists or, for character grids, strings.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

Grid = Sequence[Sequence[Any]]
Cell = tuple[int, int]

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _neighbours(x: int, y: int, m: int, n: int) -> Iterator[Cell]:
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < m and 0 <= ny < n:
            yield nx, ny


def _size(grid: Grid) -> tuple[int, int]:
    return len(grid), (len(grid[0]) if grid else 0)


def _border(m: int, n: int) -> Iterator[Cell]:
    for i in range(m):
        yield i, 0
        yield i, n - 1
    for j in range(n):
        yield 0, j
        yield m - 1, j


def _explore(
    grid: Grid,
    starts: Iterable[Cell],
    member: Callable[[Any], bool],
    seen: set[Cell] | None = None,
    *,
    breadth: bool = False,
) -> list[Cell]:
    """Return the cells reachable from ``starts`` through cells accepted by ``member``.

    Cells already in ``seen`` are skipped, and every visited cell is added to it.
    """
    m, n = _size(grid)
    if seen is None:
        seen = set()
    frontier: deque[Cell] = deque()
    for cell in starts:
        x, y = cell
        if cell not in seen and member(grid[x][y]):
            seen.add(cell)
            frontier.append(cell)
    visited: list[Cell] = []
    take = frontier.popleft if breadth else frontier.pop
    while frontier:
        x, y = take()
        visited.append((x, y))
        for cell in _neighbours(x, y, m, n):
            if cell not in seen and member(grid[cell[0]][cell[1]]):
                seen.add(cell)
                frontier.append(cell)
    return visited


def _fill(image: Grid, sr: int, sc: int, new_color: Any, breadth: bool) -> list[list[Any]]:
    m, n = _size(image)
    if not (0 <= sr < m and 0 <= sc < n):
        raise IndexError(f"no pixel at ({sr}, {sc})")
    result = [list(row) for row in image]
    old = result[sr][sc]
    if old == new_color:
        return result
    for x, y in _explore(result, [(sr, sc)], lambda value: value == old, breadth=breadth):
        result[x][y] = new_color
    return result


def flood_fill(image: Grid, sr: int, sc: int, new_color: Any) -> list[list[Any]]:
    """Recolour the 4-connected region of ``(sr, sc)`` with depth-first search."""
    return _fill(image, sr, sc, new_color, breadth=False)


def flood_fill_bfs(image: Grid, sr: int, sc: int, new_color: Any) -> list[list[Any]]:
    """Recolour the 4-connected region of ``(sr, sc)`` with breadth-first search."""
    return _fill(image, sr, sc, new_color, breadth=True)


def _is_land_char(value: Any) -> bool:
    return str(value) == "1"


def num_islands(grid: Grid) -> int:
    """Return the number of 4-connected islands of ``"1"`` cells."""
    m, n = _size(grid)
    seen: set[Cell] = set()
    count = 0
    for i in range(m):
        for j in range(n):
            if (i, j) not in seen and _is_land_char(grid[i][j]):
                count += 1
                _explore(grid, [(i, j)], _is_land_char, seen)
    return count


def solve_surrounded(board: Grid) -> list[list[str]]:
    """Capture every ``"O"`` region not connected to the border by turning it to ``"X"``."""
    m, n = _size(board)
    if not n:
        return [list(row) for row in board]
    safe = set(_explore(board, _border(m, n), lambda value: value == "O"))
    return [["O" if (i, j) in safe else "X" for j in range(n)] for i in range(m)]


def num_enclaves(grid: Grid) -> int:
    """Return the number of land cells (``1``) from which the border cannot be reached."""
    m, n = _size(grid)
    if not n:
        return 0
    escaping = set(_explore(grid, _border(m, n), lambda value: value == 1))
    return sum(
        1
        for i in range(m)
        for j in range(n)
        if grid[i][j] == 1 and (i, j) not in escaping
    )


def closed_island(grid: Grid) -> int:
    """Return the number of land regions (``0``) fully surrounded by water (``1``)."""
    m, n = _size(grid)
    if not n:
        return 0

    def passable(value: Any) -> bool:
        return value != 1

    seen: set[Cell] = set()
    _explore(grid, _border(m, n), passable, seen)
    count = 0
    for i in range(m):
        for j in range(n):
            if (i, j) not in seen and grid[i][j] == 0:
                count += 1
                _explore(grid, [(i, j)], passable, seen)
    return count


def max_area_of_island(grid: Grid) -> int:
    """Return the size of the largest 4-connected island of ``1`` cells, or 0."""
    m, n = _size(grid)
    seen: set[Cell] = set()
    best = 0
    for i in range(m):
        for j in range(n):
            if (i, j) not in seen and grid[i][j] == 1:
                area = len(_explore(grid, [(i, j)], lambda value: value == 1, seen))
                best = max(best, area)
    return best