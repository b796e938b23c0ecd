"""Counting placements and paths on square and rectangular grids."""

from __future__ import annotations

from functools import lru_cache
from typing import Set, Tuple


def count_queen_placements(n: int) -> int:
    """Return the number of ways to place n non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError("board size must not be negative")
    rows: Set[int] = set()
    rising: Set[int] = set()
    falling: Set[int] = set()

    def place(column: int) -> int:
        if column == n:
            return 1
        ways = 0
        for row in range(n):
            if row in rows or (column - row) in rising or (column + row) in falling:
                continue
            rows.add(row)
            rising.add(column - row)
            falling.add(column + row)
            ways += place(column + 1)
            rows.discard(row)
            rising.discard(column - row)
            falling.discard(column + row)
        return ways

    return place(0)


def count_hamiltonian_paths(n: int) -> int:
    """Return the number of paths from the top-left to the bottom-right cell of an
    n x n grid that move between adjacent cells and visit every cell exactly once."""
    if n < 1:
        raise ValueError("grid size must be at least 1")
    total = n * n
    goal = (n - 1, n - 1)
    visited: Set[Tuple[int, int]] = set()

    def walk(cell: Tuple[int, int]) -> int:
        visited.add(cell)
        try:
            if cell == goal:
                return 1 if len(visited) == total else 0
            i, j = cell
            neighbours = ((i + 1, j), (i, j + 1), (i - 1, j), (i, j - 1))
            return sum(
                walk(step)
                for step in neighbours
                if 0 <= step[0] < n and 0 <= step[1] < n and step not in visited
            )
        finally:
            visited.discard(cell)

    return walk((0, 0))


def count_monotone_paths(rows: int, columns: int) -> int:
    """Return the number of right-or-down paths from the top-left to the
    bottom-right cell of a rows x columns grid; 0 if the grid has no cells."""
    if rows < 0 or columns < 0:
        raise ValueError("grid dimensions must not be negative")
    if rows == 0 or columns == 0:
        return 0

    @lru_cache(maxsize=None)
    def paths(row: int, column: int) -> int:
        if row >= rows or column >= columns:
            return 0
        if row == rows - 1 and column == columns - 1:
            return 1
        return paths(row, column + 1) + paths(row + 1, column)

    return paths(0, 0)