"""Backtracking solvers: m-colouring of a graph and 9x9 sudoku."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations, product

Grid = list[list[int]]

_SIZE = 9
_BOX = 3


def _check_square(graph: Sequence[Sequence[object]]) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def is_valid_coloring(graph: Sequence[Sequence[object]], colors: Sequence[int]) -> bool:
    """Return True if no two adjacent vertices share a colour."""
    size = _check_square(graph)
    if len(colors) != size:
        raise ValueError(f"expected {size} colours, got {len(colors)}")
    return not any(
        graph[i][j] and colors[i] == colors[j] for i, j in combinations(range(size), 2)
    )


def color_graph(graph: Sequence[Sequence[object]], m: int) -> list[int] | None:
    """Return the first valid colouring with colours 1..m, or None if none exists."""
    size = _check_square(graph)
    for colors in product(range(1, m + 1), repeat=size):
        if is_valid_coloring(graph, colors):
            return list(colors)
    return None


def can_place_digit(grid: Sequence[Sequence[int]], row: int, col: int, digit: int) -> bool:
    """Return True if digit appears nowhere in the row, column or 3x3 box of (row, col)."""
    if any(grid[row][i] == digit or grid[i][col] == digit for i in range(_SIZE)):
        return False
    top, left = row - row % _BOX, col - col % _BOX
    return all(
        grid[r][c] != digit
        for r in range(top, top + _BOX)
        for c in range(left, left + _BOX)
    )


def _validate(grid: Sequence[Sequence[int]]) -> None:
    if len(grid) != _SIZE or any(len(row) != _SIZE for row in grid):
        raise ValueError("sudoku grid must be 9x9")
    if any(not 0 <= cell <= _SIZE for row in grid for cell in row):
        raise ValueError("sudoku cells must be 0 (empty) or 1-9")


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Grid | None:
    """Return a solved copy of the grid (0 marks an empty cell), or None if unsolvable."""
    _validate(grid)
    work = [list(row) for row in grid]
    empty = [(r, c) for r in range(_SIZE) for c in range(_SIZE) if work[r][c] == 0]

    def fill(index: int) -> bool:
        if index == len(empty):
            return True
        row, col = empty[index]
        for digit in range(1, _SIZE + 1):
            if can_place_digit(work, row, col, digit):
                work[row][col] = digit
                if fill(index + 1):
                    return True
                work[row][col] = 0
        return False

    return work if fill(0) else None