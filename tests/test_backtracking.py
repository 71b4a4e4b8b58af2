import pytest

from dsakit.backtracking import can_place_digit, color_graph, is_valid_coloring, solve_sudoku

GRAPH = [
    [0, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [1, 0, 1, 0],
]

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 0],
]

DIGITS = set(range(1, 10))


def test_color_graph_worked_example():
    assert color_graph(GRAPH, 3) == [1, 2, 3, 2]


def test_color_graph_result_is_valid():
    colors = color_graph(GRAPH, 4)
    assert is_valid_coloring(GRAPH, colors)
    assert all(1 <= c <= 4 for c in colors)


def test_color_graph_too_few_colors():
    triangle = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert color_graph(triangle, 2) is None
    assert color_graph(GRAPH, 0) is None


def test_color_graph_empty():
    assert color_graph([], 3) == []


def test_is_valid_coloring_detects_conflict():
    assert is_valid_coloring(GRAPH, [1, 1, 2, 3]) is False
    assert is_valid_coloring(GRAPH, [1, 2, 3, 2]) is True


def test_is_valid_coloring_wrong_length():
    with pytest.raises(ValueError):
        is_valid_coloring(GRAPH, [1, 2])


def test_non_square_graph_rejected():
    with pytest.raises(ValueError):
        color_graph([[0, 1], [1]], 2)


def test_can_place_digit_row_column_box():
    assert can_place_digit(PUZZLE, 0, 2, 5) is False
    assert can_place_digit(PUZZLE, 0, 2, 8) is False
    assert can_place_digit(PUZZLE, 0, 2, 6) is False
    assert can_place_digit(PUZZLE, 0, 2, 4) is True


def test_solve_sudoku_is_complete_and_consistent():
    solved = solve_sudoku(PUZZLE)
    assert solved is not None
    assert all(set(row) == DIGITS for row in solved)
    assert all({solved[r][c] for r in range(9)} == DIGITS for c in range(9))
    for top in range(0, 9, 3):
        for left in range(0, 9, 3):
            box = {solved[r][c] for r in range(top, top + 3) for c in range(left, left + 3)}
            assert box == DIGITS


def test_solve_sudoku_keeps_clues_and_input():
    original = [list(row) for row in PUZZLE]
    solved = solve_sudoku(PUZZLE)
    assert PUZZLE == original
    assert all(
        solved[r][c] == PUZZLE[r][c] for r in range(9) for c in range(9) if PUZZLE[r][c]
    )


def test_solve_sudoku_first_row():
    assert solve_sudoku(PUZZLE)[0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]


def test_solve_sudoku_unsolvable():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[4][8] = 9
    assert solve_sudoku(grid) is None


@pytest.mark.parametrize(
    "grid",
    [[[0] * 9 for _ in range(8)], [[0] * 8 for _ in range(9)], [[10] + [0] * 8] + [[0] * 9 for _ in range(8)]],
)
def test_solve_sudoku_rejects_bad_grid(grid):
    with pytest.raises(ValueError):
        solve_sudoku(grid)