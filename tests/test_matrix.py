import pytest

from dsakit.matrix import spiral_order


def test_documented_four_by_four():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
    expected = [int(v) for v in "1 2 3 4 8 12 16 15 14 13 9 5 6 7 11 10".split()]
    assert spiral_order(matrix) == expected


def test_single_row():
    assert spiral_order([[1, 2, 3]]) == [1, 2, 3]


def test_single_column():
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


@pytest.mark.parametrize("matrix", [[], [[]]])
def test_empty(matrix):
    assert spiral_order(matrix) == []


@pytest.mark.parametrize("rows,cols", [(2, 5), (5, 2), (3, 3), (4, 7), (1, 1)])
def test_visits_every_element_once(rows, cols):
    matrix = [[r * cols + c for c in range(cols)] for r in range(rows)]
    order = spiral_order(matrix)
    assert sorted(order) == list(range(rows * cols))
    assert order[:cols] == matrix[0]


def test_ragged_rejected():
    with pytest.raises(ValueError):
        spiral_order([[1, 2], [3]])