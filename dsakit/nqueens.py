"""N-queens: test placements, count every solution, or find the first one."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from itertools import chain

Board = list[list[int]]


def can_place(board: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """Return True if a queen at (row, col) is not attacked by queens in earlier rows."""
    n = len(board)
    if any(board[r][col] for r in range(row)):
        return False
    left_diagonal = zip(range(row, -1, -1), range(col, -1, -1))
    right_diagonal = zip(range(row, -1, -1), range(col, n))
    return not any(board[r][c] for r, c in chain(left_diagonal, right_diagonal))


def _solutions(n: int) -> Iterator[Board]:
    """Yield the working board each time it holds a complete placement."""
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    board: Board = [[0] * n for _ in range(n)]

    def place(row: int) -> Iterator[Board]:
        if row == n:
            yield board
            return
        for col in range(n):
            if can_place(board, row, col):
                board[row][col] = 1
                yield from place(row + 1)
                board[row][col] = 0

    yield from place(0)


def count_solutions(n: int) -> int:
    """Return the number of ways to place n non-attacking queens on an n x n board."""
    return sum(1 for _ in _solutions(n))


def first_solution(n: int) -> Board | None:
    """Return the first solution found as a 0/1 matrix, or None if there is none."""
    for board in _solutions(n):
        return [list(row) for row in board]
    return None


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board as space-separated rows followed by a blank line."""
    lines = "".join("".join(f"{cell} " for cell in row) + "\n" for row in board)
    return lines + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve the N-queens problem.")
    parser.add_argument("n", nargs="?", type=int, help="board size (read from stdin if omitted)")
    parser.add_argument("--first", action="store_true", help="print the first solution instead of counting")
    args = parser.parse_args(argv)

    n = args.n
    if n is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("no board size given")
        try:
            n = int(tokens[0])
        except ValueError:
            parser.error(f"invalid board size: {tokens[0]!r}")

    if args.first:
        board = first_solution(n)
        if board is not None:
            sys.stdout.write(format_board(board))
    else:
        print(f"Ways {count_solutions(n)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())