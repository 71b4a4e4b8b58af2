"""Spiral traversal of a rectangular matrix."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def spiral_order(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Return the elements in clockwise spiral order starting at the top-left corner."""
    rows = [list(r) for r in matrix]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(r) != width for r in rows):
        raise ValueError("matrix rows must all have the same length")

    top, left, bottom, right = 0, 0, len(rows) - 1, width - 1
    order: list[T] = []
    while top <= bottom and left <= right:
        order.extend(rows[top][left:right + 1])
        top += 1
        order.extend(rows[r][right] for r in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(rows[bottom][c] for c in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(rows[r][left] for r in range(bottom, top - 1, -1))
            left += 1
    return order