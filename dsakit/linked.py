"""Flattening a list of sorted sub-lists linked through `next` and `bottom` pointers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import reduce


@dataclass(eq=False)
class Node:
    """A node whose `next` points to the next column and `bottom` down its own column."""

    data: int
    next: Node | None = field(default=None, repr=False)
    bottom: Node | None = field(default=None, repr=False)

    def _walk_bottom(self) -> Iterator[Node]:
        node: Node | None = self
        while node is not None:
            yield node
            node = node.bottom

    def values(self) -> list[int]:
        """Return the data of this node and every node below it."""
        return [node.data for node in self._walk_bottom()]


def merge_sorted(a: Node | None, b: Node | None) -> Node | None:
    """Merge two sorted `bottom`-linked lists into one, reusing their nodes."""
    sentinel = Node(0)
    tail = sentinel
    while a is not None and b is not None:
        if a.data < b.data:
            tail.bottom, a = a, a.bottom
        else:
            tail.bottom, b = b, b.bottom
        tail = tail.bottom
    tail.bottom = a if a is not None else b
    return sentinel.bottom


def _columns(root: Node | None) -> Iterator[Node]:
    while root is not None:
        yield root
        root = root.next


def flatten(root: Node | None) -> Node | None:
    """Merge every column, right to left, into one sorted `bottom`-linked list."""
    columns = list(_columns(root))
    if len(columns) < 2:
        return root
    return reduce(lambda merged, column: merge_sorted(column, merged), reversed(columns[:-1]), columns[-1])