"""Classic data-structure and algorithm exercises: N-queens, arrays, backtracking,
linked lists, matrices, stacks, an LRU cache and strings."""

__version__ = "0.1.0"