# dsakit

A small collection of classic data-structure and algorithm exercises, written as plain
Python functions and classes with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.nqueens` | `can_place`, `count_solutions`, `first_solution`, `format_board`, `main` |
| `dsakit.arrays` | `min_chocolate_difference`, `power`, `has_increasing_triplet`, `max_product`, `max_subarray_sum_naive`, `max_subarray_sum`, `rotate` |
| `dsakit.backtracking` | `is_valid_coloring`, `color_graph`, `can_place_digit`, `solve_sudoku` |
| `dsakit.linked` | `Node`, `merge_sorted`, `flatten` |
| `dsakit.matrix` | `spiral_order` |
| `dsakit.stacks` | `is_balanced`, `delete_middle`, `insert_at_bottom`, `has_redundant_brackets`, `next_greater`, `reverse_stack`, `reverse_string` |
| `dsakit.lru` | `LRUCache` |
| `dsakit.strings` | `reverse_chars`, `string_demo` |

A few conventions worth knowing:

- In `dsakit.stacks` a stack is a list whose last element is the top. The functions
  return new lists rather than changing the one passed in.
- `first_solution` returns the board as a list of 0/1 rows, or `None` when no placement exists.
- `solve_sudoku` takes a 9x9 grid with `0` for empty cells and returns a solved copy, or
  `None` if the grid cannot be completed. A grid of the wrong shape or with cells outside
  0-9 raises `ValueError`.
- `color_graph` takes a square adjacency matrix and returns the first colouring using
  colours `1..m`, or `None`.
- `LRUCache.get` returns `-1` for a missing key; the capacity must be positive.
- `max_subarray_sum` and `max_subarray_sum_naive` return `0` when every value is negative.
- `Node` in `dsakit.linked` has `data`, `next` and `bottom`; `Node.values()` lists the data
  down the `bottom` chain, which is where `flatten` puts the merged result.
- `string_demo` returns, as a list of lines, the results of a walk through common string
  operations (construction, slicing, search, appending, erasing and replacing).

## Examples

```python
from dsakit.nqueens import count_solutions, first_solution, format_board
from dsakit.arrays import power, rotate
from dsakit.matrix import spiral_order
from dsakit.stacks import is_balanced, next_greater
from dsakit.lru import LRUCache

count_solutions(8)             # 92
print(format_board(first_solution(4)))

power(2, 10)                   # 1024.0
rotate([1, 2, 3, 4, 5, 6, 7], 2)  # [3, 4, 5, 6, 7, 1, 2]

spiral_order([[1, 2, 3, 4],
              [5, 6, 7, 8],
              [9, 10, 11, 12],
              [13, 14, 15, 16]])
# [1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10]

is_balanced("{()}[]")          # True
next_greater([11, 13, 21, 3])  # [13, 21, -1, -1]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                   # 1
cache.put(3, 3)                # evicts key 2
cache.get(2)                   # -1
```

## Command line

The N-Queens solver can be run from the shell. Give the board size as an argument, or
on standard input, and it prints the number of ways to place the queens:

```
dsakit-nqueens 8
echo 8 | dsakit-nqueens
```

With `--first` it prints the first solution found as rows of 0s and 1s instead, and
prints nothing if there is none:

```
dsakit-nqueens 4 --first
```

This is the only command; everything else in the package is used from Python.