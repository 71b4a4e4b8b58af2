"""Array problems: chocolate distribution, fast power, triplets, products, sums, rotation."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def min_chocolate_difference(packets: Sequence[int], students: int) -> int:
    """Smallest max-min spread when handing one packet each to `students` students."""
    if students == 0 or not packets:
        return 0
    if len(packets) < students:
        raise ValueError(f"{students} students but only {len(packets)} packets")
    ordered = sorted(packets)
    return min(high - low for low, high in zip(ordered, ordered[students - 1:]))


def power(x: float, n: int) -> float:
    """Compute x ** n by binary exponentiation."""
    result = 1.0
    remaining = abs(n)
    while remaining:
        if remaining % 2:
            result *= x
            remaining -= 1
        else:
            x *= x
            remaining //= 2
    return 1.0 / result if n < 0 else result


def has_increasing_triplet(nums: Sequence[int]) -> bool:
    """Return True if there are i < j < k with nums[i] < nums[j] < nums[k]."""
    if len(nums) < 3:
        return False
    prefix_min = list(accumulate(nums, min))
    suffix_max = list(accumulate(reversed(nums), max))[::-1]
    return any(
        before < middle < after
        for before, middle, after in zip(prefix_min, nums[1:-1], suffix_max[2:])
    )


def max_product(values: Sequence[int]) -> int:
    """Largest absolute running product, restarting after each zero."""
    if not values:
        raise ValueError("max_product() needs at least one value")
    best = None
    product = 1
    for value in values:
        product = abs(product * value)
        best = product if best is None else max(best, product)
        if product == 0:
            product = 1
    return best


def max_subarray_sum_naive(values: Sequence[int]) -> int:
    """Largest contiguous-subarray sum (0 if all are negative), by checking every subarray."""
    return max(
        (max(accumulate(values[start:])) for start in range(len(values))),
        default=0,
    ) if values else 0 if not values else 0


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest contiguous-subarray sum (0 if all are negative), in linear time."""
    best = 0
    current = 0
    for value in values:
        current = max(current + value, value)
        best = max(best, current)
    return best


def rotate(values: Sequence[int], d: int) -> list[int]:
    """Return values rotated left by d positions."""
    if not 0 <= d <= len(values):
        raise ValueError(f"rotation {d} out of range for {len(values)} values")
    return [*values[d:], *values[:d]]