"""Further introductory-rated array, grid and number problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate
from math import gcd
from operator import mul

_GRID_SIZE = 10


def k_index(a: Sequence[int]) -> int:
    """Smallest k with as many 2s before index k as from k on; -1 if none.

    An array without any 2 gives 1.
    """
    total = sum(1 for value in a if value == 2)
    if total == 0:
        return 1
    before = 0
    for index, value in enumerate(a):
        if before == total - before:
            return index
        if value == 2:
            before += 1
    return -1


def line_trip(positions: Sequence[int], x: int) -> int:
    """Smallest tank size for a round trip from 0 to x refuelling at positions."""
    longest = 0
    prev = 0
    for position in positions:
        longest = max(longest, position - prev)
        prev = position
    return max(longest, 2 * (x - prev))


def one_two_split(nums: Sequence[int]) -> int:
    """Smallest k in 1..n-1 where the product before k equals the product after; -1 if none."""
    prefix = list(accumulate(nums, mul, initial=1))
    suffix = list(accumulate(reversed(nums), mul, initial=1))[::-1]
    for k in range(1, len(nums)):
        if prefix[k] == suffix[k]:
            return k
    return -1


def fill_sequence(values: Sequence[int]) -> list[int]:
    """Insert a 1 before every element smaller than the one written before it."""
    result: list[int] = []
    for value in values:
        if result and result[-1] > value:
            result.append(1)
        result.append(value)
    return result


def has_small_gcd_pair(a: Sequence[int]) -> bool:
    """Whether some pair of distinct positions has a gcd of at most 2."""
    return any(
        gcd(a[j], a[i]) <= 2 for i in range(len(a)) for j in range(i + 1, len(a))
    )


def subsegment_has(nums: Sequence[int], k: int) -> bool:
    """Whether k can be the most frequent value of some subsegment."""
    if not nums:
        raise ValueError("array must not be empty")
    counts = Counter(nums)
    _, most_common_value = max((count, value) for value, count in counts.items())
    return most_common_value == k or k in counts


def _ring_value(row: int, col: int) -> int:
    """Points for a cell: 1 on the outer ring up to 5 in the centre."""
    last = _GRID_SIZE - 1
    return min(row, col, last - row, last - col) + 1


def target_score(grid: Sequence[str]) -> int:
    """Total points of the arrows ('X') on a 10x10 target."""
    if len(grid) != _GRID_SIZE or any(len(row) != _GRID_SIZE for row in grid):
        raise ValueError("grid must be 10 rows of 10 cells")
    return sum(
        _ring_value(r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "X"
    )


def twin_permutation(a: Sequence[int]) -> list[int]:
    """The permutation whose element-wise sums with a are all len(a) + 1."""
    n = len(a)
    return [n + 1 - value for value in a]


def unit_array_ops(a: Sequence[int]) -> int:
    """Fewest -1 to 1 flips so the sum is non-negative and the product is 1."""
    total = sum(a)
    negatives = sum(1 for value in a if value == -1)
    flips = 0 if total >= 0 else (-total + 1) // 2
    if (negatives - flips) & 1:
        flips += 1
    return flips


def split_united(a: Sequence[int]) -> tuple[list[int], list[int]] | None:
    """Split into the copies of the minimum and the rest; None if all are equal."""
    if not a:
        raise ValueError("array must not be empty")
    ordered = sorted(a)
    if ordered[0] == ordered[-1]:
        return None
    cut = ordered.count(ordered[0])
    return ordered[:cut], ordered[cut:]


def walking_master(a: int, b: int, c: int, d: int) -> int:
    """Moves from (a, b) to (c, d) going up-right or left; -1 if impossible."""
    if b <= d and c <= a + d - b:
        return (d - b) + (a + d - b - c)
    return -1