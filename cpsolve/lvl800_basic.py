"""Solutions to introductory-rated array, string and number problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

# Distance used when an array has no neighbouring pair to compare.
_NO_DISTANCE = 10**9

_FIRST = "First"
_SECOND = "Second"


def _remainder(value: int, divisor: int) -> int:
    """Remainder that takes the sign of the dividend, as truncating division does."""
    result = abs(value) % abs(divisor)
    return -result if value < 0 else result


def array_color(a: Sequence[int]) -> bool:
    """Whether the elements can be split into two colours with equal-parity sums."""
    odd_count = sum(1 for value in a if value % 2 != 0)
    return odd_count % 2 == 0


def beautiful_arrangement(a: Sequence[int]) -> list[int] | None:
    """An ordering with the maximum first, or None when all elements are equal."""
    if not a:
        raise ValueError("array must not be empty")
    ordered = sorted(a)
    if ordered[0] == ordered[-1]:
        return None
    return [ordered[-1], *ordered[:-1]]


def coin_sum_possible(n: int, k: int) -> bool:
    """Whether n can be paid with coins of value 2 alone.

    ``k`` is the odd coin value of the problem; only zero uses of it are tried.
    """
    return n >= 0 and n % 2 == 0


def cover_water(s: str) -> int:
    """Buckets of water needed to fill every empty cell ('.') of a row."""
    total = 0
    longest = 0
    run = 0
    for cell in s:
        if cell == ".":
            total += 1
            run += 1
            longest = max(longest, run)
        else:
            run = 0
    return 2 if longest > 2 else total


def desorted_ops(a: Sequence[int]) -> int:
    """Operations needed to make a non-decreasing array unsorted."""
    pairs = list(zip(a, a[1:]))
    if any(cur < prev for prev, cur in pairs):
        return 0
    min_distance = min((cur - prev for prev, cur in pairs), default=_NO_DISTANCE)
    return min_distance // 2 + 1


def doremy_paint(nums: Sequence[int]) -> bool:
    """Whether the array can be reordered so neighbouring pair sums are all equal."""
    if not nums:
        raise ValueError("array must not be empty")
    counts = Counter(nums)
    if len(counts) >= 3:
        return False
    smallest, largest = min(counts), max(counts)
    return abs(counts[smallest] - counts[largest]) <= 1


def extreme_round(n: int) -> int:
    """How many numbers from 1 to n have exactly one non-zero digit."""
    if n < 1:
        raise ValueError("n must be positive")
    digits = str(n)
    return (len(digits) - 1) * 9 + int(digits[0])


def forbidden_sum(n: int, k: int, x: int) -> list[int] | None:
    """Summands from 1..k, none equal to x, adding up to n; None if impossible."""
    if x != 1:
        return [1] * n
    if k == 1 or (k == 2 and n % 2 == 1):
        return None
    half = n // 2
    if n % 2 == 1:
        return [3] + [2] * (half - 1)
    return [2] * half


def game_winner(n: int) -> str:
    """Winner of the add-or-subtract-one game towards a multiple of three.

    The first player wins at once unless n is already a multiple of three.
    """
    remainder = _remainder(n, 3)
    if remainder in (1, 2):
        return _FIRST
    return _SECOND


def same_parity_pairs(a: Sequence[int]) -> int:
    """Number of neighbouring pairs whose elements have the same parity."""
    return sum(
        1 for prev, cur in zip(a, a[1:]) if _remainder(prev, 2) == _remainder(cur, 2)
    )


def halloumi_sortable(nums: Sequence[int], k: int) -> bool:
    """Whether the array counts as sortable under the reversal rule with length k."""
    return sorted(nums) == list(nums) and k > 1


def jagged_sortable(nums: Sequence[int]) -> bool:
    """Whether the permutation can be sorted by jagged swaps."""
    if not nums:
        raise ValueError("array must not be empty")
    return nums[0] == 1