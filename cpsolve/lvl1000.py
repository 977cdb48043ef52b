"""Solutions to intermediate-rated greedy, sorting and counting problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby

# Upper bound the smallest first element starts from in olya_beauty.
_SMALLEST_START = 10**9


def _remainder(value: int, divisor: int) -> int:
    """Remainder that takes the sign of the dividend, as truncating division does."""
    result = abs(value) % abs(divisor)
    return -result if value < 0 else result


def helmet_cost(p: int, a: Sequence[int], b: Sequence[int]) -> int:
    """Cheapest way to inform every resident of an announcement.

    The chief informs one resident for ``p``; resident ``i`` can then tell up
    to ``a[i]`` others for ``b[i]`` each, and the chief can keep telling
    anyone for ``p``.
    """
    n = len(a)
    if len(b) != n:
        raise ValueError("a and b must have the same length")
    offers = sorted([(p, n + 1), *zip(b, a)])
    reached = 1
    cost = p
    for price, capacity in offers:
        if reached >= n:
            break
        left = n - reached
        if capacity <= left:
            reached += capacity
            cost += price * capacity
        else:
            reached = n
            cost += left * price
    return cost


def _longest_runs(values: Iterable[int]) -> dict[int, int]:
    """Longest run of equal neighbouring elements for each value."""
    runs: dict[int, int] = {}
    for value, group in groupby(values):
        length = sum(1 for _ in group)
        runs[value] = max(runs.get(value, 0), length)
    return runs


def merge_array_max(a: Sequence[int], b: Sequence[int]) -> int:
    """Longest run of one value obtainable by merging a and b."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    runs_a = _longest_runs(a)
    runs_b = _longest_runs(b)
    return max(
        (runs_a.get(value, 0) + runs_b.get(value, 0) for value in runs_a.keys() | runs_b.keys()),
        default=0,
    )


def monster_order(a: Sequence[int], k: int) -> list[int]:
    """1-based order in which monsters die when the strongest is always hit for k."""
    if k == 0:
        raise ValueError("k must be non-zero")
    keys = [_remainder(health, k) or k for health in a]
    order = sorted(range(len(a)), key=lambda i: -keys[i])
    return [i + 1 for i in order]


def olya_beauty(arrays: Iterable[Sequence[int]]) -> int:
    """Largest total of array minimums after moving at most one element per array."""
    seconds: list[int] = []
    smallest = _SMALLEST_START
    for array in arrays:
        if not array:
            raise ValueError("arrays must not be empty")
        ordered = sorted(array)
        if len(ordered) >= 2:
            seconds.append(ordered[1])
        smallest = min(smallest, ordered[0])
    if not seconds:
        raise ValueError("at least one array needs two or more elements")
    return smallest + sum(seconds) - min(seconds)


def raspberries_ops(a: Sequence[int], k: int) -> int:
    """Fewest increments that make the product of a divisible by k."""
    if k == 0:
        raise ValueError("k must be non-zero")
    best = k - 1
    evens = 0
    for value in a:
        if value % 2 == 0:
            evens += 1
        remainder = _remainder(value, k)
        best = 0 if remainder == 0 else min(best, k - remainder)
    if k != 4:
        return best
    if evens >= 2:
        return 0
    if evens == 1:
        return min(best, 1)
    return min(2, best)


def ski_resort_ways(a: Sequence[int], k: int, q: int) -> int:
    """Number of ranges of at least k consecutive days with temperature at most q."""
    total = 0
    for good, group in groupby(a, key=lambda temperature: temperature <= q):
        if not good:
            continue
        length = sum(1 for _ in group)
        if length >= k:
            total += (length - k + 1) * (length - k + 2) // 2
    return total


def swap_delete_cost(s: str) -> int:
    """Fewest deletions so that a rearranged binary string differs at every position."""
    if set(s) - {"0", "1"}:
        raise ValueError("string must consist of '0' and '1' only")
    counts = Counter(s)
    for index, ch in enumerate(s):
        other = "1" if ch == "0" else "0"
        if counts[other] == 0:
            return len(s) - index
        counts[other] -= 1
    return 0