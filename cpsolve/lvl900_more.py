"""Further lower-intermediate number, array and query problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate
from math import gcd


def make_ap(a: int, b: int, c: int) -> bool:
    """Whether multiplying one of a, b, c by a positive integer gives an arithmetic progression."""
    if b - a == c - b:
        return True
    if (a + c) % (2 * b) == 0:
        return True
    if 2 * b - a > 0 and (2 * b - a) % c == 0:
        return True
    if 2 * b - c > 0 and (2 * b - c) % a == 0:
        return True
    return False


def make_increasing_ops(a: Sequence[int]) -> int:
    """Fewest halvings that make the array strictly increasing; -1 if impossible."""
    values = list(a)
    ops = 0
    for i in range(len(values) - 2, -1, -1):
        nxt = values[i + 1]
        while values[i] >= nxt and values[i] > 0:
            values[i] //= 2
            ops += 1
        if values[i] == nxt:
            return -1
    return ops


def make_zero_ops(n: int) -> list[tuple[int, int]]:
    """Segment operations (1-based, inclusive) that zero an array of length n."""
    if n % 2 == 1:
        return [(1, n - 1), (1, n - 1), (n - 1, n), (n - 1, n)]
    return [(1, n), (1, n)]


def odd_queries(
    a: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[bool]:
    """For each query (l, r, k), whether the sum is odd once a[l..r] all become k.

    Positions are 1-based and inclusive; the array itself is not changed.
    """
    n = len(a)
    prefix = list(accumulate(a, initial=0))
    answers: list[bool] = []
    for l, r, k in queries:
        if not 1 <= l <= r <= n:
            raise ValueError(f"query range {l}..{r} outside 1..{n}")
        total = prefix[l - 1] + (prefix[n] - prefix[r]) + (r - l + 1) * k
        answers.append(total % 2 != 0)
    return answers


def perm_swap_k(p: Sequence[int]) -> int:
    """Largest k such that swaps of elements k apart can sort the permutation."""
    return reduce(gcd, (abs(value - i) for i, value in enumerate(p, start=1)), 0)


def x_sum_possible(n: int, k: int, x: int) -> bool:
    """Whether k distinct integers from 1..n can add up to x."""
    lowest = k * (k + 1) // 2
    highest = k * (2 * n - k + 1) // 2
    return lowest <= x <= highest