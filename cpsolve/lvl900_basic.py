"""Solutions to lower-intermediate array, string and geometry problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby

_KNIGHT_SIGNS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def array_clone_ops(a: Sequence[int]) -> int:
    """Fewest clone-and-swap operations that make some copy all one value."""
    n = len(a)
    freq = max(Counter(a).values(), default=0)
    ops = 0
    while freq < n:
        moved = min(n - freq, freq)
        ops += 1 + moved
        freq += moved
    return ops


def balanced_removals(a: Sequence[int], k: int) -> int:
    """Fewest removals so that sorted neighbours differ by at most k."""
    if not a:
        raise ValueError("array must not be empty")
    if len(a) == 1:
        return 0
    ordered = sorted(a)
    longest = run = 1
    for prev, cur in zip(ordered, ordered[1:]):
        if cur - prev <= k:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
    longest = max(longest, run)
    return len(ordered) - longest


def chemistry_possible(s: str, k: int) -> bool:
    """Whether removing k characters can leave letters that form a palindrome."""
    odd_count = sum(1 for count in Counter(s).values() if count % 2 != 0)
    return odd_count <= k + 1


def compare_string_cost(s: str) -> int:
    """One more than the longest run of equal neighbouring characters."""
    longest = max((sum(1 for _ in run) for _, run in groupby(s)), default=1)
    return longest + 1


def deletive_editing(s: str, t: str) -> bool:
    """Whether deleting first occurrences of letters can turn s into t."""
    needed = Counter(t)
    kept: list[str] = []
    for ch in reversed(s):
        if needed[ch]:
            kept.append(ch)
            needed[ch] -= 1
    return "".join(reversed(kept)) == t


def _forks(a: int, b: int, x: int, y: int) -> set[tuple[int, int]]:
    """Cells from which an (a, b) knight attacks (x, y)."""
    cells: set[tuple[int, int]] = set()
    for dx, dy in _KNIGHT_SIGNS:
        cells.add((x + dx * a, y + dy * b))
        cells.add((x + dx * b, y + dy * a))
    return cells


def forked_positions(
    a: int, b: int, king: tuple[int, int], queen: tuple[int, int]
) -> int:
    """Number of cells where an (a, b) knight attacks both the king and the queen."""
    return len(_forks(a, b, *king) & _forks(a, b, *queen))


def clock_time(a: int, b: int, tools: Sequence[int]) -> int:
    """Longest time before a bomb with timer b and limit a goes off."""
    return b + sum(min(a - 1, x) for x in tools)


def longest_divisor_run(n: int) -> int:
    """Largest r such that every number from 1 to r divides n."""
    if n == 0:
        raise ValueError("n must be non-zero")
    x = 1
    while n % x == 0:
        x += 1
    return x - 1


def mainak_max(a: Sequence[int]) -> int:
    """Largest a[-1] - a[0] reachable by one cyclic rotation of a subsegment."""
    if not a:
        raise ValueError("array must not be empty")
    first, last = a[0], a[-1]
    candidates = [a[i - 1] - a[i] for i in range(len(a))]
    candidates.extend(value - first for value in a[1:])
    candidates.extend(last - value for value in a[:-1])
    return max(candidates)