"""Solutions to a set of contest problems."""

from __future__ import annotations

from collections.abc import Sequence

# Marks an unreachable state in fanum_hard.
_UNREACHABLE = 10**9


def amogus_plural(word: str) -> str:
    """Replace the final two letters of a singular word with ``i``."""
    if len(word) < 2:
        raise ValueError("word must have at least two characters")
    return word[:-2] + "i"


def coin_split_count(n: int) -> int:
    """Number of coins obtainable by repeatedly splitting a coin of value n."""
    if n < 3:
        return 1
    level = 0
    while n > 3:
        n //= 4
        level += 1
    return 1 << level


def fanum_easy(a: Sequence[int], b: int) -> bool:
    """Whether each a[i] may be kept or replaced by b - a[i] to sort a."""
    keep_ok = flip_ok = True
    for prev, cur in zip(a, a[1:]):
        new_keep = (keep_ok and prev <= cur) or (flip_ok and b - prev <= cur)
        new_flip = (keep_ok and prev <= b - cur) or (flip_ok and b - prev <= b - cur)
        keep_ok, flip_ok = new_keep, new_flip
    return keep_ok or flip_ok


def fanum_hard(a: Sequence[int], b: Sequence[int]) -> bool:
    """Whether each a[i] may be kept or replaced by b[j] - a[i] to sort a."""
    if not a:
        raise ValueError("a must not be empty")
    if not b:
        raise ValueError("b must not be empty")
    b_min, b_max = min(b), max(b)
    keep = a[0]
    flip = b_min - a[0]
    for cur in a[1:]:
        new_keep = new_flip = _UNREACHABLE
        if min(keep, flip) <= cur:
            new_keep = cur
        low, high = b_min - cur, b_max - cur
        for state in (keep, flip):
            if state != _UNREACHABLE:
                candidate = max(state, low)
                if candidate <= high:
                    new_flip = min(new_flip, candidate)
        keep, flip = new_keep, new_flip
    return min(keep, flip) != _UNREACHABLE


def mex_operations(a: Sequence[int]) -> int:
    """Operations needed to turn the array into zeros: 0, 1 or 2."""
    if all(value == 0 for value in a):
        return 0
    if any(value == 0 for value in a[1:-1]):
        return 2
    return 1


def segment_values(a: Sequence[int]) -> list[int]:
    """Sorted distinct values made of zero and the array's elements."""
    return sorted({0, *a})


def skibidus_min_length(s: str) -> int:
    """Shortest length reachable by merging equal neighbouring letters."""
    if any(x == y for x, y in zip(s, s[1:])):
        return 1
    return len(s)