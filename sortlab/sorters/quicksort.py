"""
Quicksort
=========
In-place, unstable, O(n log n) average sort by pivot partitioning.

Pivot strategies:
- "first"            seq[lo] (default). Sorted or reverse-sorted input
                     degenerates to O(n^2) comparisons with this choice.
- "median_of_three"  median of seq[lo], seq[mid], seq[hi].
- "random"           uniform index in [lo, hi], drawn from *rng*.

Sub-ranges are processed from an explicit work stack rather than by
recursion, so the degenerate case costs time but never call-stack depth.
The smaller range is always handled first, which keeps the stack at
O(log n) pending ranges.
"""

from __future__ import annotations

import random
from typing import Any, Callable, List, MutableSequence, Optional, Tuple, TypeVar

from sortlab.sort_errors import UnknownStrategyError

T = TypeVar("T")
KeyFn = Optional[Callable[[Any], Any]]

PIVOT_FIRST = "first"
PIVOT_MEDIAN_OF_THREE = "median_of_three"
PIVOT_RANDOM = "random"
PIVOT_STRATEGIES = (PIVOT_FIRST, PIVOT_MEDIAN_OF_THREE, PIVOT_RANDOM)


def quicksort(
    seq: MutableSequence[T],
    *,
    pivot: str = PIVOT_FIRST,
    key: KeyFn = None,
    rng: Optional[random.Random] = None,
) -> None:
    """
    Sort *seq* in place into non-decreasing order. Returns None.

    After each partition every element in the front region is strictly
    less than the pivot and every element in the back region is
    greater-or-equal. The pivot's own index is excluded from both
    regions, so each pending range is strictly smaller than its parent.
    """
    if pivot not in PIVOT_STRATEGIES:
        raise UnknownStrategyError(pivot, PIVOT_STRATEGIES, kind="pivot strategy")

    length = len(seq)
    if length < 2:
        return

    if pivot == PIVOT_RANDOM and rng is None:
        rng = random.Random()

    stack: List[Tuple[int, int]] = [(0, length - 1)]
    while stack:
        lo, hi = stack.pop()
        if hi - lo < 1:
            continue

        chosen = _choose_pivot(seq, lo, hi, pivot, key, rng)
        if chosen != lo:
            seq[lo], seq[chosen] = seq[chosen], seq[lo]

        smaller = partition(seq, lo, hi, key=key)

        front = (lo, smaller - 1)
        back = (smaller + 1, hi)
        if front[1] - front[0] < back[1] - back[0]:
            stack.append(back)
            stack.append(front)
        else:
            stack.append(front)
            stack.append(back)


def partition(
    seq: MutableSequence[T],
    lo: int,
    hi: int,
    *,
    key: KeyFn = None,
) -> int:
    """
    Partition seq[lo..hi] (inclusive) around the pivot value seq[lo].

    Returns the pivot's final index p, with
    seq[lo:p] < pivot <= seq[p + 1:hi + 1].
    """
    pivot_value = seq[lo]
    pk = key(pivot_value) if key is not None else pivot_value

    boundary = lo
    for k in range(lo + 1, hi + 1):
        item = seq[k]
        ik = key(item) if key is not None else item
        if ik < pk:
            boundary += 1
            seq[boundary], seq[k] = seq[k], seq[boundary]

    seq[lo], seq[boundary] = seq[boundary], seq[lo]
    return boundary


def _choose_pivot(
    seq: MutableSequence[T],
    lo: int,
    hi: int,
    strategy: str,
    key: KeyFn,
    rng: Optional[random.Random],
) -> int:
    if strategy == PIVOT_FIRST:
        return lo
    if strategy == PIVOT_RANDOM:
        return rng.randint(lo, hi)

    mid = lo + (hi - lo) // 2
    candidates = [lo, mid, hi]
    # Three elements: a fixed insertion pass is enough
    for i in range(1, 3):
        j = i
        while j > 0 and _key_of(seq[candidates[j]], key) < _key_of(seq[candidates[j - 1]], key):
            candidates[j - 1], candidates[j] = candidates[j], candidates[j - 1]
            j -= 1
    return candidates[1]


def _key_of(item: Any, key: KeyFn) -> Any:
    return key(item) if key is not None else item
