"""
Insertion Sort
==============
In-place, stable, O(n^2) sort by adjacent swaps.

Each pass bubbles seq[i] left into the already-sorted prefix seq[:i].
Nearly sorted input finishes in O(n).
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional, TypeVar

T = TypeVar("T")


def insertion_sort(
    seq: MutableSequence[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> None:
    """
    Sort *seq* in place into non-decreasing order. Returns None.

    Only strictly smaller elements move left, so equal elements keep
    their original relative order.
    """
    for i in range(len(seq)):
        # Invariant: seq[:i] is sorted
        j = i
        while j > 0:
            left = seq[j - 1]
            right = seq[j]
            lk = key(left) if key is not None else left
            rk = key(right) if key is not None else right
            if not rk < lk:
                break
            seq[j - 1], seq[j] = right, left
            j -= 1
