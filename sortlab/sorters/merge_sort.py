"""
Merge Sort
==========
Allocating, stable, O(n log n) top-down merge sort.

The input is never mutated: every call returns a fresh list, and the two
halves are sorted into new lists before being merged.

The implementation handles any sequence whose elements support `<=`.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")


def merge_sort(
    seq: Iterable[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """
    Return a sorted copy of *seq*.

    Parameters
    ----------
    seq : iterable
        Items to sort. Read once and never modified.
    key : callable, optional
        Comparison key extractor, as for ``sorted(..., key=...)``.

    Returns
    -------
    list
        Newly allocated; shares element references with *seq*, not storage.
    """
    items: List[T] = list(seq)
    n = len(items)
    if n == 0:
        return []
    if n == 1:
        return [items[0]]

    mid = n // 2
    left = merge_sort(items[:mid], key=key)
    right = merge_sort(items[mid:], key=key)
    return merge(left, right, key=key)


def merge(
    xs: List[T],
    ys: List[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """
    Combine sorted *xs* and *ys* into a fresh sorted list.

    Each step takes the smaller head; on a tie the head of *xs* wins, so
    merging the left half before the right half keeps merge_sort stable.
    Neither input is modified.

    >>> merge([5, 8, 9], [0, 2, 3, 6])
    [0, 2, 3, 5, 6, 8, 9]
    """
    merged: List[T] = []
    x = y = 0
    x_end = len(xs)
    y_end = len(ys)

    while x < x_end and y < y_end:
        x_head = xs[x]
        y_head = ys[y]
        if key is None:
            take_x = x_head <= y_head
        else:
            take_x = key(x_head) <= key(y_head)
        if take_x:
            merged.append(x_head)
            x += 1
        else:
            merged.append(y_head)
            y += 1

    # At most one side still has items, already in order
    merged.extend(xs[x:])
    merged.extend(ys[y:])
    return merged
