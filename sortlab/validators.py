"""
Sort Validators
===============
Checks applied to sorter output: ordering, multiset preservation, and a
combined verdict in the (ok, reason) form used by the benchmark.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Optional, Sequence, Tuple

from sortlab.sorters.merge_sort import merge_sort


def is_sorted(seq: Sequence[Any], *, key: Optional[Callable[[Any], Any]] = None) -> bool:
    """
    True iff no adjacent pair is out of order (left > right).
    Stops at the first violation.
    """
    length = len(seq)
    if length < 2:
        return True

    for i in range(length - 1):
        left = seq[i]
        right = seq[i + 1]
        if key is not None:
            left, right = key(left), key(right)
        if left > right:
            return False
    return True


def is_permutation(before: Sequence[Any], after: Sequence[Any]) -> bool:
    """
    True when *after* holds exactly the same multiset of values as *before*.
    """
    if len(before) != len(after):
        return False
    try:
        return Counter(before) == Counter(after)
    except TypeError:
        # Unhashable elements: compare canonical orderings instead
        return merge_sort(before) == merge_sort(after)


def check_sort_result(before: Sequence[Any], after: Sequence[Any]) -> Tuple[bool, str]:
    """
    Validate a sorter's output against its input.
    Returns: (bool, reason)
    """
    if not is_permutation(before, after):
        return False, "Elements added, lost or altered"
    if not is_sorted(after):
        return False, "Not in non-decreasing order"
    return True, "OK"
