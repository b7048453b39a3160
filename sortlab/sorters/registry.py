"""
Sorter Registry
===============
Single table of the available sorters, used by the benchmark and charts.

In-place sorters mutate their argument and return None; allocating sorters
return a new list. `run_sorter` hides that difference from callers that
only want the sorted output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence

from sortlab.sort_errors import UnknownStrategyError
from sortlab.sorters.insertion_sort import insertion_sort
from sortlab.sorters.merge_sort import merge_sort
from sortlab.sorters.quicksort import quicksort


@dataclass(frozen=True)
class SorterSpec:
    name: str                 # registry key / CSV column prefix
    label: str                # human-readable name for reports
    fn: Callable[..., Any]
    in_place: bool            # mutates argument, returns None
    stable: bool
    quadratic: bool = False   # O(n^2) average case


SORTERS: Dict[str, SorterSpec] = {
    "insertion": SorterSpec("insertion", "insertion sort", insertion_sort,
                            in_place=True, stable=True, quadratic=True),
    "quicksort": SorterSpec("quicksort", "quicksort", quicksort,
                            in_place=True, stable=False),
    "merge": SorterSpec("merge", "merge sort", merge_sort,
                        in_place=False, stable=True),
}


def get_sorter(name: str) -> SorterSpec:
    try:
        return SORTERS[name]
    except KeyError:
        raise UnknownStrategyError(name, SORTERS, kind="sorter") from None


def run_sorter(spec: SorterSpec, seq: Sequence[Any]) -> List[Any]:
    """
    Sort *seq* with *spec* and return the sorted list.

    In-place sorters work on a copy, so *seq* is left untouched either way.
    """
    if spec.in_place:
        work = list(seq)
        spec.fn(work)
        return work
    return spec.fn(seq)
