"""
Sort Benchmark Engine
=====================
Times each registered sorter on a shared random fixture.

- One fixture per (size, trial), generated once and shared by all sorters
- In-place sorters get their own copy; merge sort gets the fixture itself
- Every result is checked for order and multiset preservation
- O(n^2) sorters are skipped above the configured quadratic limit
"""

from __future__ import annotations

import random
import time
from collections import defaultdict
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sortlab.generators.random_array import generate_random_array
from sortlab.sort_errors import resolve_quadratic_limit
from sortlab.sorters.registry import SORTERS, SorterSpec, get_sorter
from sortlab.validators import check_sort_result

# Verbose per-run output, toggled by --debug on the CLIs
DEBUG_MODE = False


@dataclass
class SortTiming:
    """Outcome of one sorter on one fixture."""
    sorter: str               # registry name
    size: int                 # fixture length
    trial: int                # trial index, 0-based
    elapsed_s: float          # wall-clock seconds (perf_counter)
    sorted_ok: bool           # output passed check_sort_result
    reason: str               # check_sort_result reason

    def as_row(self) -> Dict[str, Any]:
        return asdict(self)


def run_sorter_on_copy(spec: SorterSpec, fixture: Sequence[Any], trial: int = 0) -> SortTiming:
    """
    Run *spec* against *fixture* and time it.

    Only the sort itself is inside the timed window; copying the fixture
    for in-place sorters happens before the clock starts.
    """
    if spec.in_place:
        work = list(fixture)
        start = time.perf_counter()
        spec.fn(work)
        elapsed = time.perf_counter() - start
        output = work
    else:
        start = time.perf_counter()
        output = spec.fn(fixture)
        elapsed = time.perf_counter() - start

    ok, reason = check_sort_result(fixture, output)
    if DEBUG_MODE:
        print(f"[SORT DEBUG] {spec.name} n={len(fixture)} trial={trial} "
              f"{elapsed:.6f}s -> {reason}")

    return SortTiming(
        sorter=spec.name,
        size=len(fixture),
        trial=trial,
        elapsed_s=elapsed,
        sorted_ok=ok,
        reason=reason,
    )


def select_sorters(names: Optional[Iterable[str]] = None) -> List[SorterSpec]:
    """Resolve sorter names (all registered sorters when None)."""
    if names is None:
        return list(SORTERS.values())
    return [get_sorter(name) for name in names]


def run_benchmark(
    sizes: Iterable[int],
    trials: int = 1,
    sorters: Optional[Iterable[str]] = None,
    seed: Optional[int] = None,
    max_value: Optional[int] = None,
    quadratic_limit: Optional[int] = None,
) -> Dict[int, List[SortTiming]]:
    """
    Run every selected sorter on *trials* fixtures of each size.

    Fixture values are drawn from [0, size) unless *max_value* is given.
    Returns timings grouped by size, in run order.
    """
    specs = select_sorters(sorters)
    limit = resolve_quadratic_limit(quadratic_limit)
    rng = random.Random(seed)
    results: Dict[int, List[SortTiming]] = defaultdict(list)

    for size in sizes:
        upper = max_value if max_value is not None else max(size, 1)
        for trial in range(trials):
            fixture = generate_random_array(size, 0, upper, rng=rng)
            for spec in specs:
                if spec.quadratic and size > limit:
                    if DEBUG_MODE:
                        print(f"[SORT DEBUG] skipping {spec.name} at n={size} (limit {limit})")
                    continue
                results[size].append(run_sorter_on_copy(spec, fixture, trial))

    return dict(results)


def summarize(timings: Iterable[SortTiming]) -> Dict[str, Dict[str, float]]:
    """
    Aggregate timings per sorter: runs, avg/min/max seconds, success rate (%).
    """
    grouped: Dict[str, List[SortTiming]] = defaultdict(list)
    for t in timings:
        grouped[t.sorter].append(t)

    summary: Dict[str, Dict[str, float]] = {}
    for name, runs in grouped.items():
        times = [r.elapsed_s for r in runs]
        summary[name] = {
            "runs": len(runs),
            "avg_time": sum(times) / len(times),
            "min_time": min(times),
            "max_time": max(times),
            "success_rate": 100.0 * sum(1 for r in runs if r.sorted_ok) / len(runs),
        }
    return summary
