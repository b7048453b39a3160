import sys
import os
import csv
import random
import argparse
from typing import List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import sortlab.benchmark as bench
from sortlab.benchmark import SortTiming, run_sorter_on_copy, select_sorters, summarize
from sortlab.generators.random_array import generate_random_array
from sortlab.sort_errors import resolve_array_size, resolve_quadratic_limit
from sortlab.sorters.registry import get_sorter
from sortlab.validators import is_sorted


def run_trials(size: int, trials: int, sorter_names=None, seed=None, quadratic_limit=None):
    """
    Generate *trials* fixtures of *size* and run every sorter on each.
    O(n^2) sorters are left out above the quadratic limit.
    Returns (timings, first_fixture_sorted, skipped_names).
    """
    specs = select_sorters(sorter_names)
    limit = resolve_quadratic_limit(quadratic_limit)
    skipped = [spec.name for spec in specs if spec.quadratic and size > limit]
    specs = [spec for spec in specs if spec.name not in skipped]

    rng = random.Random(seed)
    timings: List[SortTiming] = []
    first_fixture_sorted = True

    for trial in range(trials):
        fixture = generate_random_array(size, 0, max(size, 1), rng=rng)
        if trial == 0:
            first_fixture_sorted = is_sorted(fixture)
        for spec in specs:
            timings.append(run_sorter_on_copy(spec, fixture, trial))

    return timings, first_fixture_sorted, skipped


def print_first_trial(timings: List[SortTiming], fixture_sorted: bool, skipped=()):
    """Per-sorter elapsed time and verdict for the first fixture."""
    first = [t for t in timings if t.trial == 0]
    for t in first:
        print(f"Elapsed time for {get_sorter(t.sorter).label} was {t.elapsed_s:.6f}s.")
    for name in skipped:
        print(f"Skipped {get_sorter(name).label}: n is above the quadratic limit.")
    print(f"Is the original, random list in order?: {fixture_sorted}")
    for t in first:
        print(f"Was {get_sorter(t.sorter).label} in order?: {t.sorted_ok}")


def print_summary(timings: List[SortTiming]):
    summary = summarize(timings)
    print("\nSummary Statistics:")
    print(f"{'Sorter':<16} | {'Runs':>5} | {'Success Rate':>12} | {'Avg Time (s)':>12} | "
          f"{'Min Time (s)':>12} | {'Max Time (s)':>12}")
    print("-" * 85)
    for name, stats in summary.items():
        print(f"{get_sorter(name).label:<16} | {stats['runs']:>5} | {stats['success_rate']:>11.1f}% | "
              f"{stats['avg_time']:>12.6f} | {stats['min_time']:>12.6f} | {stats['max_time']:>12.6f}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark Sorting Algorithms")
    parser.add_argument("--size", type=int, default=None,
                        help="Fixture size (default: $SORTLAB_SIZE or 1000)")
    parser.add_argument("--trials", type=int, default=1, help="Number of fixtures to run")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible fixtures")
    parser.add_argument("--sorters", type=str, default=None,
                        help="Comma-separated sorter names (default: all)")
    parser.add_argument("--output", type=str, default=None, help="Optional output CSV file")
    parser.add_argument("--debug", action="store_true", help="Print every run")

    args = parser.parse_args(argv)
    if args.trials < 1:
        parser.error("--trials must be at least 1")
    if args.size is not None and args.size < 1:
        parser.error("--size must be at least 1")
    bench.DEBUG_MODE = args.debug

    size = resolve_array_size(args.size)
    names = [n.strip() for n in args.sorters.split(",")] if args.sorters else None

    print(f"Starting Benchmark: {args.trials} trial(s), n={size}")
    timings, fixture_sorted, skipped = run_trials(size, args.trials, names, args.seed)

    print_first_trial(timings, fixture_sorted, skipped)
    if timings:
        print_summary(timings)

    if args.output and timings:
        rows = [t.as_row() for t in timings]
        with open(args.output, "w", newline="") as f:
            dict_writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            dict_writer.writeheader()
            dict_writer.writerows(rows)
        print(f"Results saved to {args.output}")

    return 0 if all(t.sorted_ok for t in timings) else 1


if __name__ == "__main__":
    sys.exit(main())
