"""
Sort Chart Generator
====================
Sweeps fixture sizes, times every sorter and writes comparison charts.
Run:  python generate_sort_charts.py --trials 3
Output: sort_charts/ folder with 2 PNG files.
"""

import sys
import os
import argparse
from typing import Dict, List

import numpy as np

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

import sortlab.benchmark as bench
from sortlab.benchmark import SortTiming, run_benchmark
from sortlab.sorters.registry import SORTERS

# ── Color Palette & Styling ─────────────────────────────────────
COLORS = {
    "insertion": "#FF6B6B",   # Coral Red
    "quicksort": "#51CF66",   # Emerald Green
    "merge":     "#339AF0",   # Sky Blue
}
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"

QUICK_SIZES = [10, 100, 1000]
FULL_SIZES = [10, 100, 500, 1000, 2000, 5000, 10000]


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def mean_times(results: Dict[int, List[SortTiming]]) -> Dict[str, Dict[int, float]]:
    """sorter -> size -> mean elapsed seconds (sizes a sorter skipped are absent)."""
    table: Dict[str, Dict[int, float]] = {}
    for size, timings in results.items():
        for name in SORTERS:
            samples = [t.elapsed_s for t in timings if t.sorter == name]
            if samples:
                table.setdefault(name, {})[size] = float(np.mean(samples))
    return table


# ── Chart Generators ────────────────────────────────────────────
def chart_scaling(results, out_dir):
    """Log-log line chart: mean sort time vs input size."""
    table = mean_times(results)
    fig, ax = plt.subplots(figsize=(10, 6))

    for name, by_size in table.items():
        sizes = sorted(by_size)
        ax.plot(sizes, [by_size[s] for s in sizes], "o-", label=SORTERS[name].label,
                color=COLORS.get(name), linewidth=2.5, markersize=7, zorder=3)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Input size (n)")
    ax.set_ylabel("Mean time (seconds)")
    ax.set_title("Scalability: Time vs Input Size", fontsize=16, pad=15)
    ax.legend()
    ax.grid(True, which="both", zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    path = os.path.join(out_dir, "1_scaling.png")
    fig.savefig(path)
    plt.close(fig)
    print("  Chart 1: Scaling")
    return path


def chart_largest_size(results, out_dir):
    """Bar chart: mean time per sorter at the largest size every sorter ran."""
    table = mean_times(results)
    common = set(results)
    for by_size in table.values():
        common &= set(by_size)
    if not common:
        print("  Chart 2: skipped (no size shared by all sorters)")
        return None
    size = max(common)

    names = list(table)
    times = [table[n][size] for n in names]
    x = np.arange(len(names))

    fig, ax = plt.subplots(figsize=(8, 6))
    bars = ax.bar(x, times, 0.5, color=[COLORS.get(n) for n in names],
                  edgecolor="none", alpha=0.9, zorder=3)
    for bar, t in zip(bars, times):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(),
                f"{t:.4f}s", ha="center", va="bottom",
                fontsize=10, fontweight="bold", color=TEXT_COLOR)

    ax.set_xticks(x)
    ax.set_xticklabels([SORTERS[n].label for n in names])
    ax.set_ylabel("Mean time (seconds)")
    ax.set_title(f"Sort Time at n={size}", fontsize=16, pad=15)
    ax.grid(axis="y", zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    path = os.path.join(out_dir, "2_largest_size.png")
    fig.savefig(path)
    plt.close(fig)
    print("  Chart 2: Largest Shared Size")
    return path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate Sort Comparison Charts")
    parser.add_argument("--trials", type=int, default=3,
                        help="Fixtures per size (default: 3)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible fixtures")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: fewer sizes for faster testing")
    parser.add_argument("--out-dir", type=str, default=None,
                        help="Output folder (default: ./sort_charts)")
    parser.add_argument("--debug", action="store_true", help="Print every run")
    args = parser.parse_args(argv)
    bench.DEBUG_MODE = args.debug

    out_dir = args.out_dir or os.path.join(os.path.dirname(os.path.abspath(__file__)), "sort_charts")
    os.makedirs(out_dir, exist_ok=True)

    setup_style()
    sizes = QUICK_SIZES if args.quick else FULL_SIZES

    print(f"  Sizes          : {sizes}")
    print(f"  Trials per size: {args.trials}")
    print(f"  Output folder  : {out_dir}")

    print("\nPhase 1/2: Running Benchmarks...")
    results = run_benchmark(sizes, trials=args.trials, seed=args.seed)

    print("\nPhase 2/2: Generating Charts...")
    chart_scaling(results, out_dir)
    chart_largest_size(results, out_dir)

    print(f"\nCharts saved to: {out_dir}")


if __name__ == "__main__":
    main()
