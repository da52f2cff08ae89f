#!/usr/bin/env python3
"""Benchmark script for filterkit performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import random
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of filterkit package."""
    start = time.perf_counter()
    import filterkit  # noqa: F401

    return time.perf_counter() - start


def benchmark_composed_filter() -> float:
    """Measure evaluation time of a nested filter over 100k integers."""
    from filterkit import ConjFilter, RandomFilter, membership_reject, not_, or_

    flt = ConjFilter(
        not_(membership_reject(range(0, 1000, 7))),
        or_(lambda x: x % 2 == 0, RandomFilter(0.5, random.Random(0))),
    )

    start = time.perf_counter()
    for i in range(100_000):
        flt(i % 1000)
    return time.perf_counter() - start


def benchmark_retain_all() -> float:
    """Measure in-place retain_all on a 100k-element list."""
    from filterkit import retain_all

    elems = list(range(100_000))
    start = time.perf_counter()
    retain_all(elems, lambda x: x % 3 == 0)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run filterkit benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": "Composed Filter (100k calls)",
            "unit": "seconds",
            "value": benchmark_composed_filter(),
        },
        {
            "name": "retain_all (100k elements)",
            "unit": "seconds",
            "value": benchmark_retain_all(),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
