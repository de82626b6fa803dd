#!/usr/bin/env python3
"""Benchmark script for decochain performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of decochain package."""
    start = time.perf_counter()
    import decochain  # noqa: F401

    return time.perf_counter() - start


def benchmark_build(depth: int) -> float:
    """Measure building a chain of given depth."""
    from decochain.application.catalog import EPIC, ORC
    from decochain.application.chain import decorate

    start = time.perf_counter()
    decorate(ORC, *([EPIC] * depth))
    return time.perf_counter() - start


def benchmark_evaluate(depth: int) -> float:
    """Measure evaluating a chain of given depth."""
    from decochain.application.catalog import EPIC, ORC
    from decochain.application.chain import decorate
    from decochain.application.evaluator import evaluate

    head = decorate(ORC, *([EPIC] * depth))
    start = time.perf_counter()
    evaluate(head)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run decochain benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=10000,
        help="Decorator layers per chain",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": f"Build Chain (depth {args.depth})",
            "unit": "seconds",
            "value": benchmark_build(args.depth),
        },
        {
            "name": f"Evaluate Chain (depth {args.depth})",
            "unit": "seconds",
            "value": benchmark_evaluate(args.depth),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
