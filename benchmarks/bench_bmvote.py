"""
Wall-clock micro-benchmarks for the majority-vote variants.

Run with:
  python benchmarks/bench_bmvote.py
"""
from __future__ import annotations

import time
from typing import Any, Callable

from bmvote.benchmark.generators import generate_input
from bmvote.engine.majority import find_majority, find_majority_approximate, find_majority_assume_exists
from bmvote.engine.reference import find_majority_reference


def _timeit(fn: Callable[[], Any], repeat: int = 3) -> float:
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        fn()
        end = time.perf_counter()
        best = min(best, end - start)
    return best


def main():
    variants: dict[str, Callable[[list[int]], Any]] = {
        "verified": find_majority,
        "assume-exists": find_majority_assume_exists,
        "approximate": lambda data: find_majority_approximate(data, sample_size=256, seed=0),
    }

    print("Majority vote micro-benchmarks (lower is better)")
    for size in (1_000, 10_000, 100_000):
        data = generate_input(size, "majority-heavy").tolist()
        for name, fn in variants.items():
            best = _timeit(lambda: fn(data))
            print(f"{name:<14} n={size:<7} {best * 1000:8.3f} ms (best-of-3)")
        if size <= 1_000:
            best = _timeit(lambda: find_majority_reference(data), repeat=1)
            print(f"{'reference':<14} n={size:<7} {best * 1000:8.3f} ms (single run)")


if __name__ == "__main__":
    main()
