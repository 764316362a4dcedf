"""
Synthetic input distributions for the benchmark harness.

Each generator takes ``(size, rng)`` and returns an ``int64`` array. The set of
input types is closed; unknown labels raise ``InvalidInputTypeError``.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from bmvote.foundation.exceptions import InvalidInputTypeError, InvalidSizeError
from bmvote.foundation.registry import Registry

Generator = Callable[[int, np.random.Generator], np.ndarray]

INPUT_GENERATORS: Registry[Generator] = Registry(
    "input_generators",
    on_missing=lambda name, available: InvalidInputTypeError(name, available),
)

DEFAULT_SEED = 42


@INPUT_GENERATORS.register("random")
def random_input(size: int, rng: np.random.Generator) -> np.ndarray:
    """70% of the time a shuffled majority of one value in [0, 100); otherwise values spread over [0, size)."""
    if size == 0:
        return np.empty(0, dtype=np.int64)
    if rng.random() < 0.7:
        majority_value = int(rng.integers(0, 100))
        extra = int(rng.integers(0, size // 4)) if size >= 4 else 0
        majority_count = min(size, size // 2 + 1 + extra)
        data = np.full(size, majority_value, dtype=np.int64)
        rest = size - majority_count
        if rest:
            others = rng.integers(0, 99, size=rest)
            # skip over majority_value so the filler never matches it
            others = np.where(others >= majority_value, others + 1, others)
            data[majority_count:] = others
        rng.shuffle(data)
        return data
    return rng.integers(0, size, size=size, dtype=np.int64)


@INPUT_GENERATORS.register("sorted")
def sorted_input(size: int, rng: np.random.Generator) -> np.ndarray:
    """Majority value 1 in the leading ``size // 2 + 1`` slots, then increasing indices."""
    data = np.arange(size, dtype=np.int64)
    data[: size // 2 + 1] = 1
    return data


@INPUT_GENERATORS.register("reverse-sorted")
def reverse_sorted_input(size: int, rng: np.random.Generator) -> np.ndarray:
    """Decreasing values first, majority value 1 in the trailing ``size // 2 + 1`` slots."""
    majority_count = min(size, size // 2 + 1)
    data = size - np.arange(size, dtype=np.int64)
    data[size - majority_count :] = 1
    return data


@INPUT_GENERATORS.register("nearly-sorted")
def nearly_sorted_input(size: int, rng: np.random.Generator) -> np.ndarray:
    data = sorted_input(size, rng)
    if size == 0:
        return data
    for _ in range(max(1, size // 20)):
        i, j = rng.integers(0, size, size=2)
        data[i], data[j] = data[j], data[i]
    return data


@INPUT_GENERATORS.register("majority-heavy")
def majority_heavy_input(size: int, rng: np.random.Generator) -> np.ndarray:
    """80% of the slots hold 42, the rest are drawn from [1000, 2000)."""
    majority_count = int(size * 0.8)
    data = np.full(size, 42, dtype=np.int64)
    data[majority_count:] = rng.integers(1000, 2000, size=size - majority_count)
    rng.shuffle(data)
    return data


INPUT_GENERATORS.freeze()

INPUT_TYPES: tuple[str, ...] = tuple(INPUT_GENERATORS.names())


def available_input_types() -> tuple[str, ...]:
    return INPUT_TYPES


def generate_input(size: int, input_type: str, seed: int | np.random.Generator | None = DEFAULT_SEED) -> np.ndarray:
    """
    Build a benchmark input.

    Args:
        size: Number of elements (>= 0).
        input_type: One of ``available_input_types()``.
        seed: Seed or generator for ``numpy.random.default_rng``; the default
            makes every call for the same size and type reproducible.
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
        raise InvalidSizeError(size)
    generator = INPUT_GENERATORS.get(input_type)
    rng = np.random.default_rng(seed)
    return generator(int(size), rng)


__all__ = [
    "INPUT_GENERATORS",
    "INPUT_TYPES",
    "DEFAULT_SEED",
    "available_input_types",
    "generate_input",
]
