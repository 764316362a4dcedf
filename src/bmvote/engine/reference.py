"""
Quadratic majority oracle.

Counts every element against the whole sequence. Kept only as a differential
baseline for checking the linear algorithm; not part of the public API.
"""

from __future__ import annotations

from typing import Any, Sequence


def find_majority_reference(sequence: Sequence[Any]) -> Any:
    half = len(sequence) // 2
    for x in sequence:
        count = sum(1 for y in sequence if y == x)
        if count > half:
            return x
    return None


__all__ = ["find_majority_reference"]
