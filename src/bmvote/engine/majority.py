"""
Boyer-Moore majority vote.

Finds the element occurring in strictly more than ``len(sequence) // 2``
positions, if any, in O(n) time and O(1) extra space:

1. Candidate selection: keep a ``(candidate, count)`` pair. When ``count`` is 0
   the current element becomes the candidate; a matching element increments
   the count, any other element decrements it. A true majority element cannot
   be cancelled out, because each decrement pairs it with a distinct
   non-majority element and there are fewer of those.
2. Verification: count the candidate's occurrences, stopping as soon as the
   count exceeds ``n // 2``.

All functions accept any random-access sequence of equality-comparable
elements (lists, tuples, numpy arrays, strings). Empty input means "no
majority" and is never an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from bmvote.foundation.exceptions import InvalidParameterError
from bmvote.foundation.metrics import OperationCounters, PerformanceRecord, RecordSink, track_performance

_NO_CANDIDATE = object()

ALGORITHM_NAME = "Boyer-Moore Majority Vote"


def _select_candidate(sequence: Sequence[Any], counters: OperationCounters | None) -> Any:
    candidate: Any = _NO_CANDIDATE
    count = 0
    reads = comparisons = allocations = 0
    for x in sequence:
        reads += 1
        if count == 0:
            candidate = x
            count = 1
            allocations += 1
        else:
            comparisons += 1
            if x == candidate:
                count += 1
            else:
                count -= 1
    if counters is not None:
        counters.array_accesses += reads
        counters.comparisons += comparisons
        counters.memory_allocations += allocations
    return candidate


def _is_majority(sequence: Sequence[Any], candidate: Any, counters: OperationCounters | None) -> bool:
    half = len(sequence) // 2
    occurrences = 0
    reads = 0
    for x in sequence:
        reads += 1
        if x == candidate:
            occurrences += 1
            if occurrences > half:
                break
    if counters is not None:
        counters.array_accesses += reads
        counters.comparisons += reads
    return occurrences > half


def _majority(sequence: Sequence[Any], counters: OperationCounters | None) -> tuple[bool, Any]:
    candidate = _select_candidate(sequence, counters)
    if candidate is _NO_CANDIDATE:
        return False, None
    if _is_majority(sequence, candidate, counters):
        return True, candidate
    return False, None


def find_majority(sequence: Sequence[Any], counters: OperationCounters | None = None) -> Any:
    """
    Return the strict majority element of ``sequence`` or ``None``.

    Args:
        sequence: Finite sequence of equality-comparable elements.
        counters: Optional per-call counters to fill with element reads,
            comparisons and candidate assignments.
    """
    _, value = _majority(sequence, counters)
    return value


def find_majority_assume_exists(sequence: Sequence[Any], counters: OperationCounters | None = None) -> Any:
    """
    Candidate selection only, without the verification pass.

    The caller guarantees that a strict majority element exists. If it does
    not, the returned element is unspecified (whatever candidate survived the
    scan). Empty input still returns ``None``.
    """
    candidate = _select_candidate(sequence, counters)
    return None if candidate is _NO_CANDIDATE else candidate


def has_majority(sequence: Sequence[Any]) -> bool:
    """True iff a strict majority element exists (even if that element is ``None``)."""
    found, _ = _majority(sequence, None)
    return found


def find_majority_approximate(
    sequence: Sequence[Any],
    *,
    sample_size: int = 64,
    threshold: float = 0.5,
    seed: int | np.random.Generator | None = None,
) -> Any:
    """
    Approximate majority check based on random sampling.

    Draws ``sample_size`` positions uniformly with replacement, selects a
    candidate from the sample and returns it when its frequency within the
    sample exceeds ``threshold``. Both false positives and false negatives are
    possible; use :func:`find_majority` when an exact answer is required.
    Falls back to the exact algorithm when the sample would cover the input.
    """
    if isinstance(sample_size, bool) or not isinstance(sample_size, (int, np.integer)) or sample_size < 1:
        raise InvalidParameterError("sample_size", sample_size, "an integer >= 1")
    if not 0.0 <= threshold < 1.0:
        raise InvalidParameterError("threshold", threshold, "a float in [0, 1)")

    n = len(sequence)
    if n == 0:
        return None
    if sample_size >= n:
        return find_majority(sequence)

    rng = np.random.default_rng(seed)
    positions = rng.integers(0, n, size=int(sample_size))
    sample = [sequence[int(i)] for i in positions]
    candidate = _select_candidate(sample, None)
    hits = sum(1 for x in sample if x == candidate)
    if hits / len(sample) > threshold:
        return candidate
    return None


@dataclass(frozen=True)
class VoteResult:
    """Outcome of a measured run: the value, whether it was found, and its metrics."""

    value: Any
    found: bool
    record: PerformanceRecord


class MajorityVoteEngine:
    """
    Stateless facade over the majority-vote functions.

    ``run`` measures a single call and returns a fresh ``PerformanceRecord``
    with the result; no counters live on the engine, so one instance can be
    shared freely.
    """

    name = ALGORITHM_NAME

    def find_majority(self, sequence: Sequence[Any]) -> Any:
        return find_majority(sequence)

    def find_majority_assume_exists(self, sequence: Sequence[Any]) -> Any:
        return find_majority_assume_exists(sequence)

    def has_majority(self, sequence: Sequence[Any]) -> bool:
        return has_majority(sequence)

    def run(
        self,
        sequence: Sequence[Any],
        *,
        input_type: str = "random",
        assume_exists: bool = False,
        collector: RecordSink | None = None,
    ) -> VoteResult:
        """
        Run one measured query.

        Args:
            sequence: Input sequence.
            input_type: Label stored on the record (e.g. the benchmark distribution).
            assume_exists: Skip verification (see :func:`find_majority_assume_exists`).
            collector: Optional sink that receives the finalized record.
        """
        with track_performance(self.name, len(sequence), input_type, collector=collector) as ctx:
            if assume_exists:
                candidate = _select_candidate(sequence, ctx.counters)
                found = candidate is not _NO_CANDIDATE
                value = candidate if found else None
            else:
                found, value = _majority(sequence, ctx.counters)
        assert ctx.record is not None
        return VoteResult(value=value, found=found, record=ctx.record)

    @staticmethod
    def complexity_analysis() -> str:
        return (
            "Boyer-Moore Majority Vote Algorithm Analysis:\n"
            "==========================================\n"
            "Time Complexity:\n"
            "  - Best Case: Θ(n) - candidate selection reads every element\n"
            "  - Worst Case: Θ(n) - at most two passes over the input\n"
            "  - Average Case: Θ(n)\n"
            "\n"
            "Space Complexity: O(1) - one candidate and one counter\n"
            "\n"
            "Algorithm Properties:\n"
            "  - Single candidate-selection pass plus verification pass\n"
            "  - Early termination once the candidate passes n/2\n"
            "  - Verification can be skipped when a majority is guaranteed\n"
            "\n"
            "Comparison with the naive O(n^2) approach:\n"
            "  - Space: O(1) vs O(1)\n"
            "  - Time: O(n) vs O(n^2)"
        )


__all__ = [
    "ALGORITHM_NAME",
    "MajorityVoteEngine",
    "VoteResult",
    "find_majority",
    "find_majority_assume_exists",
    "find_majority_approximate",
    "has_majority",
]
