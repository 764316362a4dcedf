"""
Per-call operation counters and performance records.

Counters are scoped to a single invocation: ``track_performance`` hands out a
fresh ``MetricsContext`` and finalizes an immutable ``PerformanceRecord`` on
exit. Nothing here is shared between calls; long-lived accumulation is the job
of a caller-owned collector (see ``bmvote.benchmark.runner.ResultsCollector``).
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Protocol

CSV_COLUMNS: tuple[str, ...] = (
    "Algorithm",
    "InputSize",
    "InputType",
    "ArrayAccesses",
    "Comparisons",
    "MemoryAllocations",
    "ExecutionTimeNs",
)


@dataclass
class OperationCounters:
    """Mutable counters filled in while a scan runs."""

    array_accesses: int = 0
    comparisons: int = 0
    memory_allocations: int = 0

    def reset(self) -> None:
        self.array_accesses = 0
        self.comparisons = 0
        self.memory_allocations = 0

    def snapshot(self) -> tuple[int, int, int]:
        return (self.array_accesses, self.comparisons, self.memory_allocations)


@dataclass(frozen=True)
class PerformanceRecord:
    """Result of one measured invocation."""

    algorithm: str
    input_size: int
    input_type: str
    array_accesses: int
    comparisons: int
    memory_allocations: int
    execution_time_ns: int

    @property
    def execution_time_ms(self) -> float:
        return self.execution_time_ns / 1_000_000.0

    def as_row(self) -> list[object]:
        """Values in ``CSV_COLUMNS`` order."""
        return [
            self.algorithm,
            self.input_size,
            self.input_type,
            self.array_accesses,
            self.comparisons,
            self.memory_allocations,
            self.execution_time_ns,
        ]

    def summary(self) -> str:
        return (
            f"Algorithm: {self.algorithm}\n"
            f"Input Size: {self.input_size} ({self.input_type})\n"
            f"Array Accesses: {self.array_accesses}\n"
            f"Comparisons: {self.comparisons}\n"
            f"Memory Allocations: {self.memory_allocations}\n"
            f"Execution Time: {self.execution_time_ms:.3f} ms\n"
            "Time Complexity: O(n)\n"
            "Space Complexity: O(1)"
        )


class RecordSink(Protocol):
    def add(self, record: PerformanceRecord) -> None: ...


@dataclass
class MetricsContext:
    algorithm: str
    input_size: int
    input_type: str
    counters: OperationCounters = field(default_factory=OperationCounters)
    record: PerformanceRecord | None = None


@contextmanager
def track_performance(
    algorithm: str,
    input_size: int,
    input_type: str,
    *,
    collector: RecordSink | None = None,
) -> Iterator[MetricsContext]:
    """
    Measure one invocation.

    Yields a context whose ``counters`` the measured code updates. On exit,
    including exit by exception, ``ctx.record`` holds the finalized record and,
    when ``collector`` is given, the record has been added to it.
    """
    ctx = MetricsContext(algorithm=algorithm, input_size=input_size, input_type=input_type)
    start = time.perf_counter_ns()
    try:
        yield ctx
    finally:
        elapsed = time.perf_counter_ns() - start
        accesses, comparisons, allocations = ctx.counters.snapshot()
        ctx.record = PerformanceRecord(
            algorithm=algorithm,
            input_size=input_size,
            input_type=input_type,
            array_accesses=accesses,
            comparisons=comparisons,
            memory_allocations=allocations,
            execution_time_ns=elapsed,
        )
        if collector is not None:
            collector.add(ctx.record)


__all__ = [
    "CSV_COLUMNS",
    "OperationCounters",
    "PerformanceRecord",
    "MetricsContext",
    "RecordSink",
    "track_performance",
]
