"""
Benchmark runner: sweeps sizes x input types and collects performance records.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator

from bmvote.benchmark.config import BenchmarkConfig
from bmvote.benchmark.generators import generate_input
from bmvote.engine.majority import MajorityVoteEngine
from bmvote.foundation.exceptions import ResultExportError
from bmvote.foundation.metrics import CSV_COLUMNS, PerformanceRecord


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class ResultsCollector:
    """
    Append-only log of performance records owned by the caller.

    Not synchronized; share one collector across threads only with external locking.
    """

    def __init__(self, records: Iterable[PerformanceRecord] = ()) -> None:
        self._records: list[PerformanceRecord] = list(records)

    def add(self, record: PerformanceRecord) -> None:
        self._records.append(record)

    def extend(self, records: Iterable[PerformanceRecord]) -> None:
        self._records.extend(records)

    @property
    def records(self) -> tuple[PerformanceRecord, ...]:
        return tuple(self._records)

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PerformanceRecord]:
        return iter(tuple(self._records))

    def export_csv(self, path: str | Path) -> Path:
        """Write all records to ``path`` with the fixed CSV header."""
        out = Path(path).expanduser()
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            with out.open("w", newline="", encoding="utf-8") as fh:
                writer = csv.writer(fh)
                writer.writerow(CSV_COLUMNS)
                for record in self._records:
                    writer.writerow(record.as_row())
        except OSError as exc:
            raise ResultExportError(str(out), str(exc)) from exc
        return out


@dataclass(frozen=True)
class BenchmarkOutcome:
    size: int
    input_type: str
    value: Any
    found: bool
    record: PerformanceRecord

    def describe(self) -> str:
        result = self.value if self.found else "None"
        return (
            f"  {self.input_type:<15}: {self.record.execution_time_ms:8.3f} ms | "
            f"{self.record.array_accesses:>8,} accesses | "
            f"{self.record.comparisons:>6,} comparisons | Result: {result}"
        )


def run_input_type(
    engine: MajorityVoteEngine,
    size: int,
    input_type: str,
    *,
    collector: ResultsCollector,
    warmup_runs: int = 5,
    seed: int | None = None,
) -> BenchmarkOutcome:
    """Generate one input, warm up, then record a single measured run."""
    data = generate_input(size, input_type, seed=seed).tolist()
    for _ in range(warmup_runs):
        engine.run(data, input_type=input_type)
    vote = engine.run(data, input_type=input_type, collector=collector)
    outcome = BenchmarkOutcome(
        size=size,
        input_type=input_type,
        value=vote.value,
        found=vote.found,
        record=vote.record,
    )
    _logger().info("%s", outcome.describe())
    return outcome


def run_single_size(
    size: int,
    config: BenchmarkConfig,
    *,
    collector: ResultsCollector,
    engine: MajorityVoteEngine | None = None,
) -> list[BenchmarkOutcome]:
    engine = engine or MajorityVoteEngine()
    _logger().info("Testing input size: %s", f"{size:,}")
    _logger().info("%s", "-" * 30)
    return [
        run_input_type(
            engine,
            size,
            input_type,
            collector=collector,
            warmup_runs=config.warmup_runs,
            seed=config.seed,
        )
        for input_type in config.input_types
    ]


def run_benchmark(
    config: BenchmarkConfig,
    *,
    collector: ResultsCollector,
    engine: MajorityVoteEngine | None = None,
) -> list[BenchmarkOutcome]:
    """Sweep every configured size and input type, appending records to ``collector``."""
    engine = engine or MajorityVoteEngine()
    outcomes: list[BenchmarkOutcome] = []
    for size in config.sizes:
        outcomes.extend(run_single_size(size, config, collector=collector, engine=engine))
    return outcomes


__all__ = [
    "ResultsCollector",
    "BenchmarkOutcome",
    "run_input_type",
    "run_single_size",
    "run_benchmark",
]
