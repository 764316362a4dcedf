from __future__ import annotations

from pathlib import Path
from typing import Iterable

from bmvote.foundation.exceptions import DependencyError, ResultsNotFoundError
from bmvote.foundation.metrics import CSV_COLUMNS, PerformanceRecord


def _import_pandas():
    try:
        import pandas as pd  # type: ignore
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise DependencyError("pandas", "benchmark reporting", "pip install bmvote[analysis]") from exc
    return pd


def records_to_frame(records: Iterable[PerformanceRecord]):
    """One row per record, columns in CSV order."""
    pd = _import_pandas()
    return pd.DataFrame([record.as_row() for record in records], columns=list(CSV_COLUMNS))


def load_results_csv(path: str | Path):
    pd = _import_pandas()
    csv_path = Path(path).expanduser()
    if not csv_path.exists():
        raise ResultsNotFoundError(str(csv_path))
    return pd.read_csv(csv_path)


def summarize(frame):
    """
    Aggregate runs per (InputType, InputSize).

    Adds per-element access and comparison ratios, which stay roughly constant
    across sizes for a linear algorithm, and the mean execution time in ms.
    """
    if frame.empty:
        return frame.iloc[0:0]
    grouped = (
        frame.groupby(["InputType", "InputSize"], sort=True)
        .agg(
            runs=("ExecutionTimeNs", "size"),
            array_accesses=("ArrayAccesses", "mean"),
            comparisons=("Comparisons", "mean"),
            mean_time_ms=("ExecutionTimeNs", lambda s: s.mean() / 1_000_000.0),
        )
        .reset_index()
    )
    sizes = grouped["InputSize"].where(grouped["InputSize"] > 0)
    grouped["accesses_per_element"] = grouped["array_accesses"] / sizes
    grouped["comparisons_per_element"] = grouped["comparisons"] / sizes
    return grouped


__all__ = ["records_to_frame", "load_results_csv", "summarize"]
