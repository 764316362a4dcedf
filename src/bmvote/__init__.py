from importlib import metadata as _metadata

from .engine import (
    MajorityVoteEngine,
    VoteResult,
    find_majority,
    find_majority_approximate,
    find_majority_assume_exists,
    has_majority,
)
from .foundation.exceptions import BMVoteError
from .foundation.logging import configure_bmvote_logging
from .foundation.metrics import CSV_COLUMNS, OperationCounters, PerformanceRecord, track_performance
from .benchmark import (
    BenchmarkConfig,
    ResultsCollector,
    generate_input,
    run_benchmark,
)

try:
    __version__ = _metadata.version("bmvote")
except _metadata.PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.0.0+unknown"

__all__ = [
    "__version__",
    "MajorityVoteEngine",
    "VoteResult",
    "find_majority",
    "find_majority_approximate",
    "find_majority_assume_exists",
    "has_majority",
    "BMVoteError",
    "configure_bmvote_logging",
    "CSV_COLUMNS",
    "OperationCounters",
    "PerformanceRecord",
    "track_performance",
    "BenchmarkConfig",
    "ResultsCollector",
    "generate_input",
    "run_benchmark",
]
