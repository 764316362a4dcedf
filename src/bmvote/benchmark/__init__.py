"""
Benchmark harness: synthetic inputs, configuration, runner and reports.
"""

from .config import DEFAULT_SIZES, BenchmarkConfig, load_benchmark_config
from .generators import INPUT_TYPES, available_input_types, generate_input
from .runner import BenchmarkOutcome, ResultsCollector, run_benchmark, run_input_type, run_single_size

__all__ = [
    "DEFAULT_SIZES",
    "BenchmarkConfig",
    "load_benchmark_config",
    "INPUT_TYPES",
    "available_input_types",
    "generate_input",
    "BenchmarkOutcome",
    "ResultsCollector",
    "run_benchmark",
    "run_input_type",
    "run_single_size",
]
