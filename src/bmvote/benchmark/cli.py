"""
CLI for ``bmvote-benchmark``.

    bmvote-benchmark            sweep the preset sizes, export benchmark_results.csv
    bmvote-benchmark 50000      sweep one size, export benchmark_size_50000.csv
"""

from __future__ import annotations

import argparse
import logging
import sys

from bmvote.benchmark.config import BenchmarkConfig, load_benchmark_config
from bmvote.benchmark.generators import INPUT_TYPES
from bmvote.benchmark.runner import ResultsCollector, run_benchmark, run_single_size
from bmvote.engine.majority import MajorityVoteEngine
from bmvote.foundation.exceptions import ConfigurationError, DependencyError, ResultExportError
from bmvote.foundation.logging import configure_bmvote_logging

SWEEP_FILENAME = "benchmark_results.csv"


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"size must be a positive integer, got {value}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmvote-benchmark",
        description="Benchmark the Boyer-Moore majority vote over synthetic input distributions.",
        epilog="Examples:\n  bmvote-benchmark\n  bmvote-benchmark 50000",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("size", nargs="?", type=_positive_int, help="Run every input type for this size only.")
    parser.add_argument("--output-dir", "-o", help="Directory for the exported CSV (default: current directory).")
    parser.add_argument("--config", help="JSON/YAML file with BenchmarkConfig overrides.")
    parser.add_argument("--warmup", type=int, help="Unrecorded warm-up runs per input (default: 5).")
    parser.add_argument("--seed", type=int, help="Seed for the input generators (default: 42).")
    parser.add_argument("--input-types", nargs="+", choices=INPUT_TYPES, help="Subset of input types to run.")
    parser.add_argument("--summary", action="store_true", help="Print a per-input-type summary (requires pandas).")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def _resolve_config(args: argparse.Namespace) -> BenchmarkConfig:
    config = BenchmarkConfig.from_mapping(load_benchmark_config(args.config))
    return config.with_overrides(
        warmup_runs=args.warmup,
        seed=args.seed,
        output_dir=args.output_dir,
        input_types=tuple(args.input_types) if args.input_types else None,
        sizes=(args.size,) if args.size is not None else None,
    )


def _log_summary(collector: ResultsCollector, logger: logging.Logger) -> None:
    from bmvote.benchmark.report import records_to_frame, summarize

    try:
        table = summarize(records_to_frame(collector))
    except DependencyError as exc:
        logger.warning("%s", exc)
        return
    logger.info("")
    logger.info("%s", table.to_string(index=False))


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logger = configure_bmvote_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = _resolve_config(args)
    except (ConfigurationError, DependencyError) as exc:
        logger.error("%s", exc)
        return 2

    logger.info("Boyer-Moore Majority Vote Algorithm Benchmark")
    logger.info("%s", "=" * 46)

    engine = MajorityVoteEngine()
    collector = ResultsCollector()
    if args.size is not None:
        logger.info("Running benchmark for input size: %s", f"{args.size:,}")
        run_single_size(args.size, config, collector=collector, engine=engine)
        filename = f"benchmark_size_{args.size}.csv"
    else:
        logger.info("Running comprehensive benchmark...")
        logger.info("")
        run_benchmark(config, collector=collector, engine=engine)
        filename = SWEEP_FILENAME

    exit_code = 0
    try:
        path = collector.export_csv(config.output_path / filename)
        logger.info("Results exported to %s", path)
    except ResultExportError as exc:
        logger.error("%s", exc)
        exit_code = 1

    if args.summary:
        _log_summary(collector, logger)

    logger.info("")
    logger.info("%s", engine.complexity_analysis())
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
