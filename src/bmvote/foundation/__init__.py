"""
Foundation layer: exceptions, logging setup, registries and metrics primitives.
"""

from __future__ import annotations

from .exceptions import BMVoteError
from .logging import configure_bmvote_logging
from .metrics import CSV_COLUMNS, OperationCounters, PerformanceRecord, track_performance
from .registry import Registry

__all__ = [
    "BMVoteError",
    "configure_bmvote_logging",
    "CSV_COLUMNS",
    "OperationCounters",
    "PerformanceRecord",
    "track_performance",
    "Registry",
]
