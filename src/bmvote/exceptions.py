"""
Public exceptions namespace; the classes live in bmvote.foundation.exceptions.
"""

from __future__ import annotations

from .foundation.exceptions import (
    BMVoteError,
    ConfigFileNotFoundError,
    ConfigurationError,
    DataError,
    DependencyError,
    InvalidInputTypeError,
    InvalidParameterError,
    InvalidSizeError,
    ResultExportError,
    ResultsNotFoundError,
    __all__,
)
