"""
Errors raised by bmvote.

The engine itself never raises for ordinary input: an empty sequence or a
sequence without a majority is a normal result. Errors come from the
harness around it, and fall into three groups:

- ``ConfigurationError``: a rejected benchmark request, such as an unknown
  input distribution, a size below 1, an out-of-range parameter, or a config
  file that is missing or cannot be parsed. The CLI maps these to exit code 2.
- ``DataError``: results that cannot be read back or written to disk.
- ``DependencyError``: an optional extra (pandas, PyYAML) is needed but absent.

Each error carries a ``message``, an optional ``suggestion`` that is
appended to ``str(err)``, and a ``details`` dict with the offending values::

    try:
        config = BenchmarkConfig(sizes=(0,))
    except InvalidSizeError as err:
        logger.error("%s", err)
        bad_size = err.details["size"]
"""

from __future__ import annotations

from typing import Any


class BMVoteError(Exception):
    """
    Root of the bmvote error tree.

    ``details`` holds machine-readable context (the rejected size, the unknown
    label, the file path) so callers can react without parsing the message.
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(BMVoteError):
    """Raised when a benchmark request or configuration is invalid."""

    pass


class InvalidInputTypeError(ConfigurationError):
    """Raised when an unknown benchmark input type is requested."""

    def __init__(self, input_type: str, available: list[str]) -> None:
        message = f"Unknown input type '{input_type}'."
        suggestion = f"Available input types: {', '.join(available)}"
        super().__init__(message, suggestion, {"input_type": input_type, "available": available})


class InvalidSizeError(ConfigurationError):
    """Raised when a benchmark input size is out of range."""

    def __init__(self, size: Any, minimum: int = 0) -> None:
        message = f"Invalid input size {size!r}."
        suggestion = f"Input sizes must be integers >= {minimum}"
        super().__init__(message, suggestion, {"size": size, "minimum": minimum})


class InvalidParameterError(ConfigurationError):
    """Raised when an operation parameter is out of its accepted range."""

    def __init__(self, name: str, value: Any, expected: str) -> None:
        message = f"Invalid value {value!r} for '{name}'."
        suggestion = f"'{name}' must be {expected}"
        super().__init__(message, suggestion, {"name": name, "value": value})


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when a benchmark config file does not exist."""

    def __init__(self, path: str) -> None:
        message = f"Config file '{path}' not found."
        suggestion = "Check the path passed to --config"
        super().__init__(message, suggestion, {"path": path})


# =============================================================================
# Data/IO Errors
# =============================================================================


class DataError(BMVoteError):
    """Base class for data-related errors."""

    pass


class ResultsNotFoundError(DataError):
    """Raised when expected results files are missing."""

    def __init__(self, path: str) -> None:
        message = f"Results not found at '{path}'."
        suggestion = "Check the path or run the benchmark first"
        super().__init__(message, suggestion, {"path": path})


class ResultExportError(DataError):
    """Raised when benchmark results cannot be written to disk."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        message = f"Failed to export results to '{path}'."
        if reason:
            message += f" {reason}"
        suggestion = "Check that the output directory is writable"
        super().__init__(message, suggestion, {"path": path, "reason": reason})


# =============================================================================
# Dependency Errors
# =============================================================================


class DependencyError(BMVoteError):
    """Raised when an optional dependency is missing."""

    def __init__(self, package: str, feature: str, install_cmd: str | None = None) -> None:
        message = f"'{package}' is required for {feature} but not installed."
        install_cmd = install_cmd or f"pip install {package}"
        suggestion = f"Install with: {install_cmd}"
        super().__init__(message, suggestion, {"package": package, "feature": feature})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "BMVoteError",
    # Configuration
    "ConfigurationError",
    "InvalidInputTypeError",
    "InvalidSizeError",
    "InvalidParameterError",
    "ConfigFileNotFoundError",
    # Data/IO
    "DataError",
    "ResultsNotFoundError",
    "ResultExportError",
    # Dependencies
    "DependencyError",
]
