"""
Benchmark configuration.

Defaults reproduce the standard sweep; JSON/YAML files and CLI flags override
individual fields.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from bmvote.benchmark.generators import DEFAULT_SEED, INPUT_TYPES
from bmvote.foundation.exceptions import (
    ConfigFileNotFoundError,
    ConfigurationError,
    DependencyError,
    InvalidInputTypeError,
    InvalidParameterError,
    InvalidSizeError,
)

DEFAULT_SIZES: tuple[int, ...] = (100, 1000, 10000, 100000)


@dataclass(frozen=True)
class BenchmarkConfig:
    sizes: tuple[int, ...] = DEFAULT_SIZES
    input_types: tuple[str, ...] = INPUT_TYPES
    warmup_runs: int = 5
    seed: int = DEFAULT_SEED
    output_dir: str = "."

    def __post_init__(self) -> None:
        if not isinstance(self.sizes, (list, tuple)):
            raise InvalidSizeError(self.sizes, minimum=1)
        if not isinstance(self.input_types, (list, tuple)):
            raise InvalidInputTypeError(self.input_types, list(INPUT_TYPES))
        object.__setattr__(self, "sizes", tuple(self.sizes))
        object.__setattr__(self, "input_types", tuple(self.input_types))
        if not self.sizes:
            raise ConfigurationError("At least one input size is required.")
        for size in self.sizes:
            if isinstance(size, bool) or not isinstance(size, int) or size < 1:
                raise InvalidSizeError(size, minimum=1)
        for input_type in self.input_types:
            if input_type not in INPUT_TYPES:
                raise InvalidInputTypeError(input_type, list(INPUT_TYPES))
        if isinstance(self.warmup_runs, bool) or not isinstance(self.warmup_runs, int) or self.warmup_runs < 0:
            raise InvalidParameterError("warmup_runs", self.warmup_runs, "an integer >= 0")
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise InvalidParameterError("seed", self.seed, "an integer")
        if not isinstance(self.output_dir, (str, Path)):
            raise InvalidParameterError("output_dir", self.output_dir, "a directory path")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BenchmarkConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown benchmark config keys: {', '.join(unknown)}.",
                suggestion=f"Valid keys: {', '.join(sorted(known))}",
                details={"unknown": unknown},
            )
        return cls(**dict(data))

    def with_overrides(self, **overrides: Any) -> "BenchmarkConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir).expanduser()


def _unparsable(path: Path, exc: Exception) -> ConfigurationError:
    return ConfigurationError(
        f"Config file '{path}' could not be parsed: {exc}",
        suggestion="Fix the file syntax (JSON, or YAML for .yaml/.yml files)",
        details={"path": str(path)},
    )


def load_benchmark_config(path: str | Path | None) -> dict[str, Any]:
    """Read a JSON or YAML override file; an empty path yields no overrides."""
    if not path:
        return {}
    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise ConfigFileNotFoundError(str(cfg_path))
    if cfg_path.suffix.lower() in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dep
            raise DependencyError("PyYAML", "YAML benchmark configs", "pip install bmvote[yaml]") from exc
        try:
            with cfg_path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise _unparsable(cfg_path, exc) from exc
    else:
        try:
            with cfg_path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise _unparsable(cfg_path, exc) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file '{cfg_path}' must contain a mapping at the top level.")
    return data


__all__ = ["DEFAULT_SIZES", "BenchmarkConfig", "load_benchmark_config"]
