from __future__ import annotations

import json

import pytest

from bmvote.benchmark.config import DEFAULT_SIZES, BenchmarkConfig, load_benchmark_config
from bmvote.foundation.exceptions import (
    ConfigFileNotFoundError,
    ConfigurationError,
    InvalidInputTypeError,
    InvalidParameterError,
    InvalidSizeError,
)


def test_defaults():
    config = BenchmarkConfig()
    assert config.sizes == DEFAULT_SIZES == (100, 1000, 10000, 100000)
    assert config.input_types == ("random", "sorted", "reverse-sorted", "nearly-sorted", "majority-heavy")
    assert config.warmup_runs == 5
    assert config.seed == 42


def test_lists_are_normalized_to_tuples():
    config = BenchmarkConfig(sizes=[5, 6], input_types=["sorted"])
    assert config.sizes == (5, 6)
    assert config.input_types == ("sorted",)


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"sizes": ()}, ConfigurationError),
        ({"sizes": (0,)}, InvalidSizeError),
        ({"sizes": (10, -5)}, InvalidSizeError),
        ({"input_types": ("zigzag",)}, InvalidInputTypeError),
        ({"warmup_runs": -1}, InvalidParameterError),
        ({"sizes": 100}, InvalidSizeError),
        ({"input_types": "sorted"}, InvalidInputTypeError),
        ({"seed": "abc"}, InvalidParameterError),
        ({"seed": True}, InvalidParameterError),
        ({"output_dir": 5}, InvalidParameterError),
    ],
)
def test_validation(kwargs, error):
    with pytest.raises(error):
        BenchmarkConfig(**kwargs)


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ConfigurationError, match="population"):
        BenchmarkConfig.from_mapping({"population": 3})


def test_with_overrides_ignores_none():
    config = BenchmarkConfig().with_overrides(seed=None, warmup_runs=2)
    assert config.warmup_runs == 2
    assert config.seed == 42


def test_load_json(tmp_path):
    path = tmp_path / "bench.json"
    path.write_text(json.dumps({"sizes": [10, 20], "warmup_runs": 0}), encoding="utf-8")
    config = BenchmarkConfig.from_mapping(load_benchmark_config(path))
    assert config.sizes == (10, 20)
    assert config.warmup_runs == 0


def test_load_yaml(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "bench.yaml"
    path.write_text("sizes: [7]\ninput_types: [sorted]\n", encoding="utf-8")
    assert load_benchmark_config(path) == {"sizes": [7], "input_types": ["sorted"]}


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigFileNotFoundError):
        load_benchmark_config(tmp_path / "missing.json")


def test_load_requires_mapping(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_benchmark_config(path)


def test_empty_path_means_no_overrides():
    assert load_benchmark_config(None) == {}


def test_load_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"sizes": [10], "warmup_runs": 0', encoding="utf-8")
    with pytest.raises(ConfigurationError, match="could not be parsed") as info:
        load_benchmark_config(path)
    assert info.value.details["path"] == str(path)


def test_load_malformed_yaml(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "broken.yaml"
    path.write_text("sizes: [10, 20\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="could not be parsed"):
        load_benchmark_config(path)
