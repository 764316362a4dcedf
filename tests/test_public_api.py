from __future__ import annotations

import bmvote


def test_all_names_resolve():
    for name in bmvote.__all__:
        assert hasattr(bmvote, name), name


def test_reference_oracle_not_exported():
    assert "find_majority_reference" not in bmvote.__all__
    assert not hasattr(bmvote, "find_majority_reference")


def test_top_level_quickstart():
    assert bmvote.find_majority([3, 2, 3, 4, 3, 3, 3]) == 3
    collector = bmvote.ResultsCollector()
    config = bmvote.BenchmarkConfig(sizes=(25,), input_types=("sorted",), warmup_runs=0)
    outcomes = bmvote.run_benchmark(config, collector=collector)
    assert outcomes[0].value == 1
    assert len(collector) == 1
