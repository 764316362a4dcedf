from __future__ import annotations

import logging

import pytest

from bmvote import demo
from bmvote.engine.majority import MajorityVoteEngine


def test_run_examples_results():
    assert demo.run_examples(MajorityVoteEngine()) == [3, None, 42]


@pytest.mark.cli
def test_demo_main_logs_examples(caplog):
    with caplog.at_level(logging.INFO, logger="bmvote"):
        assert demo.main([]) == 0
    assert "Example 2: Array without majority element" in caplog.text
    assert "Majority element: None" in caplog.text
    assert "Input: [42]" in caplog.text
    assert "Boyer-Moore Majority Vote Algorithm Analysis" in caplog.text
