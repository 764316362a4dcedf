from __future__ import annotations

import numpy as np
import pytest

from bmvote.engine.majority import find_majority, find_majority_approximate
from bmvote.engine.reference import find_majority_reference
from bmvote.foundation.exceptions import InvalidParameterError


def test_reference_literal_cases():
    assert find_majority_reference([]) is None
    assert find_majority_reference([42]) == 42
    assert find_majority_reference([1, 1, 2, 2]) is None
    assert find_majority_reference([3, 2, 3, 4, 3, 3, 3]) == 3
    assert find_majority_reference([-1, -1, -1, 2, 2]) == -1


def test_approximate_finds_dominant_element():
    rng = np.random.default_rng(5)
    data = [42] * 9000 + rng.integers(1000, 2000, size=1000).tolist()
    rng.shuffle(data)
    assert find_majority_approximate(data, sample_size=256, seed=1) == 42


def test_approximate_rejects_uniform_spread():
    data = list(range(10_000))
    assert find_majority_approximate(data, sample_size=128, seed=3) is None


def test_approximate_is_reproducible_with_seed():
    rng = np.random.default_rng(9)
    data = rng.integers(0, 3, size=5000).tolist()
    first = find_majority_approximate(data, sample_size=50, threshold=0.3, seed=17)
    second = find_majority_approximate(data, sample_size=50, threshold=0.3, seed=17)
    assert first == second


def test_approximate_falls_back_to_exact_for_small_inputs():
    data = [1, 1, 2, 2]
    assert find_majority_approximate(data, sample_size=64) == find_majority(data) is None
    assert find_majority_approximate([7, 7, 1], sample_size=3) == 7


def test_approximate_empty():
    assert find_majority_approximate([], seed=0) is None


@pytest.mark.parametrize("kwargs", [{"sample_size": 0}, {"sample_size": True}, {"threshold": 1.0}, {"threshold": -0.1}])
def test_approximate_invalid_parameters(kwargs):
    with pytest.raises(InvalidParameterError):
        find_majority_approximate([1, 2, 3], **kwargs)
