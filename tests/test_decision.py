"""
Tests for the first-max decision rule.
"""

from __future__ import annotations

import random

import numpy as np
import pytest

from tinyml_eval.evaluation.decision import argmax


def test_first_max_wins_on_tie():
    """Exact tie between index 0 and 2 resolves to 0."""
    assert argmax([0.5, 0.2, 0.5]) == 0


def test_later_tie_does_not_override():
    """A later equal value never replaces the current best."""
    assert argmax([0.1, 0.7, 0.7]) == 1
    assert argmax([1.0, 1.0, 1.0]) == 0


def test_single_class():
    assert argmax([-3.0]) == 0


def test_numpy_input():
    assert argmax(np.array([0.2, 0.3, 0.9])) == 2


def test_index_in_range_and_maximal():
    """Returned index is in range and its score is >= every other score."""
    rng = random.Random(7)
    for _ in range(200):
        n = rng.randint(1, 6)
        scores = [rng.choice([0.0, 0.25, 0.5, 1.0]) for _ in range(n)]
        idx = argmax(scores)
        assert 0 <= idx < n
        assert all(scores[idx] >= s for s in scores)
        assert scores.index(max(scores)) == idx


def test_empty_raises():
    with pytest.raises(ValueError, match="empty"):
        argmax([])
