"""Tests for min-max normalization of raw scores."""

import pytest

from core.scorer.normalization import DEGENERATE_SCORE, min_max_to_percent


def test_spreads_to_zero_and_hundred():
    assert min_max_to_percent([10.0, 20.0, 15.0]) == [0, 100, 50]


def test_preserves_input_order():
    assert min_max_to_percent([3.0, 1.0, 2.0]) == [100, 0, 50]


def test_rounds_half_up():
    # 1/8 -> 12.5 -> 13, 3/8 -> 37.5 -> 38
    assert min_max_to_percent([0.0, 1.0, 3.0, 8.0]) == [0, 13, 38, 100]


def test_negative_raw_scores():
    assert min_max_to_percent([-40.0, -10.0]) == [0, 100]


@pytest.mark.parametrize("raw", [[7.5], [3.0, 3.0], [-2.0, -2.0, -2.0]])
def test_degenerate_range_gives_fifty(raw):
    assert min_max_to_percent(raw) == [DEGENERATE_SCORE] * len(raw)


def test_empty_input():
    assert min_max_to_percent([]) == []


def test_returns_python_ints():
    assert all(type(s) is int for s in min_max_to_percent([1.0, 2.0, 4.0]))
