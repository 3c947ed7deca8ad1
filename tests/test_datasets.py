"""Tests for sample generation."""

import numpy as np
import pytest

from logitkit.datasets import sample_log_odds, sample_probabilities


def test_probabilities_in_open_unit_interval(rng):
    p = sample_probabilities(10_000, rng)
    assert p.shape == (10_000,)
    assert p.dtype == np.float64
    assert np.all((p > 0.0) & (p < 1.0))


def test_same_seed_same_samples():
    np.testing.assert_array_equal(sample_probabilities(100, 3), sample_probabilities(100, 3))
    np.testing.assert_array_equal(sample_log_odds(100, 3), sample_log_odds(100, 3))


def test_generator_state_advances(rng):
    first = sample_probabilities(10, rng)
    second = sample_probabilities(10, rng)
    assert not np.array_equal(first, second)


def test_generator_matches_seed():
    np.testing.assert_array_equal(
        sample_log_odds(50, np.random.default_rng(11), scale=2.0),
        sample_log_odds(50, 11, scale=2.0),
    )


def test_global_random_state_untouched():
    np.random.seed(0)
    before = np.random.get_state()[1].copy()
    sample_probabilities(100, 1)
    sample_log_odds(100, 1)
    np.testing.assert_array_equal(np.random.get_state()[1], before)


def test_shape_argument(rng):
    assert sample_log_odds((4, 5), rng).shape == (4, 5)
    assert sample_probabilities((2, 3), rng).shape == (2, 3)


def test_log_odds_scale(rng):
    wide = sample_log_odds(20_000, rng, scale=10.0)
    narrow = sample_log_odds(20_000, rng, scale=0.1)
    assert np.std(wide) > 10 * np.std(narrow)


@pytest.mark.parametrize("scale", [0.0, -1.0])
def test_log_odds_invalid_scale(scale):
    with pytest.raises(ValueError, match="scale must be positive"):
        sample_log_odds(10, 0, scale=scale)
