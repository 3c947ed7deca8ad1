"""Tests for the in-place and allocating sequence transforms."""

import numpy as np
import pytest
from scipy import special

from logitkit import (
    METHODS,
    ContractViolation,
    logistic,
    logistic_inplace,
    logistic_vector,
    logit,
    logit_inplace,
    logit_vector,
    sample_log_odds,
    sample_probabilities,
    use_num_workers,
)

EXPECTED_LOGIT = np.array([-2.2608, 2.69298, -1.05468, 2.60097, 0.222041])


@pytest.mark.parametrize("method", METHODS)
def test_concrete_scenario(probabilities, method):
    log_odds = logit_vector(probabilities, method=method)
    # inputs are the 4-digit roundings of the draws behind EXPECTED_LOGIT
    np.testing.assert_allclose(log_odds, EXPECTED_LOGIT, atol=1e-3)

    recovered = logistic_vector(log_odds, method=method)
    np.testing.assert_allclose(recovered, probabilities, rtol=1e-9)


@pytest.mark.parametrize("method", METHODS)
@pytest.mark.parametrize("n_jobs", [1, 3])
def test_round_trip(rng, method, n_jobs):
    p = sample_probabilities(5000, rng)
    back = logistic_vector(logit_vector(p, n_jobs=n_jobs, method=method), n_jobs=n_jobs, method=method)
    np.testing.assert_allclose(back, p, rtol=1e-9)


@pytest.mark.parametrize("method", METHODS)
def test_edge_values(method):
    x = np.array([0.0, 1000.0, -1000.0, np.inf, -np.inf, np.nan])
    np.testing.assert_array_equal(logistic_vector(x, method=method), [0.5, 1.0, 0.0, 1.0, 0.0, np.nan])

    p = np.array([0.5, 0.0, 1.0, -0.5, 1.5, np.nan])
    np.testing.assert_array_equal(logit_vector(p, method=method), [0.0, -np.inf, np.inf, np.nan, np.nan, np.nan])


def test_vector_matches_scalar(rng):
    x = sample_log_odds(200, rng, scale=5.0)
    np.testing.assert_array_equal(logistic_vector(x), [logistic(v) for v in x])

    p = sample_probabilities(200, rng)
    np.testing.assert_array_equal(logit_vector(p), [logit(v) for v in p])


@pytest.mark.parametrize("method", ["numpy", "scipy"])
def test_methods_agree_with_loop(rng, method):
    x = sample_log_odds(2000, rng, scale=4.0)
    np.testing.assert_allclose(logistic_vector(x, method=method), logistic_vector(x), rtol=1e-12)

    p = sample_probabilities(2000, rng)
    np.testing.assert_allclose(logit_vector(p, method=method), special.logit(p), rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose(logit_vector(p, method=method), logit_vector(p), rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("method", METHODS)
def test_deterministic_across_worker_counts(rng, method):
    x = sample_log_odds(10_000, rng, scale=10.0)
    p = sample_probabilities(10_000, rng)

    base_logistic = logistic_vector(x, n_jobs=1, method=method)
    base_logit = logit_vector(p, n_jobs=1, method=method)
    for n_jobs in (2, 4):
        np.testing.assert_array_equal(logistic_vector(x, n_jobs=n_jobs, method=method), base_logistic)
        np.testing.assert_array_equal(logit_vector(p, n_jobs=n_jobs, method=method), base_logit)


@pytest.mark.slow
@pytest.mark.parametrize("n_jobs", [1, 2, 4, 8])
def test_deterministic_large_input(n_jobs):
    x = sample_log_odds(5_000_000, 7, scale=10.0)
    np.testing.assert_array_equal(logistic_vector(x, n_jobs=n_jobs), logistic_vector(x, n_jobs=1))


def test_worker_override_is_used(rng):
    x = sample_log_odds(1000, rng)
    with use_num_workers(3):
        threaded = logistic_vector(x)
    np.testing.assert_array_equal(threaded, logistic_vector(x, n_jobs=1))


class TestInplace:
    @pytest.mark.parametrize("method", METHODS)
    def test_true_inplace_matches_allocating(self, rng, method):
        x = sample_log_odds(1001, rng)
        expected = logistic_vector(x.copy(), method=method)

        out = logistic_inplace(x, x, n_jobs=2, method=method)
        assert out is x
        np.testing.assert_array_equal(x, expected)

    @pytest.mark.parametrize("method", METHODS)
    def test_true_inplace_logit_matches_allocating(self, rng, method):
        p = sample_probabilities(1001, rng)
        expected = logit_vector(p.copy(), method=method)

        logit_inplace(p, p, n_jobs=2, method=method)
        np.testing.assert_array_equal(p, expected)

    def test_disjoint_buffers(self, rng):
        src = sample_log_odds(50, rng)
        src_before = src.copy()
        dest = np.empty(50)

        assert logistic_inplace(dest, src) is dest
        np.testing.assert_array_equal(dest, logistic_vector(src))
        np.testing.assert_array_equal(src, src_before)

    @pytest.mark.parametrize("method", METHODS)
    @pytest.mark.parametrize("n_jobs", [1, 3])
    def test_partial_overlap(self, method, n_jobs):
        buf = np.linspace(-3.0, 3.0, 12)
        expected = logistic_vector(buf[:-1].copy(), method=method)

        logistic_inplace(buf[1:], buf[:-1], n_jobs=n_jobs, method=method)
        np.testing.assert_array_equal(buf[1:], expected)

    @pytest.mark.parametrize("method", METHODS)
    def test_length_mismatch_writes_nothing(self, method):
        dest = np.full(3, 7.0)
        with pytest.raises(ContractViolation):
            logistic_inplace(dest, [0.0, 1.0, 2.0, 3.0], method=method)
        np.testing.assert_array_equal(dest, [7.0, 7.0, 7.0])

        with pytest.raises(ContractViolation):
            logit_inplace(dest, [0.5, 0.5], method=method)
        np.testing.assert_array_equal(dest, [7.0, 7.0, 7.0])

    def test_list_destination(self):
        dest = [0.0] * 4
        out = logit_inplace(dest, [0.5, 0.0, 1.0, 2.0])
        assert out is dest
        assert dest[0] == 0.0
        assert dest[1] == -np.inf
        assert dest[2] == np.inf
        assert np.isnan(dest[3])

    def test_list_length_mismatch(self):
        dest = [1.0, 2.0]
        with pytest.raises(ContractViolation):
            logistic_inplace(dest, [0.0, 0.0, 0.0])
        assert dest == [1.0, 2.0]

    def test_strided_destination(self):
        backing = np.zeros(10)
        dest = backing[::2]
        logistic_inplace(dest, [0.0, 0.0, 1000.0, -1000.0, 0.0])

        np.testing.assert_array_equal(backing[::2], [0.5, 0.5, 1.0, 0.0, 0.5])
        np.testing.assert_array_equal(backing[1::2], np.zeros(5))

    def test_float32_destination(self):
        dest = np.zeros(3, dtype=np.float32)
        logistic_inplace(dest, [0.0, 1000.0, -1000.0])
        assert dest.dtype == np.float32
        np.testing.assert_array_equal(dest, np.array([0.5, 1.0, 0.0], dtype=np.float32))

    def test_two_dimensional_destination(self):
        x = np.zeros((2, 3))
        logistic_inplace(x, x)
        np.testing.assert_array_equal(x, np.full((2, 3), 0.5))


class TestVector:
    def test_returns_new_array(self):
        x = np.zeros(4)
        out = logistic_vector(x)
        assert out is not x
        assert not np.may_share_memory(out, x)
        np.testing.assert_array_equal(x, np.zeros(4))

    def test_accepts_lists(self):
        np.testing.assert_array_equal(logistic_vector([0.0, 1000.0]), [0.5, 1.0])

    def test_empty(self):
        for method in METHODS:
            assert logistic_vector([], n_jobs=4, method=method).shape == (0,)
            assert logit_inplace(np.empty(0), [], method=method).shape == (0,)

    def test_preserves_shape(self):
        p = np.full((3, 4), 0.5)
        out = logit_vector(p, n_jobs=2)
        assert out.shape == (3, 4)
        np.testing.assert_array_equal(out, np.zeros((3, 4)))

    def test_zero_dimensional(self):
        out = logistic_vector(0.0)
        assert out.shape == ()
        assert out == 0.5

    def test_integer_input(self):
        np.testing.assert_array_equal(logistic_vector(np.array([0, 0])), [0.5, 0.5])


class TestArgumentErrors:
    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown method"):
            logistic_vector([0.0], method="simd")
        with pytest.raises(ValueError, match="Unknown method"):
            logit_inplace(np.zeros(1), [0.5], method="cuda")

    @pytest.mark.parametrize("n_jobs", [0, -3])
    def test_invalid_n_jobs(self, n_jobs):
        dest = np.full(2, 7.0)
        with pytest.raises(ValueError, match="Worker count"):
            logistic_inplace(dest, [0.0, 0.0], n_jobs=n_jobs)
        np.testing.assert_array_equal(dest, [7.0, 7.0])
