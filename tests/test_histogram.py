"""
Unit tests for HistogramEstimator and its factory.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from foretpe import (
    ConfigError,
    HistogramEstimatorFactory,
    OutOfRangeError,
    SamplingError,
    histogram_estimator_factory,
    make_categorical_range,
    make_continuous_range,
)


@pytest.mark.unit
def test_no_observations_give_uniform_mass():
    """With no data every category has probability 1 / size."""
    est = histogram_estimator_factory().build([], None, make_categorical_range(4))

    np.testing.assert_allclose(est.probabilities, [0.25] * 4)
    assert est.size == 4


@pytest.mark.unit
def test_laplace_smoothing_of_counts():
    """Each category gets alpha added before normalising."""
    est = histogram_estimator_factory().build([0, 0, 2], None, make_categorical_range(4))

    np.testing.assert_allclose(est.counts, [2.0, 0.0, 1.0, 0.0])
    np.testing.assert_allclose(est.weight_sums, [2.0, 0.0, 1.0, 0.0])
    np.testing.assert_allclose(est.probabilities, np.array([3.0, 1.0, 2.0, 1.0]) / 7.0)


@pytest.mark.unit
def test_weighted_counts():
    """Weights accumulate per category while counts track raw occurrences."""
    est = HistogramEstimatorFactory(alpha=0.5).build(
        [1, 1, 0], [2.0, 0.5, 1.0], make_categorical_range(3)
    )

    np.testing.assert_allclose(est.counts, [1.0, 2.0, 0.0])
    np.testing.assert_allclose(est.weight_sums, [1.0, 2.5, 0.0])
    np.testing.assert_allclose(est.probabilities, np.array([1.5, 3.0, 0.5]) / 5.0)


@pytest.mark.unit
@pytest.mark.parametrize("size", [1, 2, 7, 50])
def test_probabilities_sum_to_one_and_stay_positive(size, rng):
    """Smoothed probabilities sum to 1 and unseen categories keep positive mass."""
    values = list(rng.integers(0, size, size=3 * size)[: max(1, size // 2)])
    est = histogram_estimator_factory().build(values, None, make_categorical_range(size))

    assert est.probabilities.sum() == pytest.approx(1.0)
    assert np.all(est.probabilities > 0)


@pytest.mark.unit
def test_log_pdf_and_probability():
    """log_pdf is the log of the smoothed probability, -inf outside the range."""
    est = histogram_estimator_factory().build([0, 0, 2], None, make_categorical_range(4))

    assert est.log_pdf(0) == pytest.approx(math.log(3.0 / 7.0))
    assert est.log_pdf(2.0) == pytest.approx(math.log(2.0 / 7.0))
    assert est.log_pdf(np.int64(3)) == pytest.approx(math.log(1.0 / 7.0))
    assert est.log_pdf(4) == -math.inf
    assert est.log_pdf(-1) == -math.inf
    assert est.probability(4) == 0.0


@pytest.mark.unit
def test_sampling_inverts_cumulative_mass(constant_rng):
    """A uniform draw maps onto the category whose cumulative bucket contains it."""
    est = histogram_estimator_factory().build([0, 0, 2], None, make_categorical_range(4))
    # cumulative mass: 3/7, 4/7, 6/7, 1

    assert est.sample(constant_rng(u=0.0)) == 0
    assert est.sample(constant_rng(u=0.5)) == 1
    assert est.sample(constant_rng(u=0.8)) == 2
    assert est.sample(constant_rng(u=0.99)) == 3
    assert isinstance(est.sample(constant_rng(u=0.5)), int)


@pytest.mark.unit
def test_sampling_frequencies_follow_probabilities(rng):
    """Empirical frequencies approach the smoothed probabilities."""
    est = histogram_estimator_factory().build([1] * 8, None, make_categorical_range(3))
    draws = np.array([est.sample(rng) for _ in range(5000)])
    freq = np.bincount(draws, minlength=3) / draws.size

    np.testing.assert_allclose(freq, est.probabilities, atol=0.03)


@pytest.mark.unit
def test_build_rejects_out_of_range_values():
    """Categories outside [0, size) raise OutOfRangeError."""
    with pytest.raises(OutOfRangeError):
        histogram_estimator_factory().build([3], None, make_categorical_range(3))


@pytest.mark.unit
def test_build_rejects_bad_weights():
    """Misaligned or non-positive weights raise SamplingError."""
    r = make_categorical_range(3)
    with pytest.raises(SamplingError):
        histogram_estimator_factory().build([0, 1], [1.0], r)
    with pytest.raises(SamplingError):
        histogram_estimator_factory().build([0, 1], [1.0, 0.0], r)


@pytest.mark.unit
def test_factory_rejects_continuous_range():
    """The histogram factory only accepts categorical ranges."""
    factory = histogram_estimator_factory()

    assert not factory.supports(make_continuous_range(0.0, 1.0))
    with pytest.raises(ConfigError):
        factory.build([], None, make_continuous_range(0.0, 1.0))


@pytest.mark.unit
@pytest.mark.parametrize("alpha", [0.0, -1.0, math.nan])
def test_factory_validates_alpha(alpha):
    """alpha must be a finite positive pseudo-count."""
    with pytest.raises(ConfigError):
        HistogramEstimatorFactory(alpha=alpha)
