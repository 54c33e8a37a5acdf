"""Tests for layered 1D noise."""

import numpy as np
import pytest


class _NoDraws:
    """Random source that fails if anything is drawn from it."""

    def uniform(self, *args, **kwargs):
        raise AssertionError("randomness was consumed")


def test_octaves():
    from randcircles.noise import octaves
    assert octaves(3, 3) == [(3, 1.0), (6, 0.5), (12, 0.25)]


def test_frequency_too_low():
    from randcircles.noise import build_noise
    from randcircles.errors import FrequencyTooLow
    with pytest.raises(FrequencyTooLow):
        build_noise(base_frequency=2, levels=1, rng=_NoDraws())


def test_levels_must_be_positive():
    from randcircles.noise import build_noise
    with pytest.raises(ValueError):
        build_noise(base_frequency=5, levels=0, rng=_NoDraws())


def test_single_level_hits_samples():
    from randcircles.noise import build_noise
    samples = np.random.RandomState(0).uniform(-1, 1, 3)
    noise = build_noise(base_frequency=3, levels=1, rng=np.random.RandomState(0))
    np.testing.assert_allclose(noise(np.array([0.0, 0.5, 1.0])), samples, atol=1e-12)


def test_reproducibility():
    from randcircles.noise import build_noise
    xs = np.linspace(0, 1, 101)
    a = build_noise(3, 1, rng=np.random.RandomState(42))
    b = build_noise(3, 1, rng=np.random.RandomState(42))
    np.testing.assert_array_equal(a(xs), b(xs))


def test_different_seeds_differ():
    from randcircles.noise import build_noise
    xs = np.linspace(0, 1, 101)
    a = build_noise(10, 4, rng=np.random.RandomState(1))
    b = build_noise(10, 4, rng=np.random.RandomState(2))
    assert not np.array_equal(a(xs), b(xs))


def test_evaluation_is_stable():
    """Evaluating twice gives the same answer; no resampling."""
    from randcircles.noise import build_noise
    noise = build_noise(8, 3, rng=np.random.RandomState(5))
    first = noise(0.37)
    assert isinstance(first, float)
    assert noise(0.37) == first


def test_noise_stays_near_unit_range():
    from randcircles.noise import sample_noise
    values = sample_noise(10, 5, 500, rng=np.random.RandomState(3))
    assert values.shape == (500,)
    # Sum of amplitudes is < 2, so the knots are bounded; splines
    # overshoot a little between them.
    assert np.abs(values).max() < 3.0


def test_noise_metadata():
    from randcircles.noise import build_noise
    noise = build_noise(7, 2, rng=np.random.RandomState(0))
    assert noise.frequency == 7
    assert noise.levels == 2


def test_frequency_must_be_integer():
    from randcircles.noise import build_noise
    with pytest.raises(ValueError):
        build_noise(base_frequency=3.7, levels=1, rng=_NoDraws())


def test_integral_float_frequency_accepted():
    from randcircles.noise import build_noise
    noise = build_noise(base_frequency=4.0, levels=1, rng=np.random.RandomState(0))
    assert noise.frequency == 4
