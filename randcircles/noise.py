"""Layered 1D value noise built from interpolated random samples."""

import logging

import numpy as np

from .errors import FrequencyTooLow
from .interpolate import interpolate_values

logger = logging.getLogger(__name__)

MIN_FREQUENCY = 3


def octaves(base_frequency, levels):
    """Return (point_count, amplitude) for each noise level.

    Level i samples base_frequency * 2^i points with amplitude 1 / 2^i.
    """
    return [(base_frequency * 2 ** i, 1.0 / 2 ** i) for i in range(levels)]


class NoiseFunction:
    """Sum of cubic interpolators over random samples, defined on [0, 1].

    Outputs cluster around [-1, 1] but are not bounded by it. The shape
    is fixed when the function is built; evaluating it never draws
    further randomness.
    """

    def __init__(self, frequency, levels, layers):
        self.frequency = frequency
        self.levels = levels
        self._layers = tuple(layers)

    def __call__(self, x):
        total = sum(layer(x) for layer in self._layers)
        if np.ndim(total) == 0:
            return float(total)
        return total


def build_noise(base_frequency, levels, rng=None):
    """Build a noise function over [0, 1].

    Args:
        base_frequency: Number of random points at the coarsest level.
            Must be an integer, at least 3 to fit a cubic interpolator.
        levels: Number of octaves to sum (>= 1).
        rng: numpy RandomState for reproducibility.

    Returns:
        NoiseFunction accepting a float or an array of floats.
    """
    if int(base_frequency) != base_frequency:
        raise ValueError(f"base frequency must be an integer, got {base_frequency}")
    if base_frequency < MIN_FREQUENCY:
        raise FrequencyTooLow(
            f"base frequency must be at least {MIN_FREQUENCY}, got {base_frequency}"
        )
    if levels < 1:
        raise ValueError(f"levels must be at least 1, got {levels}")
    base_frequency = int(base_frequency)

    if rng is None:
        rng = np.random.RandomState()

    layers = []
    for point_count, amplitude in octaves(base_frequency, levels):
        samples = rng.uniform(-amplitude, amplitude, point_count)
        layers.append(interpolate_values(samples, mode="cubic"))

    logger.debug("built noise: frequency=%d levels=%d", base_frequency, levels)
    return NoiseFunction(base_frequency, levels, layers)


def sample_noise(base_frequency, levels, n, rng=None):
    """Evaluate a freshly built noise function at n evenly spaced points."""
    noise = build_noise(base_frequency, levels, rng=rng)
    return noise(np.linspace(0, 1, n))
