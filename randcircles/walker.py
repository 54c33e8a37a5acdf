"""Random walks over circle attributes.

Each attribute (color, opacity, radius, x, y) follows its own rough
path: a noise function remapped onto a curve through the attribute's
waypoints. The paths are then zipped into one Circle per step.
"""

import logging
import numbers
from dataclasses import dataclass

import numpy as np

from .errors import InvalidConfiguration, MismatchedLengths
from .interpolate import interpolate_values, rescale
from .noise import build_noise

logger = logging.getLogger(__name__)

ATTRIBUTES = ("color", "opacity", "radius", "x", "y")

# Octaves summed for every rough path
NOISE_LEVELS = 4

# Empirical output range of NOISE_LEVELS summed octaves
NOISE_RANGE = (-1.2, 1.2)

# Roughness 0..1 maps onto this base frequency range
FREQUENCY_RANGE = (5, 15)


@dataclass(frozen=True)
class WalkConfig:
    """Configuration for a circle walk.

    Positions and radii are fractions of the canvas; colors are RGB
    tuples in 0-255. Every waypoint sequence needs at least two entries.
    """

    roughness: float = 0.5
    n_points: int = 100

    color: tuple = ((22, 30, 84), (241, 109, 52), (255, 152, 106))
    opacity: tuple = (0.3, 0.8)
    radius: tuple = (0.01, 0.06, 0.02)
    x: tuple = (0.1, 0.9)
    y: tuple = (0.1, 0.9)


@dataclass(frozen=True)
class Circle:
    """One step of the walk, ready for rendering."""
    x: float
    y: float
    radius: float
    color: tuple  # (r, g, b) integers in 0-255
    opacity: float


def _is_real(value):
    return isinstance(value, numbers.Real) and np.isfinite(value)


def _check_roughness(roughness):
    if not 0.0 <= roughness <= 1.0:
        raise InvalidConfiguration(f"roughness must be in [0, 1], got {roughness}")


def _check_waypoints(name, waypoints, arity=None):
    """Validate a waypoint sequence; arity None means scalar values."""
    if len(waypoints) < 2:
        raise InvalidConfiguration(
            f"{name}: need at least 2 waypoints, got {len(waypoints)}"
        )

    for i, value in enumerate(waypoints):
        if arity is None:
            if np.ndim(value) != 0:
                raise InvalidConfiguration(f"{name}[{i}]: expected a number, got {value!r}")
        elif np.ndim(value) != 1:
            raise InvalidConfiguration(f"{name}[{i}]: expected a tuple, got {value!r}")
        elif len(value) != len(waypoints[0]):
            raise MismatchedLengths(
                f"{name}[{i}]: expected {len(waypoints[0])} components, got {len(value)}"
            )

        components = (value,) if arity is None else value
        if not all(_is_real(c) for c in components):
            raise InvalidConfiguration(
                f"{name}[{i}]: expected finite numbers, got {value!r}"
            )

    if arity is not None and len(waypoints[0]) != arity:
        raise InvalidConfiguration(
            f"{name}: expected {arity} components per waypoint, got {len(waypoints[0])}"
        )


def validate_config(config):
    """Raise if config cannot produce a walk."""
    _check_roughness(config.roughness)
    if int(config.n_points) != config.n_points or config.n_points < 2:
        raise InvalidConfiguration(f"n_points must be an integer >= 2, got {config.n_points}")

    _check_waypoints("color", config.color, arity=3)
    for name in ("opacity", "radius", "x", "y"):
        _check_waypoints(name, getattr(config, name))


def rough_path(roughness, waypoints, xs, rng=None):
    """Return a noisy path that wanders between the given waypoints.

    Noise is evaluated at each x in xs (all in [0, 1]), rescaled from
    NOISE_RANGE to [0, 1], and used as the parameter of a linear curve
    through the waypoints. Higher roughness means a higher noise
    frequency and a more jagged path.

    Args:
        roughness: Float in [0, 1].
        waypoints: At least two numbers, or tuples of equal length.
        xs: Sample positions in [0, 1].
        rng: numpy RandomState for reproducibility.

    Returns:
        List with one entry per x: floats for scalar waypoints, tuples
        of floats for tuple waypoints.
    """
    _check_roughness(roughness)
    frequency = int(round(rescale((0, 1), FREQUENCY_RANGE, roughness)))

    path = interpolate_values(waypoints, mode="linear")
    noise = build_noise(frequency, NOISE_LEVELS, rng=rng)

    params = rescale(NOISE_RANGE, (0, 1), noise(np.asarray(xs, dtype=np.float64)))
    values = path(params)

    if path.scalar:
        return [float(v) for v in values]
    return [tuple(float(c) for c in row) for row in values]


def _to_rgb(color):
    return tuple(int(np.clip(round(c), 0, 255)) for c in color)


def walk(config, rng=None):
    """Generate config.n_points circles along independent rough paths.

    Args:
        config: WalkConfig.
        rng: numpy RandomState for reproducibility. One child stream is
            seeded from it per attribute, so attribute paths never share
            noise.

    Returns:
        List of Circle, one per step.
    """
    validate_config(config)
    if rng is None:
        rng = np.random.RandomState()

    xs = np.linspace(0, 1, int(config.n_points))
    seeds = rng.randint(0, 2**31 - 1, size=len(ATTRIBUTES))

    paths = {}
    for name, seed in zip(ATTRIBUTES, seeds):
        paths[name] = rough_path(config.roughness, getattr(config, name), xs,
                                 rng=np.random.RandomState(seed))

    lengths = {name: len(path) for name, path in paths.items()}
    if set(lengths.values()) != {len(xs)}:
        raise MismatchedLengths(f"rough path lengths disagree: {lengths}")

    logger.debug("walked %d steps at roughness %.3f", len(xs), config.roughness)

    return [
        Circle(x=x, y=y, radius=radius, color=_to_rgb(color), opacity=opacity)
        for color, opacity, radius, x, y in zip(*(paths[name] for name in ATTRIBUTES))
    ]
