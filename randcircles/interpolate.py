"""Curve fitting through control points, plus simple range remapping.

Control-point values are either scalars or fixed-arity tuples (e.g. RGB
colors). Tuple values are split into components and each component gets
its own curve over the same x positions.
"""

import numpy as np
from scipy.interpolate import CubicSpline

from .errors import (
    InsufficientPoints,
    InvalidControlPoints,
    MismatchedLengths,
)

# Minimum number of control points per mode
MIN_POINTS = {"linear": 2, "cubic": 3}


def _as_components(values):
    """Split values into an (n, k) float array and a scalar flag."""
    scalar = np.ndim(values[0]) == 0
    arity = 1 if scalar else len(values[0])

    for i, value in enumerate(values):
        if scalar and np.ndim(value) == 0:
            continue
        if not scalar and np.ndim(value) == 1 and len(value) == arity:
            continue
        raise MismatchedLengths(
            f"value {i} ({value!r}) does not match the shape of "
            f"value 0 ({values[0]!r})"
        )

    components = np.asarray(values, dtype=np.float64).reshape(len(values), arity)
    return components, scalar


class Interpolator:
    """A curve passing through every control point.

    Args:
        points: Sequence of (x, y) pairs with strictly increasing x.
            y is a number or a fixed-arity tuple of numbers.
        mode: "linear" (piecewise linear) or "cubic" (natural cubic
            spline).

    Calling the interpolator with a number returns a float (or a tuple
    of floats for tuple-valued points); calling it with an array returns
    an array. Queries outside [min(x), max(x)] are clamped to the
    nearest end of the domain.
    """

    def __init__(self, points, mode="linear"):
        if mode not in MIN_POINTS:
            raise ValueError(f"unknown interpolation mode: {mode!r}")

        points = list(points)
        if len(points) < MIN_POINTS[mode]:
            raise InsufficientPoints(
                f"{mode} interpolation needs at least {MIN_POINTS[mode]} "
                f"control points, got {len(points)}"
            )

        xs = np.array([p[0] for p in points], dtype=np.float64)
        if np.any(np.diff(xs) <= 0):
            raise InvalidControlPoints("control point x values must be strictly increasing")

        ys, self.scalar = _as_components([p[1] for p in points])

        self.mode = mode
        self.xs = xs
        self.arity = ys.shape[1]

        # One curve per component, all sharing the same x positions
        self._curves = []
        for k in range(self.arity):
            column = ys[:, k]
            if mode == "cubic":
                self._curves.append(CubicSpline(xs, column, bc_type="natural"))
            else:
                self._curves.append(column)

    @property
    def domain(self):
        return float(self.xs[0]), float(self.xs[-1])

    def _evaluate(self, k, x):
        curve = self._curves[k]
        if self.mode == "cubic":
            return curve(x)
        return np.interp(x, self.xs, curve)

    def __call__(self, x):
        x = np.clip(np.asarray(x, dtype=np.float64), self.xs[0], self.xs[-1])
        values = [self._evaluate(k, x) for k in range(self.arity)]

        if np.ndim(x) == 0:
            if self.scalar:
                return float(values[0])
            return tuple(float(v) for v in values)

        if self.scalar:
            return values[0]
        return np.stack(values, axis=-1)


def interpolate(points, mode="linear"):
    """Return an Interpolator through the given (x, y) control points."""
    return Interpolator(points, mode)


def interpolate_values(values, mode="linear"):
    """Interpolate values placed evenly on [0, 1].

    The i-th of n values sits at x = i / (n - 1), so the result is a
    parametric curve that starts at values[0] and ends at values[-1].
    """
    values = list(values)
    xs = np.linspace(0, 1, len(values))
    return Interpolator(zip(xs, values), mode)


def rescale(input_range, output_range, x):
    """Given an x in input_range, remap it linearly to output_range.

    No clamping is applied: values outside input_range map outside
    output_range.
    """
    l1, h1 = input_range
    l2, h2 = output_range
    if h1 == l1:
        raise ValueError(f"empty input range: {input_range!r}")

    result = l2 + (np.asarray(x, dtype=np.float64) - l1) * (h2 - l2) / (h1 - l1)
    if np.ndim(result) == 0:
        return float(result)
    return result
