"""Exceptions raised by randcircles."""


class RandCirclesError(ValueError):
    """Base class for all randcircles errors."""


class FrequencyTooLow(RandCirclesError):
    """Noise base frequency is too low to fit a cubic interpolator."""


class InsufficientPoints(RandCirclesError):
    """Not enough control points for the requested interpolation mode."""


class InvalidControlPoints(RandCirclesError):
    """Control point x-coordinates are not strictly increasing."""


class MismatchedLengths(RandCirclesError):
    """Sequences (or value arities) that must agree in length do not."""


class InvalidConfiguration(RandCirclesError):
    """A walk configuration is outside its valid range."""


class InvalidColor(RandCirclesError):
    """A color string could not be parsed."""
