"""randcircles - Generative art from random walks of circles."""

import logging

import numpy as np

from .walker import Circle, WalkConfig, walk
from .renderer import render_image, render_svg, save

__version__ = "0.1.0"
__all__ = ["generate", "walk", "Circle", "WalkConfig",
           "render_svg", "render_image", "save"]

logger = logging.getLogger(__name__)


def generate(seed=None, config=None, **kwargs):
    """Generate circles along independent random walks.

    Args:
        seed: Random seed for reproducible walks.
        config: WalkConfig to use. If None, one is built from kwargs.
        **kwargs: WalkConfig fields (roughness, n_points, color,
            opacity, radius, x, y).

    Returns:
        List of Circle.
    """
    if config is None:
        config = WalkConfig(**kwargs)
    elif kwargs:
        raise TypeError("pass either config or WalkConfig keyword arguments, not both")
    if seed is None:
        seed = np.random.randint(0, 2**31)

    logger.debug("generating walk with seed %d", seed)
    return walk(config, rng=np.random.RandomState(seed))
