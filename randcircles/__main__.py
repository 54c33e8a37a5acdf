"""CLI entry point for randcircles."""

import argparse
import logging
from pathlib import Path

import numpy as np

from . import generate
from .color import hex_to_rgb
from .errors import RandCirclesError
from .noise import sample_noise
from .renderer import save


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Draw circles whose position, size, color and opacity follow random walks"
    )
    parser.add_argument(
        "--output", "-o", default="circles.svg",
        help="Output file path; .svg writes SVG, other extensions a raster image "
             "(default: circles.svg)"
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducible generation"
    )
    parser.add_argument(
        "--roughness", "-r", type=float, default=None,
        help="Path roughness 0.0-1.0 (default: 0.5)"
    )
    parser.add_argument(
        "--n-points", "-n", type=int, default=None,
        help="Number of circles (default: 100)"
    )
    parser.add_argument(
        "--width", "-W", type=int, default=800,
        help="Canvas width in pixels (default: 800)"
    )
    parser.add_argument(
        "--height", "-H", type=int, default=800,
        help="Canvas height in pixels (default: 800)"
    )
    parser.add_argument(
        "--background", "-b", default=None,
        help="Background hex color (default: transparent)"
    )
    parser.add_argument(
        "--color", nargs="+", default=None, metavar="HEX",
        help="Color waypoints as hex strings, e.g. 161e54 f16d34"
    )
    for name, what in (("x", "Horizontal position"), ("y", "Vertical position"),
                       ("radius", "Radius"), ("opacity", "Opacity")):
        parser.add_argument(
            f"--{name}", nargs="+", type=float, default=None, metavar="V",
            help=f"{what} waypoints (fractions of the canvas for x, y and radius)"
        )
    parser.add_argument(
        "--sample-noise", type=int, default=None, metavar="N",
        help="Print N samples of a noise function (frequency 10, 5 levels) and exit"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log debug output"
    )

    args = parser.parse_args(argv)
    if args.sample_noise is not None and args.sample_noise < 0:
        parser.error("--sample-noise must be >= 0")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.sample_noise is not None:
            rng = np.random.RandomState(args.seed)
            print(" ".join(f"{v:.4f}" for v in sample_noise(10, 5, args.sample_noise, rng=rng)))
            return

        kwargs = {}
        if args.roughness is not None:
            kwargs["roughness"] = args.roughness
        if args.n_points is not None:
            kwargs["n_points"] = args.n_points
        if args.color:
            kwargs["color"] = tuple(hex_to_rgb(c) for c in args.color)
        for name in ("x", "y", "radius", "opacity"):
            if getattr(args, name):
                kwargs[name] = tuple(getattr(args, name))

        circles = generate(seed=args.seed, **kwargs)
        output = save(circles, Path(args.output), args.width, args.height,
                      background=args.background)
    except RandCirclesError as e:
        parser.error(str(e))

    print(f"Saved {len(circles)} circles ({args.width}x{args.height}) to {output}")


if __name__ == "__main__":
    main()
