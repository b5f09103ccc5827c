"""Utility functions for point simulation, query workloads, and reference checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.random import default_rng

from spatial_quadtree.geometry import Point, Rect

# Only import heavy types for type checking
if TYPE_CHECKING:
    from collections.abc import Iterable

    from numpy.random import Generator
    from numpy.typing import NDArray

    from spatial_quadtree.quad_tree import Entry


def make_rng(seed: int | None = None) -> Generator:
    """Create a numpy random generator, seeded when ``seed`` is given."""
    return default_rng(seed)


def _to_points(xs: NDArray[np.float64], ys: NDArray[np.float64], bounds: Rect) -> list[Point]:
    """Clip coordinates into the half-open bounds and wrap them as points."""
    xmin, ymin, xmax, ymax = bounds.extent
    xs = np.clip(xs, xmin, np.nextafter(xmax, xmin))
    ys = np.clip(ys, ymin, np.nextafter(ymax, ymin))
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def _sim_uniform(num_points: int, bounds: Rect, rng: Generator) -> list[Point]:
    """
    Sample points uniformly over the bounds.

    Args
    -----
        num_points (int): Number of points to simulate.
        bounds (Rect): Area to sample from.
        rng (Generator): Random generator.

    Returns
    -------
        List of points inside ``bounds``.
    """
    xs = bounds.x + rng.random(num_points) * bounds.width
    ys = bounds.y + rng.random(num_points) * bounds.height
    return _to_points(xs, ys, bounds)


def _sim_clustered(num_points: int, bounds: Rect, rng: Generator) -> list[Point]:
    """
    Sample points from two Gaussian clusters.

    Cluster centers sit at 25% and 75% of the bounds. Samples are clipped
    back inside the half-open bounds.

    Args
    -----
        num_points (int): Number of points to simulate.
        bounds (Rect): Area to sample from.
        rng (Generator): Random generator.

    Returns
    -------
        List of points inside ``bounds``.
    """
    centers = np.array([
        (bounds.x + bounds.width * 0.25, bounds.y + bounds.height * 0.25),
        (bounds.x + bounds.width * 0.75, bounds.y + bounds.height * 0.75),
    ])
    std = np.array([bounds.width * 0.1, bounds.height * 0.1])

    picks = centers[rng.integers(len(centers), size=num_points)]
    samples = rng.normal(picks, std)
    return _to_points(samples[:, 0], samples[:, 1], bounds)


def generate_points(
    num_points: int,
    bounds: Rect,
    distribution: str = "uniform",
    rng: Generator | None = None,
) -> list[Point]:
    """
    Generate simulated point positions.

    Args
    -----
        num_points (int): Number of points to simulate.
        bounds (Rect): Area to sample from. Must have positive width and height.
        distribution: One of 'uniform', 'clustered'.
        rng (Generator, optional): Random generator. A fresh one is used if None.

    Returns
    -------
        List of points inside ``bounds``.

    Raises
    ------
        ValueError: If the distribution is unknown.
    """
    dispatch = {
        "uniform": _sim_uniform,
        "clustered": _sim_clustered,
    }
    generator = dispatch.get(distribution)
    if generator is None:
        msg = f"Unknown distribution: {distribution!r}"
        raise ValueError(msg)

    return generator(num_points, bounds, rng if rng is not None else make_rng())


def generate_query_rects(
    num_rects: int,
    bounds: Rect,
    max_size: float,
    rng: Generator | None = None,
) -> list[Rect]:
    """
    Generate random query rectangles with their origin inside ``bounds``.

    Width and height are drawn from [0, max_size), so some rectangles may
    reach past the bounds.

    Args
    -----
        num_rects (int): Number of rectangles.
        bounds (Rect): Area the origins are drawn from.
        max_size (float): Upper limit for width and height.
        rng (Generator, optional): Random generator.

    Returns
    -------
        List of query rectangles.
    """
    rng = rng if rng is not None else make_rng()
    origins = _sim_uniform(num_rects, bounds, rng)
    sizes = rng.random((num_rects, 2)) * max_size
    return [
        Rect(p.x, p.y, float(w), float(h))
        for p, (w, h) in zip(origins, sizes)
    ]


def brute_force_query(entries: Iterable[Entry], bounds: Rect) -> list:
    """Scan ``entries`` linearly and return the payloads inside ``bounds``.

    Args
    -----
        entries (Iterable[Entry]): Stored entries.
        bounds (Rect): Query rectangle.

    Returns
    -------
        list: Payloads in iteration order.
    """
    return [e.payload for e in entries if bounds.contains(e.position)]
