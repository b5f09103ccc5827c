"""Utility functions for point simulation and result checking.

This module provides support for:
- Simulating point datasets (uniform, clustered).
- Generating random rectangle query workloads.
- Answering range queries by linear scan, as a reference for the tree.
"""

from .utils import (
    brute_force_query,
    generate_points,
    generate_query_rects,
    make_rng,
)

__all__ = [
    "brute_force_query",
    "generate_points",
    "generate_query_rects",
    "make_rng",
]
