"""Axis-aligned 2D geometry used by the quadtree."""

from .geometry import Point, Quadrant, Rect

__all__ = ["Point", "Quadrant", "Rect"]
