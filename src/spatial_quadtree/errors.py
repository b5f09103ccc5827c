"""Exceptions raised by the spatial quadtree."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spatial_quadtree.geometry import Point, Rect


class QuadtreeError(ValueError):
    """Base class for all quadtree errors."""


class InvalidConfiguration(QuadtreeError):
    """Raised when a tree or config section is built with invalid parameters."""


class OutOfBounds(QuadtreeError):
    """Raised when inserting a position that the root bounds do not contain."""

    def __init__(self, position: Point, bounds: Rect) -> None:
        self.position = position
        self.bounds = bounds
        msg = f"Position {position} out of bounds {bounds}."
        super().__init__(msg)
