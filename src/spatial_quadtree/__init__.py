"""Dynamic point quadtree with rectangle range queries."""

from .errors import InvalidConfiguration, OutOfBounds, QuadtreeError
from .geometry import Point, Quadrant, Rect
from .quad_tree import Entry, Quadtree, TreeNode

__all__ = [
    "Entry",
    "InvalidConfiguration",
    "OutOfBounds",
    "Point",
    "Quadrant",
    "Quadtree",
    "QuadtreeError",
    "Rect",
    "TreeNode",
]
