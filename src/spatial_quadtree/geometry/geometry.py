"""Point and rectangle value types with half-open containment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Quadrant(IntEnum):
    """Quadrants of a rectangle. The value indexes a node's children."""

    UPPER_LEFT = 0
    UPPER_RIGHT = 1
    LOWER_LEFT = 2
    LOWER_RIGHT = 3


@dataclass(frozen=True)
class Point:
    """A position in the plane. Y grows upwards."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle covering ``[x, x+width) x [y, y+height)``.

    The origin is the lower-left corner. Upper edges are exclusive, so a
    rectangle with zero width or height contains no point.

    Attributes
    ----------
        x, y: float
            Lower-left corner.
        width, height: float
            Extent along each axis. Expected to be non-negative.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_extent(cls, xmin: float, ymin: float, xmax: float, ymax: float) -> Rect:
        """Build a rectangle from (xmin, ymin, xmax, ymax) bounds."""
        return cls(xmin, ymin, xmax - xmin, ymax - ymin)

    @property
    def extent(self) -> tuple[float, float, float, float]:
        """Bounds as (xmin, ymin, xmax, ymax)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def midpoint(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, point: Point) -> bool:
        """Check whether ``point`` lies inside this rectangle (half-open)."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def overlaps(self, other: Rect) -> bool:
        """Check whether two rectangles share any area. Touching edges do not count."""
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )

    def quadrant_of(self, point: Point) -> Quadrant | None:
        """Find the quadrant holding ``point``.

        Points on the vertical midline go right and points on the horizontal
        midline go up.

        Returns
        -------
            Quadrant | None: The quadrant, or None if the point is outside.
        """
        if not self.contains(point):
            return None
        return self.quadrant_toward(point)

    def quadrant_toward(self, point: Point) -> Quadrant:
        """Pick a quadrant by comparing against the midpoint only, without a containment check."""
        mid = self.midpoint
        if point.x < mid.x:
            return Quadrant.LOWER_LEFT if point.y < mid.y else Quadrant.UPPER_LEFT
        return Quadrant.LOWER_RIGHT if point.y < mid.y else Quadrant.UPPER_RIGHT

    def quadrant_bounds(self, quadrant: Quadrant) -> Rect:
        """Calculate the bounds of one quadrant of this rectangle."""
        w = self.width / 2
        h = self.height / 2
        if quadrant == Quadrant.LOWER_LEFT:
            return Rect(self.x, self.y, w, h)
        if quadrant == Quadrant.UPPER_LEFT:
            return Rect(self.x, self.y + h, w, h)
        if quadrant == Quadrant.UPPER_RIGHT:
            return Rect(self.x + w, self.y + h, w, h)
        if quadrant == Quadrant.LOWER_RIGHT:
            return Rect(self.x + w, self.y, w, h)
        msg = f"Invalid quadrant {quadrant!r}"
        raise ValueError(msg)

    def quadrants(self) -> tuple[Rect, Rect, Rect, Rect]:
        """Split into four quadrants, ordered by ``Quadrant`` value."""
        return tuple(self.quadrant_bounds(q) for q in Quadrant)  # type: ignore[return-value]
