"""Unit tests for points, rectangles, and quadrant routing."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from spatial_quadtree.geometry import Point, Quadrant, Rect


@pytest.mark.parametrize("point,expected", [
    (Point(0, 0), True),        # lower-left corner is inclusive
    (Point(1.9, 0.9), True),
    (Point(2, 0.5), False),     # right edge is exclusive
    (Point(1, 1), False),       # top edge is exclusive
    (Point(-0.1, 0.5), False),
    (Point(1, -0.1), False),
])
def test_rect_contains(point, expected):
    """Containment is half-open on both axes."""
    assert Rect(0, 0, 2, 1).contains(point) is expected


def test_zero_area_rect_contains_nothing():
    assert not Rect(1, 1, 0, 0).contains(Point(1, 1))
    assert not Rect(1, 1, 0, 5).contains(Point(1, 2))
    assert not Rect(1, 1, 5, 0).contains(Point(2, 1))


@pytest.mark.parametrize("other,expected", [
    (Rect(1, 1, 1, 1), True),
    (Rect(-1, -1, 5, 5), True),     # encloses
    (Rect(2, 0, 1, 2), False),      # touches the right edge
    (Rect(0, 2, 2, 1), False),      # touches the top edge
    (Rect(-1, 0, 1, 2), False),     # touches the left edge
    (Rect(5, 5, 1, 1), False),
])
def test_rect_overlaps(other, expected):
    """Overlap needs shared area; shared edges are not enough."""
    base = Rect(0, 0, 2, 2)
    assert base.overlaps(other) is expected
    assert other.overlaps(base) is expected


def test_extent_and_midpoint():
    r = Rect(-1, 2, 4, 6)
    assert r.extent == (-1, 2, 3, 8)
    assert r.midpoint == Point(1, 5)


def test_quadrant_bounds():
    """Quadrants halve width and height around the midpoint."""
    r = Rect(0, 0, 4, 2)
    assert r.quadrant_bounds(Quadrant.LOWER_LEFT) == Rect(0, 0, 2, 1)
    assert r.quadrant_bounds(Quadrant.UPPER_LEFT) == Rect(0, 1, 2, 1)
    assert r.quadrant_bounds(Quadrant.UPPER_RIGHT) == Rect(2, 1, 2, 1)
    assert r.quadrant_bounds(Quadrant.LOWER_RIGHT) == Rect(2, 0, 2, 1)
    assert r.quadrants() == tuple(r.quadrant_bounds(q) for q in Quadrant)


def test_quadrant_bounds_rejects_unknown():
    with pytest.raises(ValueError):
        Rect(0, 0, 1, 1).quadrant_bounds(7)


@pytest.mark.parametrize("point,expected", [
    (Point(0.5, 0.5), Quadrant.LOWER_LEFT),
    (Point(0.5, 1.5), Quadrant.UPPER_LEFT),
    (Point(1.5, 1.5), Quadrant.UPPER_RIGHT),
    (Point(1.5, 0.5), Quadrant.LOWER_RIGHT),
    (Point(1, 1), Quadrant.UPPER_RIGHT),    # midpoint goes right and up
    (Point(1, 0), Quadrant.LOWER_RIGHT),
    (Point(0, 1), Quadrant.UPPER_LEFT),
    (Point(2, 1), None),
    (Point(-1, -1), None),
])
def test_quadrant_of(point, expected):
    assert Rect(0, 0, 2, 2).quadrant_of(point) == expected


def test_quadrant_toward_skips_containment():
    """Routing only compares against the midpoint."""
    assert Rect(0, 0, 2, 2).quadrant_toward(Point(5, -5)) == Quadrant.LOWER_RIGHT


def test_geometry_is_immutable():
    with pytest.raises(AttributeError):
        Point(1, 2).x = 3
    with pytest.raises(AttributeError):
        Rect(0, 0, 1, 1).width = 2


coord = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)
size = st.floats(min_value=0, max_value=1e6, allow_nan=False)


@given(px=coord, py=coord, rx=coord, ry=coord, w=size, h=size)
def test_contains_matches_definition(px, py, rx, ry, w, h):
    """contains(r, p) holds exactly when r.x <= p.x < r.x+w and r.y <= p.y < r.y+h."""
    expected = rx <= px < rx + w and ry <= py < ry + h
    assert Rect(rx, ry, w, h).contains(Point(px, py)) is expected


@given(x=st.floats(min_value=0, max_value=1, exclude_max=True),
       y=st.floats(min_value=0, max_value=1, exclude_max=True))
def test_quadrants_partition_rect(x, y):
    """Every contained point lies in exactly one quadrant, the one routing picks."""
    r = Rect(0, 0, 1, 1)
    p = Point(x, y)
    holders = [q for q, sub in zip(Quadrant, r.quadrants()) if sub.contains(p)]
    assert holders == [r.quadrant_of(p)]


def test_from_extent():
    """Extents convert back to origin and size."""
    r = Rect.from_extent(-1, 2, 3, 8)
    assert r == Rect(-1, 2, 4, 6)
    assert r.extent == (-1, 2, 3, 8)
