import pytest

from models.line import Line
from models.point import Point, points_equal
from models.segment import Segment
from utils.tolerance import are_equal, is_between


# ---------------------------------------------------------------------
#  Tolerance
# ---------------------------------------------------------------------

def test_are_equal_uses_absolute_epsilon():
    assert are_equal(1.0, 1.0 + 5e-7)
    assert not are_equal(1.0, 1.0 + 2e-6)
    # absolute, not relative: large magnitudes get no extra slack
    assert not are_equal(1e9, 1e9 + 1e-3)


def test_are_equal_epsilon_override():
    assert are_equal(1.0, 1.05, epsilon=0.1)
    assert not are_equal(1.0, 1.05, epsilon=0.01)


def test_is_between_is_inclusive_and_order_free():
    assert is_between(0, 2, 0)
    assert is_between(0, 2, 2)
    assert is_between(2, 0, 1)
    assert not is_between(2, 0, 2.5)


# ---------------------------------------------------------------------
#  Point
# ---------------------------------------------------------------------

def test_points_equal_within_tolerance():
    assert points_equal(Point(1.0, 2.0), Point(1.0 + 1e-7, 2.0 - 1e-7))
    assert not points_equal(Point(1.0, 2.0), Point(1.0, 2.001))


def test_point_is_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 3.0


# ---------------------------------------------------------------------
#  Line
# ---------------------------------------------------------------------

def test_line_coefficients_from_points():
    line = Line.from_points(Point(1, 2), Point(3, 5))
    assert (line.a, line.b, line.c) == (3, -2, 1)


def test_line_contains():
    line = Line.from_points(Point(0, 0), Point(2, 2))
    assert line.contains(Point(1, 1))
    assert line.contains(Point(-5, -5))
    assert line.contains(Point(1, 1 + 1e-7))
    assert not line.contains(Point(1, 1.001))


def test_line_intersect_crossing_lines():
    diagonal = Line.from_points(Point(0, 0), Point(2, 2))
    anti = Line.from_points(Point(0, 2), Point(2, 0))
    point = diagonal.intersect(anti)
    assert point is not None
    assert point.x == pytest.approx(1.0)
    assert point.y == pytest.approx(1.0)


def test_line_intersect_parallel_returns_none():
    bottom = Line.from_points(Point(0, 0), Point(1, 0))
    top = Line.from_points(Point(0, 1), Point(1, 1))
    assert bottom.intersect(top) is None


def test_line_intersect_coincident_returns_none():
    first = Line.from_points(Point(0, 0), Point(1, 1))
    second = Line.from_points(Point(2, 2), Point(5, 5))
    assert first.intersect(second) is None


@pytest.mark.parametrize(
    "p1, p2, q1, q2",
    [
        ((0, 0), (1, 0), (0.5, -1), (0.5, 3)),
        ((-3, 7), (4, -2), (0, 0), (6, 1)),
        ((2.5, 1.25), (-1.75, 3.5), (10, -4), (-6, 8)),
        ((0, 0), (1, 1e-3), (0, 1), (1, 0)),
    ],
)
def test_line_intersection_lies_on_both_lines(p1, p2, q1, q2):
    first = Line.from_points(Point(*p1), Point(*p2))
    second = Line.from_points(Point(*q1), Point(*q2))
    point = first.intersect(second)
    assert point is not None
    assert first.contains(point)
    assert second.contains(point)


# ---------------------------------------------------------------------
#  Segment
# ---------------------------------------------------------------------

def test_segment_contains_endpoints_and_interior():
    seg = Segment(Point(0, 0), Point(4, 2))
    assert seg.contains(Point(0, 0))
    assert seg.contains(Point(4, 2))
    assert seg.contains(Point(2, 1))


def test_segment_rejects_points_beyond_endpoints():
    seg = Segment(Point(0, 0), Point(4, 2))
    # on the infinite line, outside the bounding box
    assert not seg.contains(Point(6, 3))
    assert not seg.contains(Point(-2, -1))


def test_segment_rejects_points_off_line():
    seg = Segment(Point(0, 0), Point(4, 2))
    assert not seg.contains(Point(2, 1.5))


def test_segment_bounding_box():
    seg = Segment(Point(3, -1), Point(-2, 5))
    assert seg.bounding_box() == (-2, -1, 3, 5)


def test_segment_intersect_crossing():
    first = Segment(Point(0, 0), Point(2, 2))
    second = Segment(Point(0, 2), Point(2, 0))
    point = first.intersect(second)
    assert point is not None
    assert points_equal(point, Point(1, 1))


def test_segment_intersect_is_symmetric():
    first = Segment(Point(-3, 1), Point(5, 2))
    second = Segment(Point(1, -4), Point(0.5, 6))
    forward = first.intersect(second)
    backward = second.intersect(first)
    assert forward is not None and backward is not None
    assert points_equal(forward, backward)


def test_segment_intersect_outside_extent_is_none():
    first = Segment(Point(0, 0), Point(1, 1))
    second = Segment(Point(3, 0), Point(2, 1))
    assert first.intersect(second) is None
    assert second.intersect(first) is None


def test_segment_intersect_at_endpoint():
    base = Segment(Point(0, 0), Point(2, 0))
    stem = Segment(Point(1, 0), Point(1, 1))
    point = base.intersect(stem)
    assert point is not None
    assert points_equal(point, Point(1, 0))


def test_segment_intersect_parallel_is_none():
    first = Segment(Point(0, 0), Point(2, 0))
    second = Segment(Point(1, 0), Point(3, 0))
    assert first.intersect(second) is None
