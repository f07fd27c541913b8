from dataclasses import dataclass
from typing import Optional, Tuple

from models.line import Line
from models.point import Point


@dataclass(frozen=True)
class Segment:
    """
    Bounded piece of a Line between two endpoints.

    Handles:
      • axis-aligned bounding box of the endpoints
      • point-on-segment test (line equation + inclusive bounding box)
      • segment/segment intersection
    """

    p1: Point
    p2: Point

    # -------------------------------------------------------------
    #   Geometry
    # -------------------------------------------------------------

    @property
    def line(self) -> Line:
        """Underlying infinite line, derived on every access."""
        return Line.from_points(self.p1, self.p2)

    @property
    def endpoints(self) -> Tuple[Point, Point]:
        return (self.p1, self.p2)

    def bounding_box(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)"""
        return (
            min(self.p1.x, self.p2.x),
            min(self.p1.y, self.p2.y),
            max(self.p1.x, self.p2.x),
            max(self.p1.y, self.p2.y),
        )

    # -------------------------------------------------------------
    #   Membership & intersection
    # -------------------------------------------------------------

    def contains(self, point: Point) -> bool:
        """
        The point must satisfy the line equation and fall inside the
        bounding box (bounds inclusive). Once on the line, being inside
        the box is the same as lying between the endpoints.
        """
        if not self.line.contains(point):
            return False

        min_x, min_y, max_x, max_y = self.bounding_box()
        return min_x <= point.x <= max_x and min_y <= point.y <= max_y

    def intersect(self, other: "Segment") -> Optional[Point]:
        """
        Intersection of the two underlying lines, kept only if it lies
        on both segments. Parallel or collinear segments give None.
        """
        candidate = self.line.intersect(other.line)
        if candidate is None:
            return None

        if self.contains(candidate) and other.contains(candidate):
            return candidate
        return None

    def __repr__(self):
        return f"Segment[({self.p1.x}, {self.p1.y}) - ({self.p2.x}, {self.p2.y})]"
