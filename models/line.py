from dataclasses import dataclass
from typing import Optional

from models.point import Point
from utils.tolerance import are_equal


@dataclass(frozen=True)
class Line:
    """
    Infinite line in implicit form  a*x + b*y + c = 0.

    Supports:
      - construction from two points (from_points)
      - point-on-line test with the absolute epsilon
      - intersection with another line via Cramer's rule

    A line built from two coincident points has a = b = c = 0 and
    contains every point; callers must not build one.
    """

    a: float
    b: float
    c: float

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------
    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> "Line":
        return cls(
            a=p2.y - p1.y,
            b=p1.x - p2.x,
            c=p2.x * p1.y - p1.x * p2.y,
        )

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------
    def evaluate(self, point: Point) -> float:
        """Residual of the line equation at point (0 on the line)."""
        return self.a * point.x + self.b * point.y + self.c

    def contains(self, point: Point) -> bool:
        return are_equal(self.evaluate(point), 0)

    def intersect(self, other: "Line") -> Optional[Point]:
        """
        Unique intersection point, or None when the lines are parallel
        or coincident (determinant within epsilon of zero).
        """
        determinant = self.a * other.b - other.a * self.b
        if are_equal(determinant, 0):
            return None

        x = (self.b * other.c - other.b * self.c) / determinant
        y = (other.a * self.c - self.a * other.c) / determinant
        return Point(x, y)

    def __repr__(self):
        return f"Line({self.a}x + {self.b}y + {self.c} = 0)"
