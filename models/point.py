from dataclasses import dataclass
from typing import Tuple

from utils.tolerance import are_equal


@dataclass(frozen=True)
class Point:
    """
    Immutable 2-D coordinate.

    The generated __eq__ is exact; geometric comparisons go through
    points_equal(), which applies the configured tolerance.
    """

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def points_equal(p: Point, q: Point) -> bool:
    """Component-wise equality within EPSILON."""
    return are_equal(p.x, q.x) and are_equal(p.y, q.y)
