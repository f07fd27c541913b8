from typing import Iterable, List, Tuple

import numpy as np

from models.point import Point
from models.segment import Segment
from utils.tolerance import are_equal


class Polygon:
    """
    Ordered, implicitly closed vertex sequence.

    It supports:
      - edge derivation (edge i joins vertex i and vertex (i + 1) mod n)
      - boundary-inclusive point containment (edge check + ray casting)
      - bounds and numpy export for rendering

    Notes:
      • The closing vertex is never stored; the last edge wraps around.
      • Simplicity, winding and the vertex count are NOT checked here.
        Fewer than 3 vertices, zero-length edges or self-intersections
        give undefined results (see utils.validation for an opt-in check).
    """

    def __init__(self, vertices: Iterable[Point]):
        self._vertices: Tuple[Point, ...] = tuple(vertices)

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return self._vertices

    def __len__(self):
        return len(self._vertices)

    # ------------------------------------------------------------------
    # Equality (exact, by vertex sequence)
    # ------------------------------------------------------------------

    def __eq__(self, other):
        return isinstance(other, Polygon) and self._vertices == other._vertices

    def __hash__(self):
        return hash(("vertices", self._vertices))

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def edges(self) -> List[Segment]:
        """Recomputed on every call; nothing is cached."""
        n = len(self._vertices)
        return [
            Segment(self._vertices[i], self._vertices[(i + 1) % n])
            for i in range(n)
        ]

    # ------------------------------------------------------------------
    # Containment
    # ------------------------------------------------------------------

    def contains(self, point: Point) -> bool:
        """
        Boundary-inclusive point-in-polygon test.

        1. A point on any edge is inside.
        2. Otherwise cast a horizontal ray towards +x and count the
           edges it crosses:
             - horizontal edges are skipped (this also guards the
               division below)
             - edges whose y-range does not bracket point.y are skipped
             - a crossing at point.x itself is a boundary hit -> inside
        3. Inside iff the crossing count is odd.
        """
        if any(edge.contains(point) for edge in self.edges()):
            return True

        count = 0
        n = len(self._vertices)
        for i in range(n):
            v1 = self._vertices[i]
            v2 = self._vertices[(i + 1) % n]

            if are_equal(v1.y, v2.y):
                continue
            if point.y < min(v1.y, v2.y) or point.y > max(v1.y, v2.y):
                continue

            x_intersect = (point.y - v1.y) * (v2.x - v1.x) / (v2.y - v1.y) + v1.x
            if are_equal(x_intersect, point.x):
                return True
            if x_intersect > point.x:
                count += 1

        return count % 2 == 1

    # ------------------------------------------------------------------
    # Export helpers
    # ------------------------------------------------------------------

    def as_array(self) -> np.ndarray:
        """Read-only Nx2 float64 array of the vertices."""
        arr = np.array([v.as_tuple() for v in self._vertices], dtype=np.float64).reshape(-1, 2)
        arr.flags.writeable = False
        return arr

    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) of the vertices."""
        arr = self.as_array()
        min_x, min_y = arr.min(axis=0)
        max_x, max_y = arr.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)

    def __repr__(self):
        return f"Polygon({len(self._vertices)} vertices)"
