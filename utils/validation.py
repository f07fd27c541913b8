"""
Opt-in precondition checks for polygons.

The classifier assumes simple polygons and never checks them itself.
This module provides:
    • find_polygon_defects(polygon)  -> list of human-readable problems
    • check_polygon(polygon)         -> raises PolygonPreconditionError

Used by classifiers.polygon_classifier.classify(..., strict=True).
"""

from typing import List

from models.point import points_equal
from models.polygon import Polygon


class PolygonPreconditionError(ValueError):
    """A polygon violates the simple-polygon preconditions."""


# ----------------------------------------------------------------------
#  DEFECT DETECTION
# ----------------------------------------------------------------------

def find_polygon_defects(polygon: Polygon) -> List[str]:
    """
    Looks for:
      - fewer than 3 vertices
      - zero-length edges (coincident consecutive vertices, wrap included)
      - self-intersections: non-adjacent edges sharing any point, or
        adjacent edges meeting anywhere besides their common vertex
    """
    defects = []
    n = len(polygon)

    if n < 3:
        defects.append(f"polygon needs at least 3 vertices, got {n}")
        return defects

    edges = polygon.edges()

    degenerate = set()
    for i, edge in enumerate(edges):
        if points_equal(edge.p1, edge.p2):
            degenerate.add(i)
            defects.append(f"edge {i} has zero length at ({edge.p1.x}, {edge.p1.y})")

    # Lines of zero-length edges are meaningless; skip them, and treat the
    # edges on either side of a skipped run as neighbours
    live = [i for i in range(n) if i not in degenerate]
    m = len(live)
    for a in range(m):
        for b in range(a + 1, m):
            i, j = live[a], live[b]

            adjacent = (b == a + 1) or (a == 0 and b == m - 1)
            if adjacent:
                if _adjacent_edges_fold(edges[i], edges[j]):
                    defects.append(f"edges {i} and {j} fold back onto each other")
            elif _edges_touch(edges[i], edges[j]):
                defects.append(f"edges {i} and {j} intersect")

    return defects


def check_polygon(polygon: Polygon, name: str = "polygon") -> None:
    """Fail fast with every defect listed in the message."""
    defects = find_polygon_defects(polygon)
    if defects:
        raise PolygonPreconditionError(f"{name} is not a simple polygon: " + "; ".join(defects))


# ----------------------------------------------------------------------
#  HELPERS
# ----------------------------------------------------------------------

def _edges_touch(e1, e2) -> bool:
    if e1.intersect(e2) is not None:
        return True
    # parallel pairs: any endpoint of one lying on the other
    return any(e1.contains(p) for p in e2.endpoints) or any(e2.contains(p) for p in e1.endpoints)


def _adjacent_edges_fold(e1, e2) -> bool:
    """
    Adjacent edges share one vertex. They are defective if the far
    endpoint of either one lies on the other edge.
    """
    if points_equal(e1.p2, e2.p1):
        far1, far2 = e1.p1, e2.p2
    else:
        far1, far2 = e1.p2, e2.p1
    return e2.contains(far1) or e1.contains(far2)
