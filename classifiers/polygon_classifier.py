"""
Relationship classifier for pairs of polygons.

This module provides:
    • classify(polygon_a, polygon_b)
    • is_touching(edges_a, edges_b, vertices_a, vertices_b)
    • is_intersecting(edges_a, edges_b)
    • is_enclosed(inner, outer)
    • are_collinear(seg1, seg2)

Precedence of the final label:
    INTERSECTING > TOUCHING > DISJOINT_ENCLOSED > DISJOINT_OUTSIDE
"""

from typing import List, Optional, Sequence

from loguru import logger

from models.point import Point, points_equal
from models.polygon import Polygon
from models.relation import Relation
from models.segment import Segment
from utils.conversion import PolygonLike, to_polygon
from utils.tolerance import is_between
from utils.validation import check_polygon
from config import get_active_params


# ========================================================================
# 1. EDGE-PAIR PREDICATES
# ========================================================================

def are_collinear(seg1: Segment, seg2: Segment) -> bool:
    """Both endpoints of seg2 satisfy the line through seg1."""
    line = seg1.line
    return line.contains(seg2.p1) and line.contains(seg2.p2)


def _projections_overlap(seg1: Segment, seg2: Segment) -> bool:
    """
    Independent x and y interval overlap of the two segments.

    Only meaningful for segments already known to be collinear; for
    arbitrary segments this is a bounding-box test, not an overlap test.
    """
    overlap_x = (
        is_between(seg1.p1.x, seg1.p2.x, seg2.p1.x)
        or is_between(seg1.p1.x, seg1.p2.x, seg2.p2.x)
        or is_between(seg2.p1.x, seg2.p2.x, seg1.p1.x)
        or is_between(seg2.p1.x, seg2.p2.x, seg1.p2.x)
    )
    overlap_y = (
        is_between(seg1.p1.y, seg1.p2.y, seg2.p1.y)
        or is_between(seg1.p1.y, seg1.p2.y, seg2.p2.y)
        or is_between(seg2.p1.y, seg2.p2.y, seg1.p1.y)
        or is_between(seg2.p1.y, seg2.p2.y, seg1.p2.y)
    )
    return overlap_x and overlap_y


def _crosses_between_endpoints(seg1: Segment, seg2: Segment) -> bool:
    """
    True if the segments meet at a point that is none of their four
    endpoints, i.e. strictly inside both.
    """
    point = seg1.intersect(seg2)
    if point is None:
        return False
    return not any(
        points_equal(point, end)
        for end in (seg1.p1, seg1.p2, seg2.p1, seg2.p2)
    )


# ========================================================================
# 2. POLYGON-LEVEL PREDICATES
# ========================================================================

def is_touching(
    edges_a: List[Segment],
    edges_b: List[Segment],
    vertices_a: Sequence[Point],
    vertices_b: Sequence[Point],
) -> bool:
    """
    Boundary contact:
        - a vertex of one polygon lies on an edge of the other, or
        - two edges are collinear and their projections overlap
    """
    for edge in edges_a:
        if any(edge.contains(v) for v in vertices_b):
            logger.debug("vertex of B lies on edge {} of A", edge)
            return True

    for edge in edges_b:
        if any(edge.contains(v) for v in vertices_a):
            logger.debug("vertex of A lies on edge {} of B", edge)
            return True

    for edge_a in edges_a:
        for edge_b in edges_b:
            # the overlap test relies on collinearity being checked first
            if are_collinear(edge_a, edge_b) and _projections_overlap(edge_a, edge_b):
                logger.debug("collinear overlap between {} and {}", edge_a, edge_b)
                return True

    return False


def is_intersecting(edges_a: List[Segment], edges_b: List[Segment]) -> bool:
    """Some edge pair crosses away from every endpoint of the pair."""
    for edge_a in edges_a:
        for edge_b in edges_b:
            if _crosses_between_endpoints(edge_a, edge_b):
                logger.debug("transversal crossing between {} and {}", edge_a, edge_b)
                return True
    return False


def is_enclosed(inner: Polygon, outer: Polygon) -> bool:
    """Every vertex of inner is contained in outer (boundary counts)."""
    return all(outer.contains(v) for v in inner.vertices)


# ========================================================================
# 3. CLASSIFICATION
# ========================================================================

def classify(polygon_a: PolygonLike, polygon_b: PolygonLike, strict: Optional[bool] = None) -> Relation:
    """
    Classify the spatial relationship of two simple polygons.

    Parameters
    ----------
    polygon_a, polygon_b :
        Polygon objects, sequences of (x, y) pairs or Nx2 arrays.
    strict : bool, optional
        Check both polygons for the simple-polygon preconditions first
        and raise PolygonPreconditionError on a violation. Defaults to
        STRICT_VALIDATION from config. Without it, malformed input gives
        an undefined label.

    Returns
    -------
    Relation
    """
    if strict is None:
        strict = get_active_params()["STRICT_VALIDATION"]

    a = to_polygon(polygon_a)
    b = to_polygon(polygon_b)

    if strict:
        check_polygon(a, name="polygon A")
        check_polygon(b, name="polygon B")

    edges_a = a.edges()
    edges_b = b.edges()

    if is_intersecting(edges_a, edges_b):
        relation = Relation.INTERSECTING
    elif is_touching(edges_a, edges_b, a.vertices, b.vertices):
        relation = Relation.TOUCHING
    elif is_enclosed(a, b) or is_enclosed(b, a):
        relation = Relation.DISJOINT_ENCLOSED
    else:
        relation = Relation.DISJOINT_OUTSIDE

    logger.debug("classified {} vs {} as {}", a, b, relation.name)
    return relation
