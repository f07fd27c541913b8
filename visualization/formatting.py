"""
Text rendering of points, polygons and relations.

This module provides:
    • format_point(point)          → "(x, y)"
    • format_polygon(polygon)      → "Polygon: (x, y) (x, y) ..."
    • format_relation(relation)    → display label
    • format_report(a, b, relation)
"""

from models.point import Point
from models.polygon import Polygon
from models.relation import Relation


RELATION_LABELS = {
    Relation.INTERSECTING: "Intersecting",
    Relation.TOUCHING: "Touching",
    Relation.DISJOINT_ENCLOSED: "Disjoint (Enclosed)",
    Relation.DISJOINT_OUTSIDE: "Disjoint (Outside)",
}


def _fmt(value: float) -> str:
    # 4.0 -> "4", 2.5 -> "2.5"
    return f"{value:g}"


def format_point(point: Point) -> str:
    return f"({_fmt(point.x)}, {_fmt(point.y)})"


def format_polygon(polygon: Polygon) -> str:
    return "Polygon: " + " ".join(format_point(v) for v in polygon.vertices)


def format_relation(relation: Relation) -> str:
    return RELATION_LABELS[relation]


def format_report(polygon_a: Polygon, polygon_b: Polygon, relation: Relation) -> str:
    """
    Example:
        Polygon: (4, 4) (4, -4) (-4, -4) (-4, 4)
        Polygon: (-1, -1) (1, -1) (1, 1) (-1, 1)
        Relationship: Disjoint (Enclosed)
    """
    return "\n".join((
        format_polygon(polygon_a),
        format_polygon(polygon_b),
        f"Relationship: {format_relation(relation)}",
    ))
