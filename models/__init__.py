"""
Data Models

Defines the core value types:
- Point
- Line
- Segment
- Polygon
- Relation
"""

from .point import Point, points_equal
from .line import Line
from .segment import Segment
from .polygon import Polygon
from .relation import Relation

__all__ = ["Point", "points_equal", "Line", "Segment", "Polygon", "Relation"]
