"""
Classifiers Package

Contains the polygon relationship classifier:
- Edge-pair predicates (collinearity, interior crossing)
- Touching / intersecting / enclosure checks
- Final four-way classification
"""

from .polygon_classifier import (
    classify,
    is_touching,
    is_intersecting,
    is_enclosed,
    are_collinear,
)

__all__ = [
    "classify",
    "is_touching",
    "is_intersecting",
    "is_enclosed",
    "are_collinear",
]
