"""
Polygon Relation Package

Classifies the spatial relationship between two simple polygons:

- Tolerant point / line / segment primitives
- Boundary-inclusive point-in-polygon test
- Four-way relation classifier (intersecting, touching,
  disjoint-enclosed, disjoint-outside)
- Text and image output utilities
"""
__all__ = [
    "config",
    "main",
    "classifiers",
    "models",
    "utils",
    "visualization",
]
