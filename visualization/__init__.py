"""
Visualization Tools

Provides presentation utilities for:
- Text output of points, polygons and relation labels
- Drawing a classified polygon pair
- Saving renderings to disk
"""

from .formatting import (
    format_point,
    format_polygon,
    format_relation,
    format_report,
)
from .draw_polygons import fit_transform, draw_polygon, render_relation
from .save_outputs import save_all_outputs, save_relation_image

__all__ = [
    "format_point",
    "format_polygon",
    "format_relation",
    "format_report",
    "fit_transform",
    "draw_polygon",
    "render_relation",
    "save_all_outputs",
    "save_relation_image",
]
