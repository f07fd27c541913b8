"""
Visualization utilities for rendering polygon pairs.

This module provides:
    • fit_transform(polygons, canvas_size, margin)
    • draw_polygon(img, polygon, transform, color, thickness, vertex_radius)
    • render_relation(polygon_a, polygon_b, relation)

It is used by:
    - visualization.save_outputs
    - main.py (through save_outputs)
"""

from typing import Callable, Iterable, Tuple

import cv2
import numpy as np

from models.polygon import Polygon
from models.relation import Relation
from visualization.formatting import format_relation
from config import (
    get_active_params,
    COLOR_BACKGROUND,
    COLOR_POLYGON_A,
    COLOR_POLYGON_B,
    COLOR_TEXT,
)


Transform = Callable[[np.ndarray], np.ndarray]


# ---------------------------------------------------------------------
#  WORLD → PIXEL MAPPING
# ---------------------------------------------------------------------

def fit_transform(
    polygons: Iterable[Polygon],
    canvas_size: Tuple[int, int],
    margin: int
) -> Transform:
    """
    Builds a function mapping Nx2 world coordinates to Nx2 int32 pixel
    coordinates so that every polygon fits inside the canvas.

    The aspect ratio is preserved and the y axis points up (image rows
    grow downward, so y is flipped).
    """
    width, height = canvas_size
    extents = np.array([p.bounds() for p in polygons], dtype=np.float64)

    mins = extents[:, :2].min(axis=0)
    maxs = extents[:, 2:].max(axis=0)
    span = maxs - mins

    usable = np.array([width - 2 * margin, height - 2 * margin], dtype=np.float64)
    # zero-width axes do not constrain the scale
    ratios = np.where(span > 0, usable / np.where(span > 0, span, 1.0), np.inf)
    scale = float(ratios.min()) if np.isfinite(ratios).any() else 1.0

    # centre the drawing on the canvas
    center_world = (mins + maxs) / 2.0
    center_pixel = np.array([width / 2.0, height / 2.0])

    def transform(coords: np.ndarray) -> np.ndarray:
        shifted = (np.asarray(coords, dtype=np.float64) - center_world) * scale
        shifted[:, 1] *= -1
        return np.rint(shifted + center_pixel).astype(np.int32)

    return transform


# ---------------------------------------------------------------------
#  BASIC: Draw one polygon
# ---------------------------------------------------------------------

def draw_polygon(
    image: np.ndarray,
    polygon: Polygon,
    transform: Transform,
    color: Tuple[int, int, int],
    thickness: int = 2,
    vertex_radius: int = 4
):
    """
    Draws a closed polygon outline and its vertices onto an image.

    Args:
        image: BGR numpy array (modified in-place)
        polygon: Polygon to draw
        transform: world → pixel mapping from fit_transform
        color: (B, G, R)
        thickness: pixel width of the outline
        vertex_radius: radius of the filled vertex markers
    """
    pixels = transform(polygon.as_array())

    # cv2.polylines expects (N, 1, 2) int32
    cv2.polylines(image, [pixels.reshape((-1, 1, 2))], isClosed=True,
                  color=color, thickness=thickness, lineType=cv2.LINE_AA)

    for x, y in pixels:
        cv2.circle(image, (int(x), int(y)), vertex_radius, color, thickness=-1)

    return image


# ---------------------------------------------------------------------
#  HIGH-LEVEL: Draw a classified pair
# ---------------------------------------------------------------------

def render_relation(
    polygon_a: Polygon,
    polygon_b: Polygon,
    relation: Relation
) -> np.ndarray:
    """
    Returns a new BGR image with polygon A (blue), polygon B (red) and the
    relation label in the top-left corner, colored per relation.
    """
    params = get_active_params()
    width, height = params["CANVAS_SIZE"]

    image = np.full((height, width, 3), COLOR_BACKGROUND, dtype=np.uint8)
    transform = fit_transform((polygon_a, polygon_b), (width, height), params["CANVAS_MARGIN"])

    draw_polygon(image, polygon_a, transform, COLOR_POLYGON_A,
                 params["LINE_THICKNESS"], params["VERTEX_RADIUS"])
    draw_polygon(image, polygon_b, transform, COLOR_POLYGON_B,
                 params["LINE_THICKNESS"], params["VERTEX_RADIUS"])

    label_color = params["RELATION_COLORS"].get(relation.name, COLOR_TEXT)
    cv2.putText(image, format_relation(relation), (10, 25),
                cv2.FONT_HERSHEY_SIMPLEX, 0.7, label_color, 2, cv2.LINE_AA)

    return image
