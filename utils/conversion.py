"""
Conversions between raw coordinate data and Polygon objects.

This module provides:
    • to_polygon(data)
    • polygon_to_array(polygon)

Accepted polygon inputs: a Polygon, a sequence of (x, y) pairs or Point
objects, or an Nx2 numpy array.
"""

from typing import Sequence, Union

import numpy as np

from models.point import Point
from models.polygon import Polygon


PolygonLike = Union[Polygon, np.ndarray, Sequence]


def to_polygon(data: PolygonLike) -> Polygon:
    """
    Build a Polygon from any supported input.

    Raises:
        ValueError: if the data is not numeric, not Nx2, or holds NaN / infinity
    """
    if isinstance(data, Polygon):
        return data

    if not isinstance(data, np.ndarray):
        data = [v.as_tuple() if isinstance(v, Point) else v for v in data]

    try:
        arr = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"polygon vertices must be numeric (x, y) pairs: {exc}") from exc

    if arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"polygon vertices must be an Nx2 array, got shape {arr.shape}")
    if not np.isfinite(arr).all():
        raise ValueError("polygon vertices must be finite numbers")

    return Polygon(Point(float(x), float(y)) for x, y in arr)


def polygon_to_array(polygon: PolygonLike) -> np.ndarray:
    """Read-only Nx2 float64 vertex array."""
    return to_polygon(polygon).as_array()
