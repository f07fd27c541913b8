"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.point import Point
from models.polygon import Polygon


def make_polygon(coords):
    return Polygon(Point(float(x), float(y)) for x, y in coords)


@pytest.fixture
def square():
    """Axis-aligned square with corners at (±4, ±4)."""
    return make_polygon([(4, 4), (4, -4), (-4, -4), (-4, 4)])


@pytest.fixture
def unit_square():
    return make_polygon([(0, 0), (1, 0), (1, 1), (0, 1)])


@pytest.fixture
def l_shape():
    """Concave polygon with a notch in the upper right."""
    return make_polygon([(0, 0), (4, 0), (4, 1), (1, 1), (1, 4), (0, 4)])
