"""
Floating-point tolerance helpers.

This module provides:
    • are_equal(a, b)       absolute-epsilon equality
    • is_between(a, b, c)   inclusive range test, order-independent bounds
"""

from typing import Optional

from config import EPSILON


def are_equal(a: float, b: float, epsilon: Optional[float] = None) -> bool:
    """
    True if |a - b| < epsilon.

    The default epsilon is the fixed absolute EPSILON from config.
    """
    if epsilon is None:
        epsilon = EPSILON
    return abs(a - b) < epsilon


def is_between(a: float, b: float, c: float) -> bool:
    """True if c lies in the closed interval spanned by a and b."""
    return min(a, b) <= c <= max(a, b)
