"""
Image output utilities for the rendered classification results.

This module provides:
    • ensure_output_dir(path)
    • save_image(path, image)
    • output_path(output_dir, name, suffix)
"""

import os

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


def output_path(output_dir: str, name: str, suffix: str = "relation") -> str:
    """
    Example:
        output_path('output', 'shared_edge') → 'output/shared_edge_relation.png'
    """
    return os.path.join(output_dir, f"{name}_{suffix}.png")


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.

    Raises:
        OSError: if OpenCV could not write the file
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise OSError(f"could not write image to {path}")
