"""
Utility Functions

Provides the tolerance helpers, image output and logging setup used
across the package. Conversion and validation helpers depend on the
models and are imported from their own modules:

    from utils.conversion import to_polygon
    from utils.validation import check_polygon
"""

from .tolerance import are_equal, is_between
from .image_io import ensure_output_dir, output_path, save_image
from .log_config import configure_logging

__all__ = [
    "are_equal",
    "is_between",
    "ensure_output_dir",
    "output_path",
    "save_image",
    "configure_logging",
]
