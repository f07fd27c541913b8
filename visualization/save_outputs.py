"""
Centralized output-saving utilities for classified polygon pairs.

This module provides:
    • save_relation_image(path, polygon_a, polygon_b, relation)
    • save_all_outputs(output_dir, name, polygon_a, polygon_b, relation)

Uses draw_polygons to render and utils.image_io for filesystem handling.
"""

from models.polygon import Polygon
from models.relation import Relation

from visualization.draw_polygons import render_relation
from utils.image_io import ensure_output_dir, output_path, save_image


def save_relation_image(path: str, polygon_a: Polygon, polygon_b: Polygon, relation: Relation):
    """
    Render the pair with its relation label and write it to disk.
    """
    save_image(path, render_relation(polygon_a, polygon_b, relation))


def save_all_outputs(
    output_dir: str,
    name: str,
    polygon_a: Polygon,
    polygon_b: Polygon,
    relation: Relation
) -> str:
    """
    Saves every output artifact for one classified pair and returns the
    image path.

    Example output:
        <name>_relation.png
    """
    ensure_output_dir(output_dir)

    path = output_path(output_dir, name)
    save_relation_image(path, polygon_a, polygon_b, relation)
    return path
