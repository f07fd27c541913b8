"""
Configuration file for the polygon-relationship classifier.

Contains the numeric tolerance, validation/logging switches, rendering
parameters and the example polygon pairs used by main.py.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# NUMERIC TOLERANCE
# ---------------------------------------------------------------

# Absolute epsilon for every equality / boundary / degeneracy check.
# Fixed and scale-dependent: very large or very small coordinates can
# misclassify.
EPSILON = 1e-6


# ---------------------------------------------------------------
# VALIDATION & LOGGING
# ---------------------------------------------------------------

# Set to True to reject malformed polygons before classifying
STRICT_VALIDATION = False

LOG_LEVEL = "INFO"


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"
SAVE_VISUALIZATIONS = False


# ---------------------------------------------------------------
# RENDERING
# ---------------------------------------------------------------

CANVAS_SIZE = (480, 480)           # (width, height) in pixels
CANVAS_MARGIN = 40                 # pixels kept free around the drawing
LINE_THICKNESS = 2
VERTEX_RADIUS = 4

COLOR_BACKGROUND = (255, 255, 255)
COLOR_POLYGON_A = (255, 0, 0)      # blue
COLOR_POLYGON_B = (0, 0, 255)      # red
COLOR_TEXT = (0, 0, 0)

RELATION_COLORS = {
    "INTERSECTING": (0, 0, 255),
    "TOUCHING": (0, 165, 255),
    "DISJOINT_ENCLOSED": (0, 128, 0),
    "DISJOINT_OUTSIDE": (128, 128, 128),
}


# ---------------------------------------------------------------
# EXAMPLE DATA
# ---------------------------------------------------------------

SQUARE_8 = [(4, 4), (4, -4), (-4, -4), (-4, 4)]

EXAMPLE_PAIRS = {
    # polygon B repeats a vertex in both of these (malformed input,
    # kept as documented edge cases)
    "repeated_vertex_inner": (SQUARE_8, [(2, 2), (2, -2), (-2, -2), (2, -2)]),
    "repeated_vertex_corner": (SQUARE_8, [(4, 4), (2, -2), (-2, -2), (2, -2)]),

    "shared_edge": (
        [(0, 0), (1, 0), (1, 1), (0, 1)],
        [(1, 0), (2, 0), (2, 1), (1, 1)],
    ),
    "overlapping": (
        [(0, 0), (2, 0), (2, 2), (0, 2)],
        [(1, 1), (3, 1), (3, 3), (1, 3)],
    ),
    "enclosed": (SQUARE_8, [(-1, -1), (1, -1), (1, 1), (-1, 1)]),
    "outside": (
        [(0, 0), (1, 0), (1, 1), (0, 1)],
        [(5, 5), (6, 5), (6, 6), (5, 6)],
    ),
}


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as one dictionary, so modules
    only need to import a single accessor.
    """

    return {
        "EPSILON": EPSILON,
        "STRICT_VALIDATION": STRICT_VALIDATION,
        "LOG_LEVEL": LOG_LEVEL,
        "OUTPUT_FOLDER": OUTPUT_FOLDER,
        "SAVE_VISUALIZATIONS": SAVE_VISUALIZATIONS,
        "CANVAS_SIZE": CANVAS_SIZE,
        "CANVAS_MARGIN": CANVAS_MARGIN,
        "LINE_THICKNESS": LINE_THICKNESS,
        "VERTEX_RADIUS": VERTEX_RADIUS,
        "RELATION_COLORS": RELATION_COLORS,
    }
