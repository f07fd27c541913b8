from enum import Enum


class Relation(Enum):
    """
    Spatial relationship between two polygons.

        INTERSECTING       an edge pair crosses strictly inside both edges
        TOUCHING           boundaries meet without a transversal crossing
        DISJOINT_ENCLOSED  one polygon lies inside the other
        DISJOINT_OUTSIDE   none of the above

    Display strings belong to visualization.formatting.
    """

    INTERSECTING = "intersecting"
    TOUCHING = "touching"
    DISJOINT_ENCLOSED = "disjoint_enclosed"
    DISJOINT_OUTSIDE = "disjoint_outside"
