"""
This module defines the orientation enum and the numeric-domain limits used
by the hull and bounding rectangle computations.
"""

from enum import Enum

# Orientation tests cast coordinates into this range before multiplying.
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

# Below this signed area a hull is treated as degenerate by the centroid.
CENTROID_AREA_EPSILON = 1e-14


class Orientation(str, Enum):
    """Turn direction of an ordered point triple (p, q, r).

    Directions are given for a y-up frame; in image coordinates (y down)
    the visual direction is mirrored.
    """

    COLLINEAR = "COLLINEAR"
    CLOCKWISE = "CLOCKWISE"
    COUNTER_CLOCKWISE = "COUNTER_CLOCKWISE"
