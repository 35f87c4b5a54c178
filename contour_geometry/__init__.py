"""Geometry primitives for contours extracted from image analysis."""

__version__ = "0.1.0"

from contour_geometry.constants import Orientation
from contour_geometry.exceptions import (
    ContourGeometryError,
    ContourTooShortError,
    CoordinateError,
    CoordinateRangeError,
    CoordinateTypeError,
    CoordinateValueError,
    EmptyContourError,
    InvalidEpsilonError,
    PreconditionError,
)
from contour_geometry.geometry import (
    approx_poly_dp,
    arc_length,
    compute_hull_centroid,
    convex_hull,
    min_area_rect,
    orientation,
    pad_corners_opposite,
)
from contour_geometry.point import Line, Point, Rotation, distance

__all__ = [
    "Point",
    "Line",
    "Rotation",
    "distance",
    "Orientation",
    "orientation",
    "arc_length",
    "approx_poly_dp",
    "convex_hull",
    "min_area_rect",
    "compute_hull_centroid",
    "pad_corners_opposite",
    "ContourGeometryError",
    "PreconditionError",
    "InvalidEpsilonError",
    "EmptyContourError",
    "ContourTooShortError",
    "CoordinateError",
    "CoordinateTypeError",
    "CoordinateValueError",
    "CoordinateRangeError",
]
