"""Computational geometry over contours, for example finding convex hulls."""

import logging
from functools import cmp_to_key
from math import atan2, ceil, floor, fmod, hypot, pi
from typing import Iterable, List, Sequence, Tuple, Union

from contour_geometry.constants import CENTROID_AREA_EPSILON, Orientation
from contour_geometry.exceptions import (
    ContourTooShortError,
    CoordinateTypeError,
    EmptyContourError,
    InvalidEpsilonError,
    PreconditionError,
)
from contour_geometry.point import Line, Number, Point, Rotation, distance

logger = logging.getLogger(__name__)

PointLike = Union[Point, Tuple[Number, Number]]
Corners = Tuple[Point, Point, Point, Point]


def _as_points(points: Iterable[PointLike]) -> List[Point]:
    return [p if isinstance(p, Point) else Point.from_tuple(p) for p in points]


def arc_length(arc: Sequence[PointLike], closed: bool = False) -> float:
    """
    Returns the length of the arc through the given points, in order.

    When `closed` is True the distance between the last and the first point
    is added, but only for arcs of more than two points: closing a two-point
    arc would count its single edge twice.
    """
    points = _as_points(arc)
    length = sum((distance(p, q) for p, q in zip(points, points[1:])), 0.0)
    if closed and len(points) > 2:
        length += distance(points[-1], points[0])
    return length


def approx_poly_dp(
    curve: Sequence[PointLike], epsilon: float, closed: bool = False
) -> List[Point]:
    """
    Fits a polyline to a similar one with fewer points using the
    Douglas-Peucker algorithm.

    For every range the interior point farthest from the chord between the
    range's endpoints is found (the first one wins on ties). If it is farther
    than `epsilon` the range is split there, otherwise only the endpoints are
    kept. Ranges are processed from an explicit worklist, so long irregular
    curves do not exhaust the interpreter stack.

    When a range starts and ends on the same point, as in a closed contour
    that repeats its first point, distances are measured to that point
    instead of to a chord, so the range is still split at its farthest
    point rather than collapsed.

    Args:
        curve (Sequence[PointLike]): Ordered points of the polyline.
        epsilon (float): Maximum distance between the curve and its
            approximation. Must be greater than 0.
        closed (bool): Whether the curve is a closed polygon. The last point
            of the approximation is dropped since it is implicitly connected
            to the first.

    Returns:
        List[Point]: The kept points, in curve order.

    Raises:
        InvalidEpsilonError: If `epsilon` is not greater than 0 (or is NaN).
        ContourTooShortError: If the curve has fewer than 2 points.
    """
    if not epsilon > 0.0:
        raise InvalidEpsilonError(
            f"epsilon must be greater than 0.0, got {epsilon}"
        )
    points = _as_points(curve)
    if len(points) < 2:
        raise ContourTooShortError(
            f"approx_poly_dp requires at least 2 points, got {len(points)}"
        )

    end = len(points) - 1
    keep = [False] * len(points)
    keep[0] = keep[end] = True
    ranges = [(0, end)]
    while ranges:
        start, stop = ranges.pop()
        line = Line.from_points(points[start], points[stop])
        dmax = 0.0
        index = start
        for i in range(start + 1, stop):
            d = line.distance_from_point(points[i].to_f64())
            if d > dmax:
                index = i
                dmax = d
        if dmax > epsilon:
            keep[index] = True
            ranges.append((index, stop))
            ranges.append((start, index))

    result = [p for p, kept in zip(points, keep) if kept]
    if closed:
        result.pop()

    logger.debug(
        "approx_poly_dp reduced %d points to %d (epsilon=%s, closed=%s)",
        len(points),
        len(result),
        epsilon,
        closed,
    )
    return result


def orientation(p: PointLike, q: PointLike, r: PointLike) -> Orientation:
    """
    Determines the turn made by the ordered triple (p, q, r).

    Coordinates are cast to 32-bit integers first and the cross product is
    evaluated exactly, so the result never suffers from rounding.

    Raises:
        CoordinateRangeError: If a coordinate does not fit in 32 bits.
    """
    p, q, r = (point.to_i32() for point in _as_points((p, q, r)))
    return _orientation(p, q, r)


def _orientation(p: Point, q: Point, r: Point) -> Orientation:
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val == 0:
        return Orientation.COLLINEAR
    if val > 0:
        return Orientation.CLOCKWISE
    return Orientation.COUNTER_CLOCKWISE


def _squared_distance(p: Point, q: Point) -> int:
    dx = q.x - p.x
    dy = q.y - p.y
    return dx * dx + dy * dy


def convex_hull(points: Iterable[PointLike]) -> List[Point]:
    """
    Finds the convex hull of a set of points using the Graham scan.

    The hull is returned counterclockwise, starting at the point with the
    smallest y (smallest x on ties). Points are sorted around that pivot with
    an exact orientation test rather than trigonometry, and of several
    points on the same ray from the pivot only the farthest is scanned.

    Args:
        points (Iterable[PointLike]): Unordered points with integer
            coordinates. Duplicates are allowed.

    Returns:
        List[Point]: The hull vertices. One input point yields a single
        vertex and two distinct points yield both of them.

    Raises:
        CoordinateTypeError: If a point has float coordinates.
        CoordinateRangeError: If a coordinate does not fit in 32 bits.
    """
    pts = _as_points(points)
    if not pts:
        return []
    for p in pts:
        if not p.is_integral:
            raise CoordinateTypeError(
                f"convex_hull requires integer coordinates, got {p}"
            )
    pts = [p.to_i32() for p in pts]

    start = min(pts, key=lambda p: (p.y, p.x))
    # Copies of the pivot have no polar angle
    remaining = [p for p in pts if p != start]

    def by_polar_angle(a: Point, b: Point) -> int:
        turn = _orientation(start, a, b)
        if turn is Orientation.COLLINEAR:
            da = _squared_distance(start, a)
            db = _squared_distance(start, b)
            return (da > db) - (da < db)
        return 1 if turn is Orientation.CLOCKWISE else -1

    remaining.sort(key=cmp_to_key(by_polar_angle))

    # Keep the farthest point of every run sharing a polar angle
    candidates = [
        p
        for i, p in enumerate(remaining)
        if i + 1 == len(remaining)
        or _orientation(start, p, remaining[i + 1])
        is not Orientation.COLLINEAR
    ]

    stack = [start]
    for p in candidates:
        while (
            len(stack) > 1
            and _orientation(stack[-2], stack[-1], p)
            is not Orientation.COUNTER_CLOCKWISE
        ):
            stack.pop()
        stack.append(p)
    return stack


def min_area_rect(contour: Sequence[PointLike]) -> Corners:
    """
    Finds the minimal area rectangle that covers all of the points in the
    contour.

    Corners are returned as (top-left, top-right, bottom-right, bottom-left).
    Each corner is rounded to integers on its own axes, down on the side of
    the smaller extent and up on the side of the larger one. For an
    axis-aligned rectangle this never shrinks the box. For a rotated one,
    a corner can move along the rectangle's edge rather than away from it,
    so a contour point may end up less than sqrt(2) outside the rounded
    quadrilateral.

    Raises:
        EmptyContourError: If the contour has no points.
    """
    points = _as_points(contour)
    if not points:
        raise EmptyContourError("min_area_rect requires at least one point")

    hull = convex_hull(points)
    if len(hull) == 1:
        logger.debug("min_area_rect: single point hull %s", hull[0])
        return (hull[0], hull[0], hull[0], hull[0])
    if len(hull) == 2:
        logger.debug("min_area_rect: segment hull %s-%s", hull[0], hull[1])
        return (hull[0], hull[1], hull[1], hull[0])
    return _rotating_calipers(hull)


def _edge_angles(hull: List[Point]) -> List[float]:
    """Direction of every hull edge reduced into [0, pi/2), deduplicated."""
    angles: List[float] = []
    for p1, p2 in zip(hull, hull[1:] + hull[:1]):
        edge = p2.to_f64() - p1.to_f64()
        angle = abs(fmod(atan2(edge.y, edge.x) + pi, pi / 2))
        if not angles or angles[-1] != angle:
            angles.append(angle)
    return angles


def _rotating_calipers(hull: List[Point]) -> Corners:
    """
    Tests a bounding box aligned with each hull edge and keeps the smallest.

    A minimum-area enclosing rectangle always has one side flush with an
    edge of the hull, so checking every edge direction is sufficient.
    """
    min_area = float("inf")
    best_angle = 0.0
    rect: List[Point] = []
    for angle in _edge_angles(hull):
        rotation = Rotation(angle)
        rotated = [p.to_f64().rotate(rotation) for p in hull]
        min_x = min(p.x for p in rotated)
        max_x = max(p.x for p in rotated)
        min_y = min(p.y for p in rotated)
        max_y = max(p.y for p in rotated)

        area = (max_x - min_x) * (max_y - min_y)
        if area < min_area:
            min_area = area
            best_angle = angle
            rect = [
                Point(max_x, min_y).invert_rotation(rotation),
                Point(min_x, min_y).invert_rotation(rotation),
                Point(min_x, max_y).invert_rotation(rotation),
                Point(max_x, max_y).invert_rotation(rotation),
            ]

    logger.debug(
        "min_area_rect: best angle %.6f rad, area %.3f", best_angle, min_area
    )

    rect.sort(key=lambda p: p.x)
    left_top = 0 if rect[1].y > rect[0].y else 1
    right_top = 2 if rect[3].y > rect[2].y else 3
    top_left, bottom_left = rect[left_top], rect[1 - left_top]
    top_right, bottom_right = rect[right_top], rect[5 - right_top]

    return (
        Point(floor(top_left.x), floor(top_left.y)),
        Point(ceil(top_right.x), floor(top_right.y)),
        Point(ceil(bottom_right.x), ceil(bottom_right.y)),
        Point(floor(bottom_left.x), ceil(bottom_left.y)),
    )


def compute_hull_centroid(hull_vertices: Sequence[PointLike]) -> Point:
    """
    Area centroid of a hull as returned by `convex_hull`.

    Degenerate hulls get the obvious answer: the origin for no vertices, the
    vertex itself for one, and the midpoint for two. Hulls whose signed
    area is below `CENTROID_AREA_EPSILON` fall back to the vertex mean.

    Returns:
        Point: The centroid, with float coordinates.
    """
    hull = _as_points(hull_vertices)
    n = len(hull)

    if n == 0:
        return Point(0.0, 0.0)
    if n == 1:
        return hull[0].to_f64()
    if n == 2:
        x0, y0 = hull[0].to_tuple()
        x1, y1 = hull[1].to_tuple()
        return Point((x0 + x1) / 2.0, (y0 + y1) / 2.0)

    area_sum = 0.0
    cx = 0.0
    cy = 0.0
    for p0, p1 in zip(hull, hull[1:] + hull[:1]):
        cross = p0.x * p1.y - p1.x * p0.y
        area_sum += cross
        cx += (p0.x + p1.x) * cross
        cy += (p0.y + p1.y) * cross

    area = area_sum / 2.0
    if abs(area) < CENTROID_AREA_EPSILON:
        return Point(
            sum(p.x for p in hull) / n, sum(p.y for p in hull) / n
        )
    return Point(cx / (6.0 * area), cy / (6.0 * area))


def pad_corners_opposite(corners: Sequence[PointLike], pad: float) -> Corners:
    """
    Moves each corner 'pad' units away from its opposite corner.

    corners: 4 points in consistent order, e.g. the (top-left, top-right,
        bottom-right, bottom-left) result of `min_area_rect`
    pad: positive means each corner moves outward
         (further from the opposite corner)
    """
    points = _as_points(corners)
    if len(points) != 4:
        raise PreconditionError(
            f"pad_corners_opposite requires exactly 4 corners, "
            f"got {len(points)}"
        )
    padded = []
    for i, corner in enumerate(points):
        opposite = points[(i + 2) % 4]
        dx = corner.x - opposite.x
        dy = corner.y - opposite.y
        dist = hypot(dx, dy)
        if dist == 0:
            # corners coincide, no shift
            padded.append(corner.to_f64())
        else:
            padded.append(
                Point(corner.x + pad * dx / dist, corner.y + pad * dy / dist)
            )
    return tuple(padded)
