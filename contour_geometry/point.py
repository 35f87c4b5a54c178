"""
Immutable value objects for 2D contour geometry.

Classes:
    Point: 2D coordinate (x, y) over int or float coordinates
    Rotation: Rotation angle with its cached cosine and sine
    Line: Infinite line through two points, used for perpendicular distances
"""

from dataclasses import dataclass, field
from math import cos, hypot, isfinite, sin
from typing import Tuple, Union

from contour_geometry.constants import I32_MAX, I32_MIN
from contour_geometry.exceptions import (
    CoordinateRangeError,
    CoordinateTypeError,
    CoordinateValueError,
)

Number = Union[int, float]


@dataclass(frozen=True)
class Rotation:
    """
    Immutable rotation about the origin.

    Attributes:
        angle: Rotation angle in radians
    """

    angle: float
    cos: float = field(init=False, repr=False, compare=False)
    sin: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cos", cos(self.angle))
        object.__setattr__(self, "sin", sin(self.angle))


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D coordinate point.

    Coordinates keep the type they were created with, so integer pixel
    coordinates stay integers and results can be cast back to the caller's
    coordinate type.

    Attributes:
        x: X coordinate (int or float)
        y: Y coordinate (int or float)
    """

    x: Number
    y: Number

    def __post_init__(self) -> None:
        """Validate that both coordinates are finite ints or floats."""
        for name in ("x", "y"):
            value = getattr(self, name)
            # bool is an int subclass but never a coordinate
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise CoordinateTypeError(
                    f"{name} must be an int or float, "
                    f"got {type(value).__name__}"
                )
            if isinstance(value, float) and not isfinite(value):
                raise CoordinateValueError(f"{name} must be finite, got {value}")

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    @property
    def is_integral(self) -> bool:
        """True when both coordinates are ints."""
        return isinstance(self.x, int) and isinstance(self.y, int)

    def to_f64(self) -> "Point":
        """Returns the same point with float coordinates."""
        return Point(float(self.x), float(self.y))

    def to_i32(self) -> "Point":
        """
        Returns the point cast to 32-bit signed integer coordinates.

        Float coordinates are truncated toward zero.

        Raises:
            CoordinateRangeError: If a coordinate falls outside the 32-bit
                signed integer range after truncation.
        """
        x = int(self.x)
        y = int(self.y)
        if not (I32_MIN <= x <= I32_MAX and I32_MIN <= y <= I32_MAX):
            raise CoordinateRangeError(
                f"Point ({self.x}, {self.y}) does not fit in 32-bit "
                f"integer coordinates [{I32_MIN}, {I32_MAX}]."
            )
        return Point(x, y)

    def rotate(self, rotation: Rotation) -> "Point":
        """Rotates the point about the origin by the negative of the angle."""
        x = self.x * rotation.cos + self.y * rotation.sin
        y = self.y * rotation.cos - self.x * rotation.sin
        return Point(float(x), float(y))

    def invert_rotation(self, rotation: Rotation) -> "Point":
        """Undoes `rotate`, turning the point about the origin by the angle."""
        x = self.x * rotation.cos - self.y * rotation.sin
        y = self.y * rotation.cos + self.x * rotation.sin
        return Point(float(x), float(y))

    def to_tuple(self) -> Tuple[Number, Number]:
        """Convert to an (x, y) tuple for callers working with plain pairs."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, pair: Tuple[Number, Number]) -> "Point":
        """
        Create from an (x, y) pair.

        Args:
            pair: Sequence holding the x and y coordinates

        Returns:
            Point instance
        """
        x, y = pair
        return cls(x, y)


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return hypot(q.x - p.x, q.y - p.y)


@dataclass(frozen=True)
class Line:
    """
    Infinite line a*x + b*y + c = 0 through two points.

    The defining points are kept so that a degenerate line (both points
    equal) can still answer distance queries.
    """

    p: Point
    q: Point
    a: float = field(init=False)
    b: float = field(init=False)
    c: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", float(self.p.y - self.q.y))
        object.__setattr__(self, "b", float(self.q.x - self.p.x))
        object.__setattr__(
            self, "c", float(self.p.x * self.q.y - self.q.x * self.p.y)
        )

    @classmethod
    def from_points(cls, p: Point, q: Point) -> "Line":
        return cls(p.to_f64(), q.to_f64())

    def distance_from_point(self, point: Point) -> float:
        """
        Perpendicular distance from `point` to the line.

        When both defining points coincide there is no direction, so the
        distance to that single point is returned instead.
        """
        norm = hypot(self.a, self.b)
        if norm == 0.0:
            return distance(self.p, point)
        return abs(self.a * point.x + self.b * point.y + self.c) / norm
