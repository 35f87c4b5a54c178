"""Custom exceptions for contour_geometry operations."""


class ContourGeometryError(Exception):
    """Base exception for all contour_geometry errors."""


# Precondition violations
class PreconditionError(ContourGeometryError, ValueError):
    """
    Raised when a caller violates a documented precondition.

    These are programmer errors: the same input will always fail, so the
    caller has to be corrected rather than the call retried.
    """


class InvalidEpsilonError(PreconditionError):
    """Raised when the simplification tolerance is not strictly positive."""


class EmptyContourError(PreconditionError):
    """Raised when an operation needs at least one point and got none."""


class ContourTooShortError(PreconditionError):
    """Raised when a polyline has fewer points than an operation requires."""


# Coordinate domain exceptions
class CoordinateError(ContourGeometryError):
    """Base exception for coordinates outside the supported domain."""


class CoordinateTypeError(CoordinateError, TypeError):
    """Raised when a coordinate is not an int or a float."""


class CoordinateValueError(CoordinateError, ValueError):
    """Raised when a coordinate is NaN or infinite."""


class CoordinateRangeError(CoordinateError, ValueError):
    """Raised when a coordinate does not fit in a 32-bit signed integer."""
