"""Shared pytest configuration for contour_geometry tests."""

import pytest

from contour_geometry import Point


def pytest_configure(config):
    """Add custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")


@pytest.fixture
def star_points():
    """Unordered points of a star-like blob, with interior points."""
    return [
        Point(100, 20),
        Point(90, 35),
        Point(60, 25),
        Point(90, 40),
        Point(80, 55),
        Point(101, 50),
        Point(130, 60),
        Point(115, 45),
        Point(140, 30),
        Point(120, 35),
    ]


@pytest.fixture
def star_hull():
    """Convex hull of `star_points`."""
    return [
        Point(100, 20),
        Point(140, 30),
        Point(130, 60),
        Point(80, 55),
        Point(60, 25),
    ]
