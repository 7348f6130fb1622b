"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from quadratize.co2qu.conic import Conic
from quadratize.types import Point

# Quarter circles of radius 50 around (50, 0), traced clockwise from the origin.
QUARTER_WEIGHT = math.sqrt(2.0) / 2.0
CIRCLE_CENTER = Point(50.0, 0.0)
CIRCLE_RADIUS = 50.0

QUARTER_1 = Conic(Point(0.0, 0.0), Point(0.0, 50.0), Point(50.0, 50.0), QUARTER_WEIGHT)
QUARTER_2 = Conic(Point(50.0, 50.0), Point(100.0, 50.0), Point(100.0, 0.0), QUARTER_WEIGHT)
QUARTER_3 = Conic(Point(100.0, 0.0), Point(100.0, -50.0), Point(50.0, -50.0), QUARTER_WEIGHT)
QUARTER_4 = Conic(Point(50.0, -50.0), Point(0.0, -50.0), Point(0.0, 0.0), QUARTER_WEIGHT)
QUARTER_CIRCLES = [QUARTER_1, QUARTER_2, QUARTER_3, QUARTER_4]
CIRCLE_TOLERANCES = [0.01, 0.1, 0.8, 1.0]

PARABOLA = Conic(Point(0.0, 0.0), Point(50.0, 100.0), Point(100.0, 0.0), 1.0)

# A quadratic (0,0) (50,100) (100,0) elevated to a cubic
QUAD_CUBIC = (
    Point(0.0, 0.0),
    Point(100.0 / 3.0, 200.0 / 3.0),
    Point(200.0 / 3.0, 200.0 / 3.0),
    Point(100.0, 0.0),
)

# End tangents both point along (1, 1): no single quad can fit
S_CURVE = (Point(0.0, 0.0), Point(10.0, 10.0), Point(20.0, -10.0), Point(30.0, 0.0))
BIG_S_CURVE = (Point(0.0, 0.0), Point(100.0, 100.0), Point(200.0, -100.0), Point(300.0, 0.0))

GENERIC_CUBIC = (Point(0.0, 0.0), Point(20.0, 60.0), Point(90.0, 80.0), Point(100.0, 0.0))

S_CURVE_PATH = "M0,0 C10,10 20,-10 30,0 L40,0 A5,5 0 0 1 50,0 C60,10 70,10 80,0"


def circle_deviation(p: Point) -> float:
    """Radial distance of p from the quarter circles' circle."""
    return abs(math.sqrt((p - CIRCLE_CENTER).norm_squared()) - CIRCLE_RADIUS)


def quad_midpoint(quad: tuple[Point, Point, Point]) -> Point:
    p0, p1, p2 = quad
    return (p0 + p1 * 2.0 + p2) * 0.25


@pytest.fixture
def quarter_circles() -> list[Conic]:
    return QUARTER_CIRCLES


@pytest.fixture
def s_curve() -> tuple[Point, Point, Point, Point]:
    return S_CURVE
