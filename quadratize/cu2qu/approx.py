"""Cubic → quadratic spline fitting.

For a given segment count n the cubic is split into n equal pieces, one
quadratic control point is guessed per piece, and the on-curve junctions are
the midpoints between neighbouring control points. The guess is accepted only
if every piece's residual passes farthest_fit_inside. curve_to_quadratic
searches n upward until a guess is accepted.
"""

from __future__ import annotations

import logging
import math

from quadratize.config import ConversionConfig
from quadratize.cu2qu.split import farthest_fit_inside, split_into_n
from quadratize.errors import ApproxNotFoundError
from quadratize.types import Cubic, Point, Quad, QuadSpline

logger = logging.getLogger(__name__)

ORIGIN = Point(0.0, 0.0)


def approx_control(cubic: Cubic, t: float) -> Point:
    """Quadratic control point estimate for a cubic piece.

    Extends both end tangents by 1.5 and interpolates between them at t.
    """
    p0, p1, p2, p3 = cubic
    _p1 = p0 + (p1 - p0) * 1.5
    _p2 = p3 + (p2 - p3) * 1.5
    return _p1 + (_p2 - _p1) * t


def calc_intersect(a: Point, b: Point, c: Point, d: Point) -> Point:
    """Intersection of line a→b with line c→d. NaN point if parallel."""
    ab = b - a
    cd = d - c
    p = Point(-ab.y, ab.x)
    try:
        h = p.dot(a - c) / p.dot(cd)
    except ZeroDivisionError:
        return Point(math.nan, math.nan)
    return c + cd * h


def approx_quadratic(cubic: Cubic, tolerance: float) -> Quad | None:
    """Single quadratic through the cubic's end tangents, or None."""
    q1 = calc_intersect(*cubic)
    if not q1.is_finite():
        return None
    c0 = cubic[0]
    c3 = cubic[3]
    c1 = c0 + (q1 - c0) * (2.0 / 3.0)
    c2 = c3 + (q1 - c3) * (2.0 / 3.0)
    if not farthest_fit_inside((ORIGIN, c1 - cubic[1], c2 - cubic[2], ORIGIN), tolerance):
        return None
    return (c0, q1, c3)


def approx_spline(cubic: Cubic, n: int, tolerance: float) -> QuadSpline | None:
    """n-segment quadratic spline within tolerance, or None."""
    if n < 1:
        raise ValueError(f"Segment count must be >= 1, got {n}")
    if n == 1:
        quad = approx_quadratic(cubic, tolerance)
        return None if quad is None else [quad]

    cubics = split_into_n(cubic, n)
    next_cubic = cubics[0]
    next_q1 = approx_control(next_cubic, 0.0)
    q2 = cubic[0]
    d1 = ORIGIN
    controls = [next_q1]
    for i in range(1, n + 1):
        _, c1, c2, c3 = next_cubic
        q0 = q2
        q1 = next_q1
        if i < n:
            next_cubic = cubics[i]
            next_q1 = approx_control(next_cubic, i / (n - 1))
            controls.append(next_q1)
            q2 = (q1 + next_q1) * 0.5
        else:
            q2 = c3

        # Residual of this piece: elevated quad minus cubic piece
        d0 = d1
        d1 = q2 - c3
        if d1.norm_squared() > tolerance or not farthest_fit_inside(
            (
                d0,
                q0 + (q1 - q0) * (2.0 / 3.0) - c1,
                q2 + (q1 - q2) * (2.0 / 3.0) - c2,
                d1,
            ),
            tolerance,
        ):
            return None

    junctions = [cubic[0]]
    junctions.extend((a + b) * 0.5 for a, b in zip(controls, controls[1:]))
    junctions.append(cubic[3])
    return [(junctions[i], controls[i], junctions[i + 1]) for i in range(n)]


def curve_to_quadratic(
    cubic: Cubic, max_err: float, config: ConversionConfig | None = None
) -> QuadSpline:
    """Fewest-segment quadratic spline within max_err.

    Raises ApproxNotFoundError if config.max_segments segments aren't enough.
    """
    config = config or ConversionConfig.from_settings()
    for n in range(1, config.max_segments + 1):
        spline = approx_spline(cubic, n, max_err)
        if spline is not None:
            logger.debug("Tolerance %s yielded QuadSpline of len %d", max_err, n)
            return spline
    raise ApproxNotFoundError(cubic)
