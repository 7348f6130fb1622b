"""Cubic splitting and the conservative distance-from-origin bound."""

from __future__ import annotations

import numpy as np

from quadratize.coeffs import cubic_coefficients, cubic_points_array
from quadratize.types import Cubic, Point


def split_into_n(cubic: Cubic, n: int) -> list[Cubic]:
    """Split a cubic into n pieces over equal parameter intervals.

    Works on monomial coefficients: the piece starting at t1 with length dt
    is B(t1 + s·dt), whose coefficients follow directly from a, b, c, d.
    """
    if n < 1:
        raise ValueError(f"Cannot split a cubic into {n} pieces")
    a, b, c, d = cubic_coefficients(cubic)
    dt = 1.0 / n
    delta_2 = dt * dt
    delta_3 = dt * delta_2

    # One row per piece
    t1 = (np.arange(n, dtype=np.float64) * dt)[:, np.newaxis]
    t1_2 = t1 * t1
    a1 = np.broadcast_to(a * delta_3, (n, 2))
    b1 = (3.0 * a * t1 + b) * delta_2
    c1 = (2.0 * b * t1 + c + 3.0 * a * t1_2) * dt
    d1 = a * t1 * t1_2 + b * t1_2 + c * t1 + d

    pieces = cubic_points_array(np.stack([a1, b1, c1, d1], axis=1))
    return [
        (
            Point(float(p[0, 0]), float(p[0, 1])),
            Point(float(p[1, 0]), float(p[1, 1])),
            Point(float(p[2, 0]), float(p[2, 1])),
            Point(float(p[3, 0]), float(p[3, 1])),
        )
        for p in pieces
    ]


def farthest_fit_inside(cubic: Cubic, tolerance: float) -> bool:
    """True if the cubic stays within tolerance (squared) of the origin.

    Conservative: a False may be a curve that actually fits, a True never
    is one that doesn't. Used on residual curves (approximation - source).
    """
    p0, p1, p2, p3 = cubic
    if p2.norm_squared() <= tolerance and p1.norm_squared() <= tolerance:
        return True

    mid = (p0 + (p1 + p2) * 3.0 + p3) * 0.125
    # NaN compares False, so a non-finite residual is rejected here
    if not mid.norm_squared() <= tolerance:
        return False

    deriv3 = (p3 + p2 - p1 - p0) * 0.125
    return farthest_fit_inside(
        (p0, (p0 + p1) * 0.5, mid - deriv3, mid), tolerance
    ) and farthest_fit_inside((mid, mid + deriv3, (p2 + p3) * 0.5, p3), tolerance)
