"""Bernstein <-> monomial coefficient conversions.

Coefficient arrays hold one row per power, highest first, with x/y columns:
a cubic B(t) = a·t³ + b·t² + c·t + d is the (4, 2) array [a, b, c, d].
Leading axes broadcast, so (n, 4, 2) stacks convert in one call.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from quadratize.types import Cubic, Point, Quad

_CUBIC_TO_POWER = np.array(
    [
        [-1.0, 3.0, -3.0, 1.0],
        [3.0, -6.0, 3.0, 0.0],
        [-3.0, 3.0, 0.0, 0.0],
        [1.0, 0.0, 0.0, 0.0],
    ]
)

_POWER_TO_CUBIC = np.array(
    [
        [0.0, 0.0, 0.0, 1.0],
        [0.0, 0.0, 1.0 / 3.0, 1.0],
        [0.0, 1.0 / 3.0, 2.0 / 3.0, 1.0],
        [1.0, 1.0, 1.0, 1.0],
    ]
)

_QUAD_TO_POWER = np.array(
    [
        [1.0, -2.0, 1.0],
        [-2.0, 2.0, 0.0],
        [1.0, 0.0, 0.0],
    ]
)

_POWER_TO_QUAD = np.array(
    [
        [0.0, 0.0, 1.0],
        [0.0, 0.5, 1.0],
        [1.0, 1.0, 1.0],
    ]
)


def points_to_array(points: Sequence[Point]) -> NDArray[np.float64]:
    """Stack points into an (N, 2) array."""
    return np.array([[p.x, p.y] for p in points], dtype=np.float64)


def array_to_points(arr: NDArray[np.float64]) -> tuple[Point, ...]:
    return tuple(Point(float(row[0]), float(row[1])) for row in arr)


def cubic_coefficients(cubic: Cubic) -> NDArray[np.float64]:
    """Control points → [a, b, c, d]."""
    return _CUBIC_TO_POWER @ points_to_array(cubic)


def cubic_points_array(coeffs: NDArray[np.float64]) -> NDArray[np.float64]:
    """[a, b, c, d] → control points, broadcasting over leading axes."""
    return _POWER_TO_CUBIC @ coeffs


def cubic_points(coeffs: NDArray[np.float64]) -> Cubic:
    p0, p1, p2, p3 = array_to_points(cubic_points_array(coeffs))
    return (p0, p1, p2, p3)


def quad_coefficients(quad: Quad) -> NDArray[np.float64]:
    """Control points → [a, b, c] for B(t) = a·t² + b·t + c."""
    return _QUAD_TO_POWER @ points_to_array(quad)


def quad_points(coeffs: NDArray[np.float64]) -> Quad:
    p0, p1, p2 = array_to_points(_POWER_TO_QUAD @ coeffs)
    return (p0, p1, p2)


def conic_coefficients(
    start: Point, control: Point, end: Point, weight: float
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Rational form of a conic: numerator (3, 2) and denominator (3,).

    The numerator is the quadratic over (start, w·control, end), the
    denominator the quadratic over (1, w, 1).
    """
    numer = _QUAD_TO_POWER @ np.array(
        [[start.x, start.y], [control.x * weight, control.y * weight], [end.x, end.y]],
        dtype=np.float64,
    )
    denom = _QUAD_TO_POWER @ np.array([1.0, weight, 1.0], dtype=np.float64)
    return numer, denom


def eval_poly(coeffs: NDArray[np.float64], t: float) -> NDArray[np.float64]:
    """Horner evaluation of a highest-power-first coefficient array."""
    result = coeffs[0]
    for row in coeffs[1:]:
        result = result * t + row
    return result
