"""Conic (rational quadratic Bézier) model and evaluation.

A conic is a quadratic Bézier whose control point carries a weight applied in
homogeneous coordinates. The weight picks the section type:

    w < 1   ellipse
    w == 1  parabola (an ordinary quadratic Bézier)
    w > 1   hyperbola

https://pages.mtu.edu/~shene/COURSES/cs3621/NOTES/spline/NURBS/RB-conics.html
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from quadratize.coeffs import conic_coefficients, eval_poly
from quadratize.types import Point

# Weights this close to 1 count as parabolic.
PARABOLA_EPSILON = float(np.finfo(np.float32).eps)


class ConicKind(enum.Enum):
    ELLIPSE = "ellipse"
    PARABOLA = "parabola"
    HYPERBOLA = "hyperbola"


@dataclass(frozen=True)
class Conic:
    start: Point
    control: Point
    end: Point
    # Must be > 0; other values give degenerate (but never raising) results
    weight: float = 1.0

    @property
    def points(self) -> tuple[Point, Point, Point]:
        return (self.start, self.control, self.end)

    @property
    def kind(self) -> ConicKind:
        if abs(self.weight - 1.0) <= PARABOLA_EPSILON:
            return ConicKind.PARABOLA
        if self.weight < 1.0:
            return ConicKind.ELLIPSE
        return ConicKind.HYPERBOLA


def eval_at(conic: Conic, t: float) -> Point:
    """Point on the conic at parameter t in [0, 1]."""
    with np.errstate(divide="ignore", invalid="ignore"):
        numer, denom = conic_coefficients(conic.start, conic.control, conic.end, conic.weight)
        xy = eval_poly(numer, t) / eval_poly(denom, t)
    return Point(float(xy[0]), float(xy[1]))


def eval_tangent_at(conic: Conic, t: float) -> Point:
    """Tangent direction at t (scaled, not unit length)."""
    start, control, end = conic.points
    # The derivative vanishes at an endpoint that coincides with the control
    # point; fall back to the chord there.
    if (t == 0.0 and start == control) or (t == 1.0 and control == end):
        return end - start
    p20 = end - start
    p10 = control - start
    c = p10 * conic.weight
    a = p20 * conic.weight - p20
    b = p20 - c - c
    return (a * t + b) * t + c
