"""Exact projective subdivision of conics."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray

from quadratize.co2qu.conic import Conic
from quadratize.coeffs import conic_coefficients, eval_poly
from quadratize.p3d import interp, ratquad_map
from quadratize.types import Point

# Parameters closer than this to 0 or 1 are treated as the endpoint.
T_EPSILON = 10 * float(np.finfo(np.float32).eps)


@dataclass(frozen=True)
class ConicPair:
    """Both halves of a chop, every coordinate finite."""

    left: Conic
    right: Conic

    def __iter__(self) -> Iterator[Conic]:
        yield self.left
        yield self.right


@dataclass(frozen=True)
class DegenerateChop:
    """A chop whose projection produced inf/nan coordinates.

    Extreme weights make the homogeneous z collapse toward zero. The halves
    are kept for inspection only; they are not usable geometry.
    """

    left: Conic
    right: Conic


ChopResult = Union[ConicPair, DegenerateChop]


def chop_at(conic: Conic, t: float) -> ChopResult:
    """Split a conic at t into two conics sharing the point at t."""
    with np.errstate(divide="ignore", invalid="ignore"):
        ab, abc, bc = interp(ratquad_map(conic.start, conic.control, conic.end, conic.weight), t)
        root = np.sqrt(np.float64(abc.z))
        left_weight = float(np.float64(ab.z) / root)
        right_weight = float(np.float64(bc.z) / root)
    mid = abc.project()

    left = Conic(conic.start, ab.project(), mid, left_weight)
    right = Conic(mid, bc.project(), conic.end, right_weight)
    if all(p.is_finite() for half in (left, right) for p in half.points):
        return ConicPair(left, right)
    return DegenerateChop(left, right)


def _to_point(xy: NDArray[np.float64]) -> Point:
    return Point(float(xy[0]), float(xy[1]))


def chop_at_t2(conic: Conic, t1: float, t2: float) -> Conic:
    """Sub-conic covering the parameter interval [t1, t2]."""
    at_start = t1 < T_EPSILON
    at_end = t2 > 1.0 - T_EPSILON
    if at_start and at_end:
        return conic
    if at_start or at_end:
        # One end of the interval is an end of the curve: a single chop is exact.
        result = chop_at(conic, t2 if at_start else t1)
        if isinstance(result, ConicPair):
            return result.left if at_start else result.right

    # Evaluate the rational form at both ends and the middle of the interval,
    # then recover the middle homogeneous control point from the midpoint.
    mid_t = (t1 + t2) * 0.5
    with np.errstate(divide="ignore", invalid="ignore"):
        numer, denom = conic_coefficients(conic.start, conic.control, conic.end, conic.weight)
        a_xy, a_z = eval_poly(numer, t1), eval_poly(denom, t1)
        d_xy, d_z = eval_poly(numer, mid_t), eval_poly(denom, mid_t)
        c_xy, c_z = eval_poly(numer, t2), eval_poly(denom, t2)
        b_xy = d_xy * 2.0 - (a_xy + c_xy) * 0.5
        b_z = d_z * 2.0 - (a_z + c_z) * 0.5
        start = a_xy / a_z
        control = b_xy / b_z
        end = c_xy / c_z
        weight = b_z / np.sqrt(a_z * c_z)
    return Conic(_to_point(start), _to_point(control), _to_point(end), float(weight))


def chop(conic: Conic) -> tuple[Conic, Conic]:
    """Halves over [0, 0.5] and [0.5, 1]."""
    return (chop_at_t2(conic, 0.0, 0.5), chop_at_t2(conic, 0.5, 1.0))


def subdivide(conic: Conic, level: int) -> list[Conic]:
    """Split into 2**level conics, left to right."""
    if level < 0:
        raise ValueError(f"Subdivision level must be >= 0, got {level}")
    conics = [conic]
    for _ in range(level):
        conics = [half for c in conics for half in chop(c)]
    return conics
