"""Cubic Bézier → quadratic Bézier."""

from quadratize.cu2qu.approx import (
    approx_control,
    approx_quadratic,
    approx_spline,
    calc_intersect,
    curve_to_quadratic,
)
from quadratize.cu2qu.batch import curves_to_quadratic
from quadratize.cu2qu.split import farthest_fit_inside, split_into_n

__all__ = [
    "approx_control",
    "approx_quadratic",
    "approx_spline",
    "calc_intersect",
    "curve_to_quadratic",
    "curves_to_quadratic",
    "farthest_fit_inside",
    "split_into_n",
]
