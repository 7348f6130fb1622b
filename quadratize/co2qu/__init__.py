"""Conic (rational quadratic Bézier) → quadratic Bézier."""

from quadratize.co2qu.chop import ConicPair, DegenerateChop, chop, chop_at, chop_at_t2, subdivide
from quadratize.co2qu.conic import Conic, ConicKind, eval_at, eval_tangent_at
from quadratize.co2qu.pow2 import below_quad_tolerance, quad_error, quad_pow2
from quadratize.co2qu.quads import as_quads

__all__ = [
    "Conic",
    "ConicKind",
    "ConicPair",
    "DegenerateChop",
    "as_quads",
    "below_quad_tolerance",
    "chop",
    "chop_at",
    "chop_at_t2",
    "eval_at",
    "eval_tangent_at",
    "quad_error",
    "quad_pow2",
    "subdivide",
]
