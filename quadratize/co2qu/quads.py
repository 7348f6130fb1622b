"""Conic → quadratic spline by power-of-two subdivision."""

from __future__ import annotations

import logging

from quadratize.co2qu.chop import chop, subdivide
from quadratize.co2qu.conic import Conic
from quadratize.co2qu.pow2 import quad_pow2
from quadratize.config import ConversionConfig
from quadratize.types import Quad, QuadSpline

logger = logging.getLogger(__name__)


def _collapse_to_lines(conic: Conic) -> QuadSpline | None:
    """Two line segments when both halves of the conic are already lines.

    Near-infinite weights pull the curve onto its control point. The check
    runs once on the level-1 halves instead of scanning the 2**max fan, and
    since both halves are lines the result is two line segments through the
    control point, never a line followed by a quad.
    """
    left, right = chop(conic)
    if left.control == left.end and right.start == right.control:
        # ctrl == end makes each quad a line
        m = left.control
        return [(conic.start, m, m), (m, m, conic.end)]
    return None


def _pin_non_finite(spline: QuadSpline, conic: Conic) -> QuadSpline:
    """Pin the segments holding inf/nan to the conic's control point.

    A pinned segment takes the control as its own control point and as every
    junction it shares with a neighbour. Finite segments keep their control
    points. The first and last points are always conic.start and conic.end.
    """
    bad = [not all(p.is_finite() for p in quad) for quad in spline]
    if not any(bad):
        return spline
    logger.debug(
        "Pinning %d non-finite quad(s) for weight %s to control point", sum(bad), conic.weight
    )
    c = conic.control
    junctions = [conic.start]
    for i in range(len(spline) - 1):
        junctions.append(c if bad[i] or bad[i + 1] else spline[i][2])
    junctions.append(conic.end)
    pinned: QuadSpline = []
    for i, (_, control, _) in enumerate(spline):
        quad: Quad = (junctions[i], c if bad[i] else control, junctions[i + 1])
        pinned.append(quad)
    return pinned


def as_quads(conic: Conic, tol: float, config: ConversionConfig | None = None) -> QuadSpline:
    """Approximate a conic with 2**level quads, level chosen from tol.

    Never raises: degenerate weights still produce a finite spline from
    conic.start to conic.end.
    """
    config = config or ConversionConfig.from_settings()
    level = quad_pow2(conic, tol, config)

    if level == config.max_quad_pow2:
        lines = _collapse_to_lines(conic)
        if lines is not None:
            logger.warning("Tolerance %s caused lines to be generated, not quads", tol)
            return _pin_non_finite(lines, conic)

    spline: QuadSpline = [sub.points for sub in subdivide(conic, level)]
    spline = _pin_non_finite(spline, conic)
    logger.debug("Tolerance %s yielded QuadSpline of len %d (level %d)", tol, len(spline), level)
    return spline
