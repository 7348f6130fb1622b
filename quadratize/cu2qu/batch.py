"""Fit several cubics with one shared segment count.

Interpolation between font masters needs corresponding curves to carry the
same number of quads, not just each be accurate on its own.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from quadratize.config import ConversionConfig
from quadratize.cu2qu.approx import approx_spline
from quadratize.errors import ApproxNotFoundError
from quadratize.types import Cubic, QuadSpline

logger = logging.getLogger(__name__)


@dataclass
class _RingState:
    """Position in the round-robin over the curves."""

    # Curve being tried
    index: int = 0
    # Curve that last forced the segment count up; reaching it again ends the ring
    last_changed: int = 0
    # Segment count every curve is currently fitted with
    segments: int = 1


def curves_to_quadratic(
    cubics: Sequence[Cubic],
    tolerances: Sequence[float],
    config: ConversionConfig | None = None,
) -> list[QuadSpline]:
    """Quadratic splines for all cubics, each within its own tolerance.

    Every returned spline has the same length. Raises ApproxNotFoundError if
    no count up to config.max_segments satisfies all curves.
    """
    if len(cubics) != len(tolerances):
        raise ValueError(
            f"Got {len(cubics)} curves but {len(tolerances)} tolerances"
        )
    if not cubics:
        return []
    config = config or ConversionConfig.from_settings()

    count = len(cubics)
    splines: list[QuadSpline | None] = [None] * count
    ring = _RingState()
    while True:
        spline = approx_spline(cubics[ring.index], ring.segments, tolerances[ring.index])
        if spline is None:
            if ring.segments >= config.max_segments:
                break
            ring.segments += 1
            ring.last_changed = ring.index
            continue
        splines[ring.index] = spline
        ring.index = (ring.index + 1) % count
        if ring.index == ring.last_changed:
            logger.debug("%d curves fitted with %d quads each", count, ring.segments)
            return [s for s in splines if s is not None]
    raise ApproxNotFoundError(list(cubics))
