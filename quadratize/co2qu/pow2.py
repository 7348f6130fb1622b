"""How far a conic is from its own control polygon read as a quadratic."""

from __future__ import annotations

import math

import numpy as np

from quadratize.co2qu.conic import Conic
from quadratize.config import ConversionConfig


def quad_error(conic: Conic) -> tuple[float, float]:
    """Per-axis deviation of the quad (start, control, end) from the conic.

    With a = w - 1 the bound is a / (4·(2 + a)) · (start - 2·control + end).
    Weights near -1 blow up to inf/nan instead of raising.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        a = np.float64(conic.weight) - 1.0
        k = a / (4.0 * (2.0 + a))
        x = k * (conic.start.x - 2.0 * conic.control.x + conic.end.x)
        y = k * (conic.start.y - 2.0 * conic.control.y + conic.end.y)
    return float(x), float(y)


def below_quad_tolerance(conic: Conic, tol: float) -> bool:
    x, y = quad_error(conic)
    return x * x + y * y <= tol * tol


def quad_pow2(conic: Conic, tol: float, config: ConversionConfig | None = None) -> int:
    """Subdivision level whose 2**level quads fit within tol.

    Each halving of the segments cuts the error by 4. Capped at
    config.max_quad_pow2; a NaN error (degenerate weight) gives 0.
    """
    config = config or ConversionConfig.from_settings()
    x, y = quad_error(conic)
    # inf and nan together must stay nan
    error = math.sqrt(x * x + y * y)
    if math.isnan(error):
        return 0
    level = 0
    while level < config.max_quad_pow2 and error > tol:
        error *= 0.25
        level += 1
    return level
