"""Optional svgpathtools interop for callers: cubics in from SVG path data,
quad splines out.

The conversion functions never import this module; reading input curves and
emitting outline commands stays with the caller, and these helpers are one
way to do it for SVG. svgpathtools stores points as complex numbers (x + yj).
"""

from __future__ import annotations

import logging

from svgpathtools import Arc, CubicBezier, Path, QuadraticBezier, parse_path

from quadratize.co2qu.conic import Conic
from quadratize.co2qu.quads import as_quads
from quadratize.config import ConversionConfig
from quadratize.types import Cubic, Point, QuadSpline

logger = logging.getLogger(__name__)


def to_complex(p: Point) -> complex:
    return complex(p.x, p.y)


def from_complex(z: complex) -> Point:
    return Point(float(z.real), float(z.imag))


def cubic_from_segment(seg: CubicBezier) -> Cubic:
    if not isinstance(seg, CubicBezier):
        raise TypeError(f"Expected CubicBezier, got {type(seg).__name__}")
    return (
        from_complex(seg.start),
        from_complex(seg.control1),
        from_complex(seg.control2),
        from_complex(seg.end),
    )


def cubics_from_path_data(d: str) -> list[Cubic]:
    """Cubic segments of an SVG path, in path order.

    Lines and quads need no conversion and are left out; arcs are left out
    with a warning.
    """
    path = parse_path(d)
    cubics: list[Cubic] = []
    skipped_arcs = 0
    for seg in path:
        if isinstance(seg, CubicBezier):
            cubics.append(cubic_from_segment(seg))
        elif isinstance(seg, Arc):
            skipped_arcs += 1
    if skipped_arcs:
        logger.warning("Skipped %d arc segment(s) in path data", skipped_arcs)
    logger.debug("Extracted %d cubic(s) from %d segment(s)", len(cubics), len(path))
    return cubics


def spline_to_path(spline: QuadSpline) -> Path:
    return Path(
        *(QuadraticBezier(to_complex(p0), to_complex(p1), to_complex(p2)) for p0, p1, p2 in spline)
    )


def spline_to_path_data(spline: QuadSpline) -> str:
    """SVG `d` string made of one Q command per segment."""
    return spline_to_path(spline).d()


def conic_to_path_data(conic: Conic, tol: float, config: ConversionConfig | None = None) -> str:
    return spline_to_path_data(as_quads(conic, tol, config))
