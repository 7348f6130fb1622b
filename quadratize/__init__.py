"""quadratize: convert conic and cubic Bézier segments to quadratic splines."""

from quadratize.co2qu import Conic, ConicKind, as_quads
from quadratize.config import ConversionConfig, configure_logging, settings
from quadratize.cu2qu import curve_to_quadratic, curves_to_quadratic
from quadratize.errors import ApproxNotFoundError
from quadratize.types import Cubic, Point, Quad, QuadSpline

__all__ = [
    "ApproxNotFoundError",
    "Conic",
    "ConicKind",
    "ConversionConfig",
    "Cubic",
    "Point",
    "Quad",
    "QuadSpline",
    "as_quads",
    "configure_logging",
    "curve_to_quadratic",
    "curves_to_quadratic",
    "settings",
]
