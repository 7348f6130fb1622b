"""Homogeneous (projective) points for rational curve interpolation.

A Point3 (x, y, z) stands for the 2D point (x/z, y/z). Lifting a conic's
control point by its weight makes de Casteljau interpolation linear again.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from quadratize.types import Point


@dataclass(frozen=True)
class Point3:
    """Homogeneous point backed by a length-3 float64 vector."""

    xyz: NDArray[np.float64]

    @classmethod
    def new(cls, x: float, y: float, z: float) -> Point3:
        return cls(np.array([x, y, z], dtype=np.float64))

    @property
    def x(self) -> float:
        return float(self.xyz[0])

    @property
    def y(self) -> float:
        return float(self.xyz[1])

    @property
    def z(self) -> float:
        return float(self.xyz[2])

    def lerp(self, other: Point3, t: float) -> Point3:
        return Point3(self.xyz + (other.xyz - self.xyz) * t)

    def project(self) -> Point:
        """Divide x and y by z. z == 0 gives inf/nan rather than raising."""
        with np.errstate(divide="ignore", invalid="ignore"):
            xy = self.xyz[:2] / self.xyz[2]
        return Point(float(xy[0]), float(xy[1]))


def ratquad_map(start: Point, control: Point, end: Point, weight: float) -> tuple[Point3, Point3, Point3]:
    """Lift a conic's points: endpoints at z=1, control scaled by weight."""
    return (
        Point3.new(start.x, start.y, 1.0),
        Point3.new(control.x * weight, control.y * weight, weight),
        Point3.new(end.x, end.y, 1.0),
    )


def interp(src: tuple[Point3, Point3, Point3], t: float) -> tuple[Point3, Point3, Point3]:
    """Two-stage linear interpolation. Returns (ab, abc, bc)."""
    ab = src[0].lerp(src[1], t)
    bc = src[1].lerp(src[2], t)
    return (ab, ab.lerp(bc, t), bc)
