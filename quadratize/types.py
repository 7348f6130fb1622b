"""Leaf-node curve value types. No algorithm imports."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Immutable 2D point. Arithmetic is component-wise, equality is exact."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Point:
        return Point(self.x * s, self.y * s)

    def __rmul__(self, s: float) -> Point:
        return self.__mul__(s)

    def __truediv__(self, s: float) -> Point:
        return Point(self.x / s, self.y / s)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def norm_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def lerp(self, other: Point, t: float) -> Point:
        """Point at parameter t on the segment self → other."""
        return self + (other - self) * t

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# Bézier segments: endpoints first and last, control points in between.
Cubic = tuple[Point, Point, Point, Point]
Quad = tuple[Point, Point, Point]

# Consecutive segments share end/start points.
QuadSpline = list[Quad]
