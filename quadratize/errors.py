"""Conversion errors."""

from __future__ import annotations

from typing import Any


class ApproxNotFoundError(ValueError):
    """No quadratic spline within tolerance was found for the curve(s)."""

    def __init__(self, curve: Any) -> None:
        super().__init__(f"Could not approximate curve with a quadratic spline: {curve!r}")
        self.curve = curve
