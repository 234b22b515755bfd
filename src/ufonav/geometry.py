from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Point2D:
    """Immutable 2D point in screen-like coordinates (y grows downward in plots)."""

    x: float
    y: float

    def translate(self, dx: float, dy: float) -> Point2D:
        return Point2D(self.x + dx, self.y + dy)

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def as_array(self) -> np.ndarray:
        return np.asarray([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_xy(cls, xy: tuple[float, float] | list[float]) -> Point2D:
        """Build from any two-element sequence."""
        x, y = xy
        return cls(float(x), float(y))


def bearing(start: Point2D, end: Point2D) -> float:
    """Angle from start to end in radians, measured with atan2(dy, dx)."""
    return math.atan2(end.y - start.y, end.x - start.x)
