"""Two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2-D vector."""

    x: float
    y: float

    @staticmethod
    def dot(a: Vec2, b: Vec2) -> float:
        """Dot product of two vectors."""
        return a.x * b.x + a.y * b.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction.

        The zero vector has no direction; its components come back as NaN.
        """
        size = self.length()
        if size == 0.0:
            return Vec2(math.nan, math.nan)
        return Vec2(self.x / size, self.y / size)

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: object) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(factor * self.x, factor * self.y)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y