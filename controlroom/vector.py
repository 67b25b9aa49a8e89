"""Two-dimensional vectors with float and integer components."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Vector2f:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalise(self) -> Vector2f:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude() or 1.0
        return Vector2f(self.x / mag, self.y / mag)

    def __add__(self, other: object) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vector2f:
        if isinstance(other, Vector2f):
            return Vector2f(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2f(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector2f:
        if isinstance(other, (int, float)):
            return Vector2f(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x / other.x, self.y / other.y)


@dataclass(frozen=True)
class Vector2i:
    """An immutable 2D vector of integers; division truncates toward zero."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Vector2i:
        if not isinstance(other, Vector2i):
            return NotImplemented
        return Vector2i(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2i:
        if not isinstance(other, Vector2i):
            return NotImplemented
        return Vector2i(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vector2i:
        if not isinstance(other, Vector2i):
            return NotImplemented
        return Vector2i(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: object) -> Vector2i:
        if not isinstance(other, Vector2i):
            return NotImplemented
        return Vector2i(_trunc_div(self.x, other.x), _trunc_div(self.y, other.y))