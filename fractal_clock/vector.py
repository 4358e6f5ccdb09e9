"""
Immutable 2D vector used for branch origins and displacements.
"""

import math
from typing import NamedTuple


class Vector2D(NamedTuple):
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Vector2D':
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> 'Vector2D':
        return self.__mul__(scalar)

    def __neg__(self) -> 'Vector2D':
        return Vector2D(-self.x, -self.y)

    def __repr__(self) -> str:
        return f"Vector2D({self.x:.2f}, {self.y:.2f})"

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Direction in radians, counter-clockwise from +x."""
        return math.atan2(self.y, self.x)

    def isclose(self, other, abs_tol: float = 1e-9) -> bool:
        ox, oy = other
        return math.isclose(self.x, ox, abs_tol=abs_tol) and math.isclose(self.y, oy, abs_tol=abs_tol)

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t) -> 'Vector2D':
        return cls(float(t[0]), float(t[1]))
