"""
Branch and Stroke records - one segment of the fractal clock tree.
"""

from typing import NamedTuple, Tuple

from .vector import Vector2D
from .rotator import Rotator, apply_rotator

Colour = Tuple[float, float, float]


def opacity_for_depth(depth: int) -> float:
    """Harmonic falloff: the root is opaque, deeper branches fade as 1/depth."""
    return 1.0 if depth == 0 else 1.0 / depth


class Stroke(NamedTuple):
    start: Vector2D
    end: Vector2D
    rgba: Tuple[float, float, float, float]
    width: float
    depth: int

    @property
    def length(self) -> float:
        return (self.end - self.start).magnitude

    @property
    def opacity(self) -> float:
        return self.rgba[3]


class Branch:
    __slots__ = ('origin', 'displacement', 'depth', 'colour')

    def __init__(self, origin: Vector2D, displacement: Vector2D,
                 depth: int = 0, colour: Colour = (1.0, 1.0, 1.0)):
        self.origin = origin
        self.displacement = displacement
        self.depth = depth
        self.colour = colour

    @property
    def end(self) -> Vector2D:
        return self.origin + self.displacement

    @property
    def midpoint(self) -> Vector2D:
        return self.origin + self.displacement * 0.5

    @property
    def length(self) -> float:
        return self.displacement.magnitude

    @property
    def opacity(self) -> float:
        return opacity_for_depth(self.depth)

    def child(self, rotator: Rotator, colour: Colour) -> 'Branch':
        """Branch rooted at this one's tip, rotated and scaled by `rotator`."""
        return Branch(self.end, apply_rotator(rotator, self.displacement),
                      self.depth + 1, colour)

    def to_stroke(self, width: float = 2.0) -> Stroke:
        # The root hand pivots at its centre, so only its outer half is drawn
        start = self.midpoint if self.depth == 0 else self.origin
        r, g, b = self.colour
        return Stroke(start, self.end, (r, g, b, self.opacity), width, self.depth)

    def __repr__(self) -> str:
        return f"Branch({self.origin} -> {self.end}, depth={self.depth})"
