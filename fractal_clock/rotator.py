"""
Hand angles and rotators.

A rotator is a rotation by an angle combined with a uniform scale, stored as
(cos * scale, sin * scale) so it can be applied as a complex multiplication.
"""

import math
from typing import NamedTuple

from .vector import Vector2D

HOUR_PERIOD = 12 * 60 * 60
MINUTE_PERIOD = 60 * 60
SECOND_PERIOD = 60


class Rotator(NamedTuple):
    scaled_cos: float
    scaled_sin: float

    @property
    def scale(self) -> float:
        return math.hypot(self.scaled_cos, self.scaled_sin)


def rotation_angle(now: float, period: float) -> float:
    """Radians from 12 o'clock that a hand with the given period shows at `now`."""
    return -2 * math.pi * math.fmod(now, period) / period


def make_rotator(angle: float, scale: float) -> Rotator:
    return Rotator(math.cos(angle) * scale, math.sin(angle) * scale)


def apply_rotator(rotator: Rotator, vector) -> Vector2D:
    w, h = vector
    a, b = rotator
    return Vector2D(w * a - h * b, w * b + h * a)
