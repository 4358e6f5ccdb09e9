"""
Variable scale oscillator.

Cycles the generation-to-generation scale through four phases:
hold at scale_min, ease up to scale_max, hold at scale_max, ease back down.
Eases use a raised cosine so the scale is continuous at every boundary.
"""

import math
from itertools import accumulate
from typing import Sequence, Tuple

from config.clock_config import (
    ClockConfig,
    SCALE_MAX_DEFAULT,
    SCALE_MIN_DEFAULT,
    validate_pattern,
)

DEFAULT_PATTERN = (60.0, 12.0, 60.0, 12.0)


def _ease(start: float, end: float, fraction: float) -> float:
    # fraction 0 -> start, 1 -> end
    return end + (start - end) * (math.cos(math.pi * fraction) + 1) * 0.5


def _phase_index(t: float, bounds: Sequence[float]) -> int:
    for index, bound in enumerate(bounds[:3]):
        if t <= bound:
            return index
    return 3


def variable_scale(now: float,
                   pattern: Sequence[float] = DEFAULT_PATTERN,
                   scale_min: float = SCALE_MIN_DEFAULT,
                   scale_max: float = SCALE_MAX_DEFAULT) -> float:
    """
    Generate a variable fractal scale for more interesting designs.

    Args:
        now: Seconds since midnight
        pattern: Durations of the hold-min, ease-up, hold-max, ease-down phases
        scale_min: Scale while fully contracted
        scale_max: Scale while fully expanded

    Returns:
        The scale to use between fractal generations, in [scale_min, scale_max]
    """
    _, d1, _, d3 = pattern
    bounds = tuple(accumulate(pattern))
    t = math.fmod(now, bounds[-1])

    phase = _phase_index(t, bounds)
    if phase == 0:
        return scale_min
    if phase == 1:
        return _ease(scale_min, scale_max, (t - bounds[0]) / d1)
    if phase == 2:
        return scale_max
    return _ease(scale_max, scale_min, (t - bounds[2]) / d3)


class ScaleOscillator:
    """Variable scale bound to a validated pattern and scale range."""

    def __init__(self,
                 pattern: Sequence[float] = DEFAULT_PATTERN,
                 scale_min: float = SCALE_MIN_DEFAULT,
                 scale_max: float = SCALE_MAX_DEFAULT):
        self.pattern: Tuple[float, ...] = validate_pattern(pattern)
        if scale_min > scale_max:
            raise ValueError(f"scale_min ({scale_min}) must not exceed scale_max ({scale_max})")
        self.scale_min = scale_min
        self.scale_max = scale_max
        self._bounds = tuple(accumulate(self.pattern))

    @classmethod
    def from_config(cls, config: ClockConfig) -> 'ScaleOscillator':
        return cls(config.expansion_pattern, config.scale_min, config.scale_max)

    @property
    def period(self) -> float:
        return self._bounds[-1]

    def phase(self, now: float) -> int:
        """Index (0-3) of the phase active at `now`."""
        return _phase_index(math.fmod(now, self.period), self._bounds)

    def __call__(self, now: float) -> float:
        return variable_scale(now, self.pattern, self.scale_min, self.scale_max)

    def __repr__(self) -> str:
        return (f"ScaleOscillator(pattern={self.pattern}, "
                f"scale_min={self.scale_min:.4f}, scale_max={self.scale_max:.4f})")
