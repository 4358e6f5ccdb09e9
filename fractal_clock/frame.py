"""
Frame assembler - root hand geometry and hand rotators for the current time.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional

from config.clock_config import ClockConfig
from . import clock as clock_source
from .branch import Branch, Stroke
from .generator import generate_strokes
from .oscillator import ScaleOscillator
from .rotator import (
    HOUR_PERIOD,
    MINUTE_PERIOD,
    SECOND_PERIOD,
    Rotator,
    apply_rotator,
    make_rotator,
    rotation_angle,
)
from .vector import Vector2D


class Bounds(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, width: float, height: float) -> 'Bounds':
        return cls(0.0, 0.0, width, height)

    @property
    def midpoint(self) -> Vector2D:
        return Vector2D(self.x + self.width * 0.5, self.y + self.height * 0.5)

    @property
    def short_side(self) -> float:
        return min(self.width, self.height)


class HandRotations(NamedTuple):
    root: Branch
    minute_rotator: Rotator
    second_rotator: Rotator


def hand_rotations(preview_mode: bool,
                   bounds: Bounds,
                   now: Optional[float] = None,
                   config: Optional[ClockConfig] = None,
                   clock: Optional[clock_source.ClockSource] = None) -> HandRotations:
    """
    Return the hour hand branch and the minute/second rotations relative to it.

    Both relative rotators carry a negative scale, so each generation flips
    orientation and the tree alternates left and right.
    """
    config = config or ClockConfig()
    if now is None:
        now = clock_source.now(preview_mode, clock, config.acceleration)

    hour_angle = rotation_angle(now, HOUR_PERIOD)
    minute_angle = rotation_angle(now, MINUTE_PERIOD)
    second_angle = rotation_angle(now, SECOND_PERIOD)

    scale = ScaleOscillator.from_config(config)(now)

    hour_rotator = make_rotator(hour_angle, 1.0)
    minute_rotator = make_rotator(minute_angle - hour_angle, -scale)
    second_rotator = make_rotator(second_angle - hour_angle, -scale)

    root_length = bounds.short_side / config.root_divisor
    displacement = apply_rotator(hour_rotator, (0.0, -root_length))
    origin = bounds.midpoint - displacement

    root = Branch(origin, displacement, 0, config.initial_colour)
    return HandRotations(root, minute_rotator, second_rotator)


@dataclass
class Frame:
    now: float
    scale: float
    bounds: Bounds
    strokes: List[Stroke] = field(default_factory=list)

    @property
    def max_depth(self) -> int:
        return max((s.depth for s in self.strokes), default=0)

    def strokes_at_depth(self, depth: int) -> List[Stroke]:
        return [s for s in self.strokes if s.depth == depth]


class FractalClock:
    """Computes fractal clock frames from the wall clock (or a given time)."""

    def __init__(self, config: Optional[ClockConfig] = None, preview_mode: bool = False,
                 clock: Optional[clock_source.ClockSource] = None):
        self.config = config or ClockConfig()
        self.preview_mode = preview_mode
        self.clock = clock
        self.oscillator = ScaleOscillator.from_config(self.config)

    def now(self) -> float:
        return clock_source.now(self.preview_mode, self.clock, self.config.acceleration)

    def strokes(self, bounds: Bounds, now: Optional[float] = None) -> Iterator[Stroke]:
        if now is None:
            now = self.now()
        root, minute_rotator, second_rotator = hand_rotations(
            self.preview_mode, bounds, now=now, config=self.config
        )
        return generate_strokes(root, second_rotator, minute_rotator,
                                self.config.max_depth, self.config)

    def frame(self, bounds: Bounds, now: Optional[float] = None) -> Frame:
        if now is None:
            now = self.now()
        return Frame(
            now=now,
            scale=self.oscillator(now),
            bounds=bounds,
            strokes=list(self.strokes(bounds, now)),
        )
