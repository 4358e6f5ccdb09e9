"""
Configuration for the fractal clock geometry.
"""

from dataclasses import dataclass
from typing import Tuple

SCALE_MIN_DEFAULT = 0.793700525984099737  # cube root of 1/2
SCALE_MAX_DEFAULT = 1.0

Colour = Tuple[float, float, float]


def validate_pattern(pattern) -> Tuple[float, float, float, float]:
    """Check that an expansion pattern has four strictly positive durations."""
    values = tuple(float(d) for d in pattern)
    if len(values) != 4:
        raise ValueError(f"expansion pattern needs 4 durations, got {len(values)}")
    if any(d <= 0 for d in values):
        raise ValueError(f"expansion pattern durations must be positive: {values}")
    return values


@dataclass
class ClockConfig:
    # Generation-to-generation contraction, oscillating between the two
    scale_min: float = SCALE_MIN_DEFAULT
    scale_max: float = SCALE_MAX_DEFAULT
    # hold-min, ease up, hold-max, ease down (seconds)
    expansion_pattern: Tuple[float, float, float, float] = (60.0, 12.0, 60.0, 12.0)

    colour_generation_scale: float = 0.85
    green_decay: float = 0.92
    colour_offset: float = 0.1
    initial_colour: Colour = (1.0, 1.0, 1.0)

    max_depth: int = 10
    line_width: float = 2.0
    root_divisor: float = 6.0  # root hand length = short side / root_divisor

    acceleration: float = 6.0  # preview mode time multiplier

    def __post_init__(self):
        self.expansion_pattern = validate_pattern(self.expansion_pattern)
        if self.scale_min > self.scale_max:
            raise ValueError(
                f"scale_min ({self.scale_min}) must not exceed scale_max ({self.scale_max})"
            )
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if len(self.initial_colour) != 3:
            raise ValueError("initial_colour must have three channels")
        self.initial_colour = tuple(float(c) for c in self.initial_colour)
        if not all(0.0 <= c <= 1.0 for c in self.initial_colour):
            raise ValueError(f"initial_colour channels must lie in [0, 1], got {self.initial_colour}")
        if self.root_divisor <= 0:
            raise ValueError(f"root_divisor must be positive, got {self.root_divisor}")

    @property
    def cycle_period(self) -> float:
        return sum(self.expansion_pattern)

    @classmethod
    def from_pipeline(cls, pipeline_config) -> 'ClockConfig':
        """Create Clock Config from PipelineConfig."""
        return cls(
            scale_min=pipeline_config.scale_min,
            scale_max=pipeline_config.scale_max,
            expansion_pattern=tuple(pipeline_config.expansion_pattern),
            max_depth=pipeline_config.max_depth,
            line_width=pipeline_config.line_width,
        )
