"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class ClockRenderConfig:
    output_width: int = 512
    output_height: int = 512
    background_color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    # Geometry is generated y-up (12 o'clock points to +y); Cairo is y-down
    flip_y: bool = True
    line_cap: str = "round"  # "butt", "round", "square"
    width_scale: float = 1.0  # multiplier applied to each stroke's width

    antialiasing: bool = True
