"""
Rendering module for the fractal clock.
Uses Cairo for resolution-independent vector graphics.
"""

from config.render_config import ClockRenderConfig
from .clock_renderer import ClockRenderer
from .exporters import (
    export_frame_data,
    load_frame_data,
    strokes_from_data
)
