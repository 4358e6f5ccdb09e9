"""
Fractal clock: an analog clock whose hands are recursively replaced by
scaled, rotated copies of themselves.

Every frame is a pure function of the current time and the view bounds.
"""

from .clock import ClockUnavailableError, now, seconds_since_midnight
from .vector import Vector2D
from .rotator import Rotator, rotation_angle, make_rotator, apply_rotator
from .oscillator import ScaleOscillator, variable_scale
from .branch import Branch, Stroke
from .generator import generate_strokes, draw_branch, stroke_count
from .frame import Bounds, Frame, FractalClock, HandRotations, hand_rotations
from .visualization import visualize_frame, animate_clock, plot_frame_statistics

__all__ = [
    'ClockUnavailableError',
    'now',
    'seconds_since_midnight',
    'Vector2D',
    'Rotator',
    'rotation_angle',
    'make_rotator',
    'apply_rotator',
    'ScaleOscillator',
    'variable_scale',
    'Branch',
    'Stroke',
    'generate_strokes',
    'draw_branch',
    'stroke_count',
    'Bounds',
    'Frame',
    'FractalClock',
    'HandRotations',
    'hand_rotations',
    'visualize_frame',
    'animate_clock',
    'plot_frame_statistics',
]
