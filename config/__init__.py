"""
Configuration module.
"""

from .pipeline import PipelineConfig, load_config, save_config, parse_clock_time
from .clock_config import ClockConfig, validate_pattern
from .render_config import ClockRenderConfig

__all__ = [
    'PipelineConfig',
    'load_config',
    'save_config',
    'parse_clock_time',
    'ClockConfig',
    'validate_pattern',
    'ClockRenderConfig',
]
