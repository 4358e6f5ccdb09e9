"""
Unified configuration for the fractal clock tools.

All output paths are derived from run_name and output_base.
This is the single source of truth for the CLI scripts.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union
from pathlib import Path
import json

from .clock_config import SCALE_MIN_DEFAULT, SCALE_MAX_DEFAULT, validate_pattern

SECONDS_PER_DAY = 24 * 60 * 60


def _check_in_day(seconds: float, value) -> float:
    if not 0 <= seconds < SECONDS_PER_DAY:
        raise ValueError(f"Clock time out of range: {value!r}")
    return seconds


def parse_clock_time(value: Union[str, float, int]) -> float:
    """Parse "HH:MM[:SS[.ffff]]" or a plain number into seconds since midnight."""
    if isinstance(value, (int, float)):
        return _check_in_day(float(value), value)

    parts = value.strip().split(':')
    if len(parts) == 1:
        return _check_in_day(float(parts[0]), value)
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid clock time: {value!r}")

    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = float(parts[2]) if len(parts) == 3 else 0.0
    if not (0 <= hours < 24 and 0 <= minutes < 60 and 0 <= seconds < 60):
        raise ValueError(f"Clock time out of range: {value!r}")
    return (hours * 60 + minutes) * 60 + seconds


@dataclass
class PipelineConfig:
    """
    Unified configuration for the fractal clock.
    All output paths are derived from run_name.
    """

    # ==================== MAIN SETTING ====================
    run_name: str = 'fractal_clock'

    # ==================== OUTPUT SETTINGS ====================
    output_base: str = 'outputs'

    # ==================== CLOCK SETTINGS ====================
    # None = read the wall clock
    start_time: Optional[Union[str, float]] = None
    preview_mode: bool = False

    scale_min: float = SCALE_MIN_DEFAULT
    scale_max: float = SCALE_MAX_DEFAULT
    expansion_pattern: List[float] = field(default_factory=lambda: [60.0, 12.0, 60.0, 12.0])
    max_depth: int = 10
    line_width: float = 2.0

    # ==================== RENDERING SETTINGS ====================
    render_size: int = 512
    render_fps: int = 20
    animation_seconds: float = 10.0
    # Clock seconds that elapse per second of rendered animation
    time_scale: float = 6.0

    def __post_init__(self):
        validate_pattern(self.expansion_pattern)
        if self.start_time is not None:
            parse_clock_time(self.start_time)
        if self.render_fps <= 0:
            raise ValueError(f"render_fps must be positive, got {self.render_fps}")

    @property
    def start_seconds(self) -> Optional[float]:
        if self.start_time is None:
            return None
        return parse_clock_time(self.start_time)

    @property
    def animation_frames(self) -> int:
        return max(1, int(round(self.animation_seconds * self.render_fps)))

    @property
    def frame_step(self) -> float:
        """Clock seconds between consecutive animation frames."""
        return self.time_scale / self.render_fps

    # ==================== DERIVED PATHS ====================
    @property
    def output_dir(self) -> Path:
        return Path(self.output_base) / 'clock'

    @property
    def frame_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_frame.png'

    @property
    def stats_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_stats.png'

    @property
    def preview_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_preview.png'

    @property
    def frame_data_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_frame_data.json'

    @property
    def animation_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_animation.gif'

    def create_output_dirs(self):
        self.output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/clock.json') -> PipelineConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return PipelineConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    return PipelineConfig(**data)


def save_config(config: PipelineConfig, path: str = 'config/clock.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'run_name': config.run_name,
        'output_base': config.output_base,
        'start_time': config.start_time,
        'preview_mode': config.preview_mode,
        'scale_min': config.scale_min,
        'scale_max': config.scale_max,
        'expansion_pattern': list(config.expansion_pattern),
        'max_depth': config.max_depth,
        'line_width': config.line_width,
        'render_size': config.render_size,
        'render_fps': config.render_fps,
        'animation_seconds': config.animation_seconds,
        'time_scale': config.time_scale,
    }

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved config to {config_path}")
