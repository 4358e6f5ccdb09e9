"""
Fractal clock renderer using Cairo.
Turns the generator's stroke sequence into RGBA images and animations.
"""

import cairo
import numpy as np
import imageio
import multiprocessing
from tqdm import tqdm
from typing import Iterable, Optional
from pathlib import Path

from config.clock_config import ClockConfig
from config.render_config import ClockRenderConfig
from fractal_clock.branch import Stroke
from fractal_clock.frame import Bounds, FractalClock
from .base import Renderer

LINE_CAPS = {
    'butt': cairo.LINE_CAP_BUTT,
    'round': cairo.LINE_CAP_ROUND,
    'square': cairo.LINE_CAP_SQUARE,
}


def render_clock_frame_wrapper(args):
    render_config, clock_config, preview_mode, now = args
    renderer = ClockRenderer(render_config)
    clock = FractalClock(clock_config, preview_mode=preview_mode)
    return renderer.render_clock(clock, now=now)


class ClockRenderer(Renderer):
    def __init__(self, config: ClockRenderConfig = None):
        super().__init__(config or ClockRenderConfig())

    @property
    def bounds(self) -> Bounds:
        return Bounds.from_size(self.config.output_width, self.config.output_height)

    def _apply_orientation(self, ctx: cairo.Context):
        if self.config.flip_y:
            ctx.translate(0, self.config.output_height)
            ctx.scale(1, -1)

    def _draw_strokes(self, ctx: cairo.Context, strokes: Iterable[Stroke]) -> int:
        ctx.set_line_cap(LINE_CAPS[self.config.line_cap])
        count = 0
        for stroke in strokes:
            r, g, b, a = stroke.rgba
            ctx.set_source_rgba(r, g, b, a)
            ctx.set_line_width(stroke.width * self.config.width_scale)
            ctx.move_to(*stroke.start)
            ctx.line_to(*stroke.end)
            ctx.stroke()
            count += 1
        return count

    def render_frame(self, strokes: Iterable[Stroke]) -> np.ndarray:
        surface, ctx = self._create_surface()
        ctx.save()
        self._apply_orientation(ctx)
        self._draw_strokes(ctx, strokes)
        ctx.restore()
        return self._surface_to_numpy(surface)

    def render_clock(self, clock: FractalClock, now: Optional[float] = None) -> np.ndarray:
        """Render the clock at `now` (or its current time) to fill the output."""
        return self.render_frame(clock.strokes(self.bounds, now))

    def save_frame(self, strokes: Iterable[Stroke], output_path: str):
        frame = self.render_frame(strokes)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, frame)

    def render_animation(self, start: float, output_path: str, frames: int,
                         fps: int = 20, step: float = 1.0,
                         clock_config: ClockConfig = None,
                         preview_mode: bool = False,
                         parallel: bool = True):
        """
        Render `frames` frames starting at clock time `start`,
        advancing `step` clock seconds per frame.
        """
        clock_config = clock_config or ClockConfig()
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        tasks = [
            (self.config, clock_config, preview_mode, start + i * step)
            for i in range(frames)
        ]

        if parallel and frames > 1:
            num_cores = max(1, multiprocessing.cpu_count() - 1)
            print(f"Rendering with {num_cores} cores...")
            with multiprocessing.Pool(processes=num_cores) as pool:
                images = list(tqdm(pool.imap(render_clock_frame_wrapper, tasks),
                                   total=len(tasks), desc="Rendering clock frames (Parallel)"))
        else:
            images = [render_clock_frame_wrapper(t) for t in tqdm(tasks, desc="Rendering clock frames")]

        if Path(output_path).suffix.lower() == ".gif":
            imageio.mimsave(output_path, images, duration=1000 / fps, loop=0)
        else:
            imageio.mimsave(output_path, images, fps=fps)
        print(f"  Saved animation: {output_path}")
        return images
