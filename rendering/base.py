"""
Base renderer class defining the interface for all renderers.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from config.render_config import ClockRenderConfig


class Renderer(ABC):
    def __init__(self, config: ClockRenderConfig):
        self.config = config

    def _create_surface(self) -> Tuple[cairo.ImageSurface, cairo.Context]:
        surface = cairo.ImageSurface(
            cairo.FORMAT_ARGB32,
            self.config.output_width,
            self.config.output_height
        )
        ctx = cairo.Context(surface)

        if self.config.antialiasing:
            ctx.set_antialias(cairo.ANTIALIAS_BEST)
        else:
            ctx.set_antialias(cairo.ANTIALIAS_NONE)

        r, g, b, a = self.config.background_color
        ctx.set_source_rgba(r, g, b, a)
        ctx.paint()

        return surface, ctx

    def _surface_to_numpy(self, surface: cairo.ImageSurface) -> np.ndarray:
        surface.flush()
        buf = surface.get_data()
        stride = surface.get_stride()
        arr = np.ndarray(
            shape=(self.config.output_height, stride // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :self.config.output_width, :]
        # Cairo stores premultiplied BGRA on little-endian hosts
        return arr[:, :, [2, 1, 0, 3]].copy()

    @abstractmethod
    def render_frame(self, *args, **kwargs) -> np.ndarray:
        pass

    @abstractmethod
    def render_animation(self, *args, **kwargs):
        pass
